"""Partitioning into lines parallel to a direction."""

from collections.abc import Sequence

import numpy as np

from geopartition.config import DEFAULT_TOLERANCE
from geopartition.core.geometry import check_tolerance, perpendicular_distance, unit_vector
from geopartition.core.partitioner import CoordinatePredicatePartitioner


class DirectionPartition(CoordinatePredicatePartitioner):
    """Partition points into lines parallel to `direction`.

    Two points belong together when the part of ``x - y`` orthogonal to the
    direction is shorter than `tol`, i.e. they lie on a common line along
    the direction.

    Attributes:
        direction: Unit direction vector (read-only)
        tol: Tolerance on the orthogonal distance
    """

    __slots__ = ("direction", "tol")

    def __init__(self, direction: Sequence[float] | np.ndarray, tol: float = DEFAULT_TOLERANCE) -> None:
        self.direction = unit_vector(direction, "direction")
        self.tol = check_tolerance(tol)

    @property
    def ndim(self) -> int:
        return self.direction.shape[0]

    def __call__(self, x: np.ndarray, y: np.ndarray) -> bool:
        dist = perpendicular_distance(x, y, self.direction)
        return dist < self.tol or dist == 0.0

    def __repr__(self) -> str:
        return f"DirectionPartition(direction={tuple(self.direction.tolist())}, tol={self.tol})"
