"""Partitioning into balls around representatives."""

import numpy as np

from geopartition.core.geometry import check_positive
from geopartition.core.partitioner import CoordinatePredicatePartitioner


class BallPartition(CoordinatePredicatePartitioner):
    """Partition points into balls of a given radius.

    Two points belong together when their Euclidean distance is below
    `radius`. Under the greedy algorithm every subset is contained in the
    ball of that radius around its representative, so members of one
    subset are at most ``2 * radius`` apart.

    Works in any dimensionality.

    Attributes:
        radius: Positive ball radius
    """

    __slots__ = ("radius",)

    def __init__(self, radius: float) -> None:
        self.radius = check_positive(radius, "radius")

    def __call__(self, x: np.ndarray, y: np.ndarray) -> bool:
        return float(np.linalg.norm(np.subtract(x, y, dtype=np.float64))) < self.radius

    def __repr__(self) -> str:
        return f"BallPartition(radius={self.radius})"
