"""Partitioning into a family of parallel hyperplanes."""

from collections.abc import Sequence

import numpy as np

from geopartition.config import DEFAULT_TOLERANCE
from geopartition.core.geometry import check_tolerance, projected_distance, unit_vector
from geopartition.core.partitioner import CoordinatePredicatePartitioner


class PlanePartition(CoordinatePredicatePartitioner):
    """Partition points into hyperplanes orthogonal to a normal direction.

    Two points ``x`` and ``y`` belong to the same hyperplane when
    ``|(x - y) . n| < tol``, with ``n`` the normal scaled to unit length.
    Membership in a band is transitive along ``n`` from the representative,
    so the greedy algorithm groups points exactly by band.

    A point is always in the same hyperplane as itself, also with
    ``tol=0``, where only exactly coplanar points are grouped.

    Example:
        points = PointSet([(0, 0), (0, 1), (5, 0), (5, 1)])
        partition(points, PlanePartition((1, 0), tol=0.5))  # {0, 1}, {2, 3}

    Attributes:
        normal: Unit normal vector (read-only)
        tol: Band tolerance along the normal
    """

    __slots__ = ("normal", "tol")

    def __init__(self, normal: Sequence[float] | np.ndarray, tol: float = DEFAULT_TOLERANCE) -> None:
        """Create a plane partitioner.

        Args:
            normal: Non-zero normal direction
            tol: Non-negative tolerance

        Raises:
            ConfigurationError: If the normal is zero or the tolerance negative
        """
        self.normal = unit_vector(normal, "normal")
        self.tol = check_tolerance(tol)

    @property
    def ndim(self) -> int:
        return self.normal.shape[0]

    def __call__(self, x: np.ndarray, y: np.ndarray) -> bool:
        dist = projected_distance(x, y, self.normal)
        return dist < self.tol or dist == 0.0

    def __repr__(self) -> str:
        return f"PlanePartition(normal={tuple(self.normal.tolist())}, tol={self.tol})"
