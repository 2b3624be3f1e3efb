"""Bisection of a domain by a hyperplane."""

from collections.abc import Sequence

import numpy as np

from geopartition.core.geometry import check_fraction, coordinate_rows, unit_vector
from geopartition.core.partitioner import DirectPartitioner
from geopartition.domain import SpatialDomain
from geopartition.exceptions import ConfigurationError, DimensionMismatchError


def _check_dimension(expected: int, domain: SpatialDomain) -> None:
    if expected != domain.ndim:
        raise DimensionMismatchError(expected, domain.ndim)


class BisectPointPartition(DirectPartitioner):
    """Split a domain by the hyperplane through `point` orthogonal to `normal`.

    Points with ``(x - point) . n < 0`` form the first subset, all others
    (including points on the hyperplane) the second. When every point falls
    on one side the partition has a single subset.

    Attributes:
        normal: Unit normal vector (read-only)
        point: Point on the hyperplane (read-only)
    """

    def __init__(
        self,
        normal: Sequence[float] | np.ndarray,
        point: Sequence[float] | np.ndarray,
    ) -> None:
        self.normal = unit_vector(normal, "normal")
        try:
            self.point = np.array(point, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ConfigurationError("point", f"must be a numeric vector ({e})") from e
        if self.point.shape != self.normal.shape:
            raise ConfigurationError(
                "point", f"must have {self.normal.shape[0]} components, got shape {self.point.shape}"
            )
        if not np.all(np.isfinite(self.point)):
            raise ConfigurationError("point", "components must be finite")
        self.point.flags.writeable = False

    @property
    def ndim(self) -> int:
        return self.normal.shape[0]

    def assign(self, domain: SpatialDomain, rng: np.random.Generator) -> list[list[int]]:
        _check_dimension(self.ndim, domain)
        side = (coordinate_rows(domain) - self.point) @ self.normal
        return [np.flatnonzero(side < 0.0).tolist(), np.flatnonzero(side >= 0.0).tolist()]

    def __repr__(self) -> str:
        return (
            f"BisectPointPartition(normal={tuple(self.normal.tolist())}, "
            f"point={tuple(self.point.tolist())})"
        )


class BisectFractionPartition(DirectPartitioner):
    """Split a domain along `normal` so that a fraction of points lies below.

    Points are ranked by their projection onto the normal and the lowest
    ``round(fraction * n)`` of them form the first subset. Ties are broken
    by element index, so the split is deterministic.

    Attributes:
        normal: Unit normal vector (read-only)
        fraction: Share of points in the first subset
    """

    def __init__(self, normal: Sequence[float] | np.ndarray, fraction: float = 0.5) -> None:
        self.normal = unit_vector(normal, "normal")
        self.fraction = check_fraction(fraction)

    @property
    def ndim(self) -> int:
        return self.normal.shape[0]

    def assign(self, domain: SpatialDomain, rng: np.random.Generator) -> list[list[int]]:
        _check_dimension(self.ndim, domain)
        projection = coordinate_rows(domain) @ self.normal
        ranked = np.argsort(projection, kind="stable")
        cut = int(round(self.fraction * len(ranked)))
        return [np.sort(ranked[:cut]).tolist(), np.sort(ranked[cut:]).tolist()]

    def __repr__(self) -> str:
        return (
            f"BisectFractionPartition(normal={tuple(self.normal.tolist())}, "
            f"fraction={self.fraction})"
        )
