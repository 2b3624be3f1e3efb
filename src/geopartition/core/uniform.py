"""Random partitions that ignore coordinates."""

import numpy as np

from geopartition.core.geometry import check_fraction
from geopartition.core.partitioner import DirectPartitioner
from geopartition.domain import SpatialDomain
from geopartition.exceptions import ConfigurationError


def _visit_order(n: int, rng: np.random.Generator, shuffle: bool) -> np.ndarray:
    return rng.permutation(n) if shuffle else np.arange(n)


class UniformPartition(DirectPartitioner):
    """Split a domain into `k` subsets of nearly equal size.

    Elements are shuffled with the injected generator (unless `shuffle` is
    False) and dealt into `k` consecutive chunks whose sizes differ by at
    most one. Domains with fewer than `k` elements yield one subset per
    element.

    Attributes:
        k: Number of subsets
        shuffle: Whether to shuffle elements before splitting
    """

    def __init__(self, k: int, shuffle: bool = True) -> None:
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k < 1:
            raise ConfigurationError("k", f"must be a positive integer, got {k!r}")
        self.k = int(k)
        self.shuffle = shuffle

    def assign(self, domain: SpatialDomain, rng: np.random.Generator) -> list[list[int]]:
        order = _visit_order(domain.element_count(), rng, self.shuffle)
        return [chunk.tolist() for chunk in np.array_split(order, self.k)]

    def __repr__(self) -> str:
        return f"UniformPartition(k={self.k}, shuffle={self.shuffle})"


class FractionPartition(DirectPartitioner):
    """Split a domain into two subsets holding `fraction` and ``1 - fraction`` of it.

    The first subset takes ``round(fraction * n)`` elements, drawn at random
    with the injected generator unless `shuffle` is False, in which case it
    takes the lowest indices.

    Attributes:
        fraction: Share of elements in the first subset
        shuffle: Whether to shuffle elements before splitting
    """

    def __init__(self, fraction: float, shuffle: bool = True) -> None:
        self.fraction = check_fraction(fraction)
        self.shuffle = shuffle

    def assign(self, domain: SpatialDomain, rng: np.random.Generator) -> list[list[int]]:
        order = _visit_order(domain.element_count(), rng, self.shuffle)
        cut = int(round(self.fraction * len(order)))
        return [order[:cut].tolist(), order[cut:].tolist()]

    def __repr__(self) -> str:
        return f"FractionPartition(fraction={self.fraction}, shuffle={self.shuffle})"
