"""The result of partitioning a spatial domain.

A SpatialPartition pairs a domain with an ordered list of disjoint index
subsets that together cover every element exactly once. Subsets keep the
order in which the partitioner created them, and the indices inside a
subset keep their insertion order.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from geopartition.domain import DomainView, SpatialDomain
from geopartition.exceptions import InvalidPartitionError


@dataclass(frozen=True)
class SpatialPartition:
    """A partition of a spatial domain into disjoint, exhaustive subsets.

    The domain is shared, not copied. Indexing and iteration yield
    `DomainView` objects restricted to one subset.

    Attributes:
        domain: The partitioned domain
        subsets: Ordered tuple of index subsets (each a tuple of ints)
    """

    domain: SpatialDomain
    subsets: tuple[tuple[int, ...], ...]

    def __init__(self, domain: SpatialDomain, subsets: Iterable[Sequence[int]]) -> None:
        """Create a partition and check its invariants.

        Args:
            domain: The partitioned domain
            subsets: Index subsets in creation order

        Raises:
            InvalidPartitionError: If a subset is empty, an index repeats,
                an index is outside the domain, or an element is missing
        """
        frozen = tuple(tuple(int(i) for i in subset) for subset in subsets)
        _validate(domain.element_count(), frozen)
        object.__setattr__(self, "domain", domain)
        object.__setattr__(self, "subsets", frozen)

    def __len__(self) -> int:
        return len(self.subsets)

    def __getitem__(self, ind: int) -> DomainView:
        return DomainView(self.domain, self.subsets[ind])

    def __iter__(self) -> Iterator[DomainView]:
        for subset in self.subsets:
            yield DomainView(self.domain, subset)

    def labels(self) -> np.ndarray:
        """Map every element of the domain to the number of its subset.

        Returns:
            Integer array of length `domain.element_count()`
        """
        labels = np.empty(self.domain.element_count(), dtype=np.intp)
        for label, subset in enumerate(self.subsets):
            labels[list(subset)] = label
        return labels

    def __repr__(self) -> str:
        sizes = [len(s) for s in self.subsets]
        return f"SpatialPartition({len(self.subsets)} subsets, sizes={sizes})"


def subsets(partition: SpatialPartition) -> tuple[tuple[int, ...], ...]:
    """Return the index subsets that make up `partition`."""
    return partition.subsets


def _validate(size: int, parts: tuple[tuple[int, ...], ...]) -> None:
    seen = np.zeros(size, dtype=bool)
    for number, subset in enumerate(parts):
        if not subset:
            raise InvalidPartitionError(f"subset {number} is empty")
        for idx in subset:
            if idx < 0 or idx >= size:
                raise InvalidPartitionError(
                    f"index {idx} in subset {number} is outside a domain of {size} elements"
                )
            if seen[idx]:
                raise InvalidPartitionError(f"index {idx} appears in more than one subset")
            seen[idx] = True

    missing = np.flatnonzero(~seen)
    if missing.size:
        preview = ", ".join(str(i) for i in missing[:10])
        raise InvalidPartitionError(f"{missing.size} elements not assigned (e.g. {preview})")
