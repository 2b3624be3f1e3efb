"""Partitioner strategy hierarchy.

Strategies come in three families:

- Predicate partitioners decide pairwise whether two elements belong
  together. They take one of two shapes: an index predicate receives two
  element indices, a coordinate predicate receives two coordinate buffers
  the algorithm has already filled. The greedy algorithm in
  `geopartition.core.algorithm` drives both shapes.
- Direct partitioners (bisections, blocks, random splits) assign every
  element to a subset in one sweep without pairwise comparisons.
- Composite partitioners (product, hierarchical) combine other
  partitioners and override `Partitioner.partition` directly.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from geopartition.exceptions import ConfigurationError, PartitionerNotImplementedError

if TYPE_CHECKING:
    from geopartition.core.algorithm import RandomSource
    from geopartition.core.partition import SpatialPartition
    from geopartition.domain import SpatialDomain
    from geopartition.utils import PartitionStats

logger = logging.getLogger(__name__)


class Partitioner(ABC):
    """A method for partitioning spatial domains.

    The base class declares no way of partitioning; calling `partition` on
    it directly fails. Subclass one of the predicate shapes, or override
    `partition` for strategies that are not pairwise predicates.
    """

    def partition(
        self,
        domain: SpatialDomain,
        *,
        rng: RandomSource = None,
        stats: PartitionStats | None = None,
    ) -> SpatialPartition:
        """Partition `domain` with this strategy.

        Raises:
            PartitionerNotImplementedError: Always, for strategies without an
                implementation
        """
        raise PartitionerNotImplementedError(type(self).__name__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PredicatePartitioner(Partitioner):
    """Common base of the two predicate shapes."""

    def partition(
        self,
        domain: SpatialDomain,
        *,
        rng: RandomSource = None,
        stats: PartitionStats | None = None,
    ) -> SpatialPartition:
        """Partition `domain` with the greedy predicate algorithm."""
        from geopartition.core.algorithm import partition

        return partition(domain, self, rng=rng, stats=stats)


class IndexPredicatePartitioner(PredicatePartitioner):
    """Partitioner defined by a predicate on element indices."""

    @abstractmethod
    def __call__(self, i: int, j: int) -> bool:
        """Return True when elements `i` and `j` belong together."""


class CoordinatePredicatePartitioner(PredicatePartitioner):
    """Partitioner defined by a predicate on element coordinates.

    `ndim` is the dimensionality the predicate expects, or None when it
    accepts coordinates of any dimensionality.
    """

    ndim: int | None = None

    @abstractmethod
    def __call__(self, x: np.ndarray, y: np.ndarray) -> bool:
        """Return True when points with coordinates `x` and `y` belong together."""


class DirectPartitioner(Partitioner):
    """Partitioner that assigns every element to a subset in one sweep.

    Subclasses implement `assign`, returning index lists in the order the
    subsets should appear. Empty lists are dropped, so a split that leaves
    one side empty yields fewer subsets.
    """

    @abstractmethod
    def assign(self, domain: SpatialDomain, rng: np.random.Generator) -> list[list[int]]:
        """Return the index subsets of `domain`, possibly including empty ones."""

    def partition(
        self,
        domain: SpatialDomain,
        *,
        rng: RandomSource = None,
        stats: PartitionStats | None = None,
    ) -> SpatialPartition:
        """Partition `domain` by direct assignment."""
        from geopartition.core.algorithm import as_generator
        from geopartition.core.partition import SpatialPartition

        start_time = time.time()
        parts = [s for s in self.assign(domain, as_generator(rng)) if len(s) > 0]
        result = SpatialPartition(domain, parts)

        if stats is not None:
            stats.element_count = domain.element_count()
            stats.subset_count = len(result)
            stats.evaluations = 0
            stats.start_time = start_time
            stats.end_time = time.time()

        logger.debug(
            "Assigned %d elements to %d subsets with %r",
            domain.element_count(),
            len(result),
            self,
        )
        return result


class CompositePartitioner(Partitioner):
    """Partitioner combining two or more other partitioners."""

    def __init__(self, *partitioners: Partitioner) -> None:
        if len(partitioners) < 2:
            raise ConfigurationError(
                "partitioners", f"at least two are required, got {len(partitioners)}"
            )
        for p in partitioners:
            if not isinstance(p, Partitioner):
                raise ConfigurationError(
                    "partitioners", f"expected Partitioner instances, got {type(p).__name__}"
                )
        self.partitioners = partitioners

    def __repr__(self) -> str:
        inner = ", ".join(repr(p) for p in self.partitioners)
        return f"{type(self).__name__}({inner})"
