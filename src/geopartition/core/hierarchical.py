"""Hierarchical partitioning: refine each subset with the next partitioner."""

import time

from geopartition.core.algorithm import RandomSource, as_generator, partition
from geopartition.core.partition import SpatialPartition
from geopartition.core.partitioner import CompositePartitioner
from geopartition.domain import SpatialDomain
from geopartition.utils import PartitionStats


class HierarchicalPartition(CompositePartitioner):
    """Apply partitioners in sequence, each refining the previous subsets.

    The domain is partitioned with the first partitioner; every resulting
    subset is then partitioned (as a view) with the second, and so on.
    Refined subsets replace their parent subset in place, so the result
    keeps the coarse ordering.

    Refinement levels see each subset as a `DomainView`, so index
    predicates after the first receive view-local indices ``0..k-1``, not
    indices of the parent domain. A predicate that looks up per-element
    data must translate through ``view.indices`` itself or be used only
    as the first partitioner. Coordinate predicates are unaffected.
    """

    def partition(
        self,
        domain: SpatialDomain,
        *,
        rng: RandomSource = None,
        stats: PartitionStats | None = None,
    ) -> SpatialPartition:
        """Partition `domain` level by level."""
        start_time = time.time()
        generator = as_generator(rng)

        level_stats = PartitionStats()
        current = partition(domain, self.partitioners[0], rng=generator, stats=level_stats)
        evaluations = level_stats.evaluations

        for partitioner in self.partitioners[1:]:
            refined: list[list[int]] = []
            for subset_view in current:
                level_stats = PartitionStats()
                fine = partition(subset_view, partitioner, rng=generator, stats=level_stats)
                evaluations += level_stats.evaluations
                for local in fine.subsets:
                    refined.append([subset_view.indices[k] for k in local])
            current = SpatialPartition(domain, refined)

        if stats is not None:
            stats.element_count = domain.element_count()
            stats.subset_count = len(current)
            stats.evaluations = evaluations
            stats.start_time = start_time
            stats.end_time = time.time()

        return current
