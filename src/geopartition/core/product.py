"""Product of partitions: subsets shared under every partitioner."""

import time

from geopartition.core.algorithm import RandomSource, as_generator, partition
from geopartition.core.partition import SpatialPartition
from geopartition.core.partitioner import CompositePartitioner
from geopartition.domain import SpatialDomain
from geopartition.utils import PartitionStats


class ProductPartition(CompositePartitioner):
    """Partition whose subsets are the intersections of other partitions.

    Two elements share a subset when they share a subset under every
    component partitioner. Subsets are ordered by first appearance when
    walking the first component's subsets in order.

    Example:
        ProductPartition(PlanePartition((1, 0)), PlanePartition((0, 1)))
        # groups points with equal x and equal y
    """

    def partition(
        self,
        domain: SpatialDomain,
        *,
        rng: RandomSource = None,
        stats: PartitionStats | None = None,
    ) -> SpatialPartition:
        """Partition `domain` with every component and intersect the results."""
        start_time = time.time()
        generator = as_generator(rng)

        evaluations = 0
        components: list[SpatialPartition] = []
        for partitioner in self.partitioners:
            sub_stats = PartitionStats()
            components.append(partition(domain, partitioner, rng=generator, stats=sub_stats))
            evaluations += sub_stats.evaluations

        labels = [p.labels() for p in components[1:]]
        groups: dict[tuple[int, ...], list[int]] = {}
        for first_label, subset in enumerate(components[0].subsets):
            for i in subset:
                key = (first_label, *(int(lab[i]) for lab in labels))
                groups.setdefault(key, []).append(i)

        result = SpatialPartition(domain, groups.values())

        if stats is not None:
            stats.element_count = domain.element_count()
            stats.subset_count = len(result)
            stats.evaluations = evaluations
            stats.start_time = start_time
            stats.end_time = time.time()

        return result
