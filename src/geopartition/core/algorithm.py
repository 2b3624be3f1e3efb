"""Greedy single-pass partitioning for predicate partitioners.

Elements are visited once, in a random order. Each element is compared
against the representative of every existing subset in creation order and
joins the first subset whose representative the predicate accepts, or
starts a new subset when none does. The representative of a subset is its
first-inserted element and never changes.

Comparing only against representatives keeps the cost at O(n * k) predicate
evaluations for k subsets. It does not guarantee that every pair of members
in a subset satisfies the predicate, only that every member is compatible
with its subset's representative. Strategies such as PlanePartition, whose
relation is transitive by construction, are exact under this scheme.
"""

import logging
import time
from collections.abc import Callable, Sequence

import numpy as np

from geopartition.core.partition import SpatialPartition
from geopartition.core.partitioner import (
    CoordinatePredicatePartitioner,
    IndexPredicatePartitioner,
    Partitioner,
)
from geopartition.domain import SpatialDomain
from geopartition.exceptions import ConfigurationError, DimensionMismatchError, InvalidOrderError
from geopartition.utils import PartitionStats

logger = logging.getLogger(__name__)

RandomSource = np.random.Generator | int | None


def as_generator(rng: RandomSource) -> np.random.Generator:
    """Return `rng` itself if it is a Generator, else a generator seeded with it.

    Raises:
        ConfigurationError: If `rng` is not a valid seed
    """
    if isinstance(rng, np.random.Generator):
        return rng
    try:
        return np.random.default_rng(rng)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            "rng", f"must be a Generator, a non-negative seed or None ({e})"
        ) from e


def processing_order(
    element_count: int,
    rng: RandomSource = None,
    order: Sequence[int] | None = None,
) -> list[int]:
    """Determine the order in which elements are visited.

    Args:
        element_count: Number of elements in the domain
        rng: Generator or seed used to draw a uniform random permutation
        order: Explicit order, used instead of a random permutation

    Returns:
        A permutation of ``range(element_count)``

    Raises:
        InvalidOrderError: If `order` is not a permutation of the indices
    """
    if order is None:
        return as_generator(rng).permutation(element_count).tolist()

    indices = np.asarray(order)
    if indices.shape != (element_count,):
        raise InvalidOrderError(
            f"expected {element_count} indices, got array of shape {indices.shape}"
        )
    if element_count == 0:
        return []
    if not np.issubdtype(indices.dtype, np.integer):
        raise InvalidOrderError(f"indices must be integers, got dtype {indices.dtype}")
    if not np.array_equal(np.sort(indices), np.arange(element_count)):
        raise InvalidOrderError("indices must visit every element exactly once")
    return indices.tolist()


def _index_subsets(
    predicate: Callable[[int, int], bool],
    visit: list[int],
) -> tuple[list[list[int]], int]:
    subsets: list[list[int]] = []
    evaluations = 0
    for i in visit:
        for subset in subsets:
            evaluations += 1
            if predicate(i, subset[0]):
                subset.append(i)
                break
        else:
            subsets.append([i])
    return subsets, evaluations


def _coordinate_subsets(
    predicate: Callable[[np.ndarray, np.ndarray], bool],
    domain: SpatialDomain,
    visit: list[int],
) -> tuple[list[list[int]], int]:
    # scratch buffers reused for every comparison of this run
    x = np.empty(domain.ndim, dtype=domain.dtype)
    y = np.empty(domain.ndim, dtype=domain.dtype)

    subsets: list[list[int]] = []
    evaluations = 0
    for i in visit:
        domain.write_coordinates(x, i)
        for subset in subsets:
            domain.write_coordinates(y, subset[0])
            evaluations += 1
            if predicate(x, y):
                subset.append(i)
                break
        else:
            subsets.append([i])
    return subsets, evaluations


def partition(
    domain: SpatialDomain,
    partitioner: Partitioner,
    *,
    rng: RandomSource = None,
    order: Sequence[int] | None = None,
    stats: PartitionStats | None = None,
) -> SpatialPartition:
    """Partition `domain` with `partitioner`.

    Predicate partitioners are driven by the greedy algorithm described in
    this module; any other partitioner is asked to partition the domain
    itself.

    Args:
        domain: Domain to partition
        partitioner: Partitioning strategy
        rng: Generator or seed for the random processing order
        order: Explicit processing order (predicate partitioners only)
        stats: Optional statistics object to fill in

    Returns:
        SpatialPartition over `domain`

    Raises:
        PartitionerNotImplementedError: If `partitioner` has no implementation
        DimensionMismatchError: If a coordinate predicate expects a different
            dimensionality than the domain has
        InvalidOrderError: If `order` is not a permutation of the indices
    """
    is_index = isinstance(partitioner, IndexPredicatePartitioner)
    is_coordinate = isinstance(partitioner, CoordinatePredicatePartitioner)

    if not (is_index or is_coordinate):
        if order is not None:
            raise InvalidOrderError(
                f"an explicit order cannot be applied to {type(partitioner).__name__}"
            )
        return partitioner.partition(domain, rng=rng, stats=stats)

    if is_coordinate and partitioner.ndim is not None and partitioner.ndim != domain.ndim:
        raise DimensionMismatchError(partitioner.ndim, domain.ndim)

    start_time = time.time()
    visit = processing_order(domain.element_count(), rng=rng, order=order)

    if is_coordinate:
        parts, evaluations = _coordinate_subsets(partitioner, domain, visit)
    else:
        parts, evaluations = _index_subsets(partitioner, visit)

    result = SpatialPartition(domain, parts)

    if stats is not None:
        stats.element_count = len(visit)
        stats.subset_count = len(parts)
        stats.evaluations = evaluations
        stats.start_time = start_time
        stats.end_time = time.time()

    logger.debug(
        "Partitioned %d elements into %d subsets with %r (%d evaluations)",
        len(visit),
        len(parts),
        partitioner,
        evaluations,
    )
    return result
