"""Core partitioning algorithms for geopartition.

This module contains:

- The SpatialPartition result type
- The partitioner hierarchy (index and coordinate predicates, direct
  assignment, composites)
- The greedy single-pass partitioning algorithm
- Concrete partitioners (plane, direction, ball, function, bisections,
  blocks, random splits, product, hierarchical)

Key functions:
- partition: Partition a domain with a partitioner
- subsets: Index subsets of a partition
- processing_order: Permutation used to visit elements

Key classes:
- SpatialPartition: Disjoint, exhaustive subsets of a domain
- Partitioner: Base strategy
- IndexPredicatePartitioner / CoordinatePredicatePartitioner: Predicate shapes
- PlanePartition: Bands orthogonal to a normal direction
- DirectionPartition: Lines parallel to a direction
- BallPartition: Balls of a fixed radius
- BisectPointPartition / BisectFractionPartition: Two sides of a hyperplane
- BlockPartition: Blocks of a regular grid
- UniformPartition / FractionPartition: Random splits
- ProductPartition / HierarchicalPartition: Combinations of partitioners
"""

from geopartition.core.algorithm import (
    RandomSource,
    as_generator,
    partition,
    processing_order,
)
from geopartition.core.ball import BallPartition
from geopartition.core.bisect import BisectFractionPartition, BisectPointPartition
from geopartition.core.block import BlockPartition
from geopartition.core.direction import DirectionPartition
from geopartition.core.function import (
    CoordinateFunctionPartition,
    FunctionPartition,
    IndexFunctionPartition,
)
from geopartition.core.hierarchical import HierarchicalPartition
from geopartition.core.partition import SpatialPartition, subsets
from geopartition.core.partitioner import (
    CompositePartitioner,
    CoordinatePredicatePartitioner,
    DirectPartitioner,
    IndexPredicatePartitioner,
    Partitioner,
    PredicatePartitioner,
)
from geopartition.core.plane import PlanePartition
from geopartition.core.product import ProductPartition
from geopartition.core.uniform import FractionPartition, UniformPartition

__all__ = [
    # Partitioner hierarchy
    "CompositePartitioner",
    "CoordinatePredicatePartitioner",
    "DirectPartitioner",
    "IndexPredicatePartitioner",
    "Partitioner",
    "PredicatePartitioner",
    # Partitioners
    "BallPartition",
    "BisectFractionPartition",
    "BisectPointPartition",
    "BlockPartition",
    "CoordinateFunctionPartition",
    "DirectionPartition",
    "FractionPartition",
    "FunctionPartition",
    "HierarchicalPartition",
    "IndexFunctionPartition",
    "PlanePartition",
    "ProductPartition",
    "UniformPartition",
    # Results
    "SpatialPartition",
    # Algorithm
    "RandomSource",
    "as_generator",
    "partition",
    "processing_order",
    "subsets",
]
