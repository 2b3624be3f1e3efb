"""geopartition - Partition spatial domains into disjoint subsets.

geopartition splits a set of spatially located elements (points, or any
domain that can report element coordinates) into disjoint, exhaustive
subsets using pluggable partitioning strategies.

Example:
    >>> from geopartition import PlanePartition, PointSet, partition
    >>> points = PointSet([(0, 0), (0, 1), (5, 0), (5, 1)])
    >>> p = partition(points, PlanePartition((1, 0), tol=0.5), rng=42)
    >>> sorted(sorted(s) for s in p.subsets)
    [[0, 1], [2, 3]]
"""

from geopartition.core import (
    BallPartition,
    BisectFractionPartition,
    BisectPointPartition,
    BlockPartition,
    CoordinateFunctionPartition,
    CoordinatePredicatePartitioner,
    DirectionPartition,
    FractionPartition,
    FunctionPartition,
    HierarchicalPartition,
    IndexFunctionPartition,
    IndexPredicatePartitioner,
    Partitioner,
    PlanePartition,
    ProductPartition,
    SpatialPartition,
    UniformPartition,
    partition,
    subsets,
)
from geopartition.domain import DomainView, PointSet, SpatialDomain

__version__ = "0.1.0"

__all__ = [
    "BallPartition",
    "BisectFractionPartition",
    "BisectPointPartition",
    "BlockPartition",
    "CoordinateFunctionPartition",
    "CoordinatePredicatePartitioner",
    "DirectionPartition",
    "DomainView",
    "FractionPartition",
    "FunctionPartition",
    "HierarchicalPartition",
    "IndexFunctionPartition",
    "IndexPredicatePartitioner",
    "Partitioner",
    "PlanePartition",
    "PointSet",
    "ProductPartition",
    "SpatialDomain",
    "SpatialPartition",
    "UniformPartition",
    "__version__",
    "partition",
    "subsets",
]
