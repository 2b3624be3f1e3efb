"""Domain models for geopartition.

This module contains the spatial domains that partitions are computed over.
A domain only needs to report its element count and copy element
coordinates into a caller-owned buffer:

- SpatialDomain: Structural protocol every partitionable domain satisfies
- PointSet: Ordered points of fixed dimensionality
- DomainView: A domain restricted to a subset of its elements, without copying
"""

from geopartition.domain.base import SpatialDomain, check_index
from geopartition.domain.pointset import PointSet
from geopartition.domain.view import DomainView, view

__all__: list[str] = [
    # Contract
    "SpatialDomain",
    "check_index",
    # Domains
    "PointSet",
    "DomainView",
    "view",
]
