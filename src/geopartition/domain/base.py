"""The capability contract every partitionable domain satisfies.

A domain is any indexable collection of spatial elements (points, cells,
mesh elements). The partitioning algorithm only ever asks a domain how many
elements it holds and to copy the coordinates of one element into a buffer
it owns, so grids and meshes become partitionable by implementing these two
methods plus the `ndim` and `dtype` properties.
"""

from typing import Protocol, runtime_checkable

import numpy as np

from geopartition.exceptions import DomainIndexError


@runtime_checkable
class SpatialDomain(Protocol):
    """Structural interface for partitionable collections.

    Element indices are 0-based and range over ``[0, element_count())``.
    Implementations must not mutate shared state in `write_coordinates`,
    so concurrent partitioning runs over one domain stay safe.
    """

    @property
    def ndim(self) -> int:
        """Number of coordinates per element."""
        ...

    @property
    def dtype(self) -> np.dtype:
        """Numeric type of the coordinates."""
        ...

    def element_count(self) -> int:
        """Number of elements in the domain."""
        ...

    def write_coordinates(self, buffer: np.ndarray, index: int) -> None:
        """Copy the coordinates of element `index` into `buffer`.

        Args:
            buffer: Caller-owned array of length `ndim`
            index: Element index

        Raises:
            DomainIndexError: If `index` is outside the domain
        """
        ...


def check_index(index: int, size: int) -> int:
    """Validate an element index against a domain size.

    Negative indices are rejected rather than wrapped.

    Returns:
        The index as a plain int
    """
    idx = int(index)
    if idx < 0 or idx >= size:
        raise DomainIndexError(idx, size)
    return idx
