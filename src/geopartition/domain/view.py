"""Views of a domain restricted to a subset of its elements."""

from collections.abc import Iterable

import numpy as np

from geopartition.domain.base import SpatialDomain, check_index


class DomainView:
    """A domain restricted to an ordered subset of its elements.

    The view holds a reference to the parent domain and the parent indices;
    coordinates are never copied. Local index ``k`` maps to parent index
    ``indices[k]``. A view satisfies the SpatialDomain contract itself, so it
    can be partitioned again.

    Attributes:
        parent: The domain being viewed
        indices: Parent element indices in view order
    """

    __slots__ = ("parent", "indices")

    def __init__(self, parent: SpatialDomain, indices: tuple[int, ...]) -> None:
        self.parent = parent
        self.indices = indices

    @property
    def ndim(self) -> int:
        return self.parent.ndim

    @property
    def dtype(self) -> np.dtype:
        return self.parent.dtype

    def element_count(self) -> int:
        return len(self.indices)

    def write_coordinates(self, buffer: np.ndarray, index: int) -> None:
        """Copy the coordinates of local element `index` into `buffer`."""
        local = check_index(index, len(self.indices))
        self.parent.write_coordinates(buffer, self.indices[local])

    def parent_index(self, index: int) -> int:
        """Translate a local index into the parent's index space."""
        return self.indices[check_index(index, len(self.indices))]

    def __len__(self) -> int:
        return len(self.indices)

    def __repr__(self) -> str:
        return f"DomainView({len(self.indices)} of {self.parent.element_count()} elements)"


def view(domain: SpatialDomain, indices: Iterable[int]) -> DomainView:
    """Create a view of `domain` restricted to `indices`.

    Args:
        domain: Domain to view
        indices: Element indices of `domain`, in view order

    Returns:
        DomainView over `domain`

    Raises:
        DomainIndexError: If any index is outside `domain`
    """
    size = domain.element_count()
    return DomainView(domain, tuple(check_index(i, size) for i in indices))
