"""Point set domain.

A PointSet is an ordered collection of points sharing one dimensionality
and one numeric type. It is the simplest concrete SpatialDomain.
"""

from collections.abc import Sequence
from typing import Any

import numpy as np

from geopartition.domain.base import check_index
from geopartition.exceptions import InvalidDomainError


def _as_numeric_array(data: Any) -> np.ndarray:
    try:
        array = np.asarray(data)
    except ValueError as e:
        # numpy refuses ragged nested sequences
        raise InvalidDomainError(f"points must all have the same dimension ({e})") from e

    if array.dtype == object:
        raise InvalidDomainError("points must all have the same dimension")
    if array.dtype == bool or not np.issubdtype(array.dtype, np.number):
        raise InvalidDomainError(f"coordinates must be numeric, got dtype {array.dtype}")
    if np.issubdtype(array.dtype, np.complexfloating):
        raise InvalidDomainError("complex coordinates are not supported")
    return array


class PointSet:
    """A set of points with fixed-dimension coordinates.

    Points can be given as a sequence of coordinate tuples, one tuple per
    point, or as a 2-D array where each column is a point (rows are
    dimensions). Use `PointSet.from_rows` for row-per-point arrays.

    Coordinates are stored once as a read-only ``(n, ndim)`` array and the
    point set never changes after construction.

    Example:
        points = PointSet([(0.0, 0.0), (0.0, 1.0), (5.0, 0.0)])
        same = PointSet(np.array([[0.0, 0.0, 5.0], [0.0, 1.0, 0.0]]))

    Attributes:
        coords: Read-only array of shape (n, ndim)
    """

    __slots__ = ("_coords",)

    def __init__(self, coords: Sequence[Sequence[float]] | np.ndarray, ndim: int | None = None) -> None:
        """Create a point set.

        Args:
            coords: Sequence of points, or an (ndim, n) matrix of column points
            ndim: Dimensionality, required only when `coords` is empty

        Raises:
            InvalidDomainError: If the coordinates are ragged, non-numeric,
                non-finite, or the dimensionality cannot be determined
        """
        if isinstance(coords, np.ndarray):
            array = _as_numeric_array(coords)
            if array.ndim != 2:
                raise InvalidDomainError(
                    f"coordinate matrix must be 2-D (ndim x points), got shape {array.shape}"
                )
            rows = array.T
        else:
            rows = _as_numeric_array(coords)
            if rows.size == 0 and rows.ndim == 1:
                if ndim is None:
                    raise InvalidDomainError("ndim is required for an empty point set")
                rows = np.empty((0, ndim), dtype=np.float64)
            elif rows.ndim != 2:
                raise InvalidDomainError(
                    f"points must be coordinate sequences, got array of shape {rows.shape}"
                )

        self._coords = self._freeze(rows, ndim)

    @classmethod
    def from_rows(cls, rows: np.ndarray, ndim: int | None = None) -> "PointSet":
        """Create a point set from an (n, ndim) array with one point per row.

        Args:
            rows: Array with one point per row
            ndim: Dimensionality, required only when `rows` is empty

        Returns:
            PointSet instance
        """
        array = _as_numeric_array(rows)
        if array.ndim != 2:
            raise InvalidDomainError(
                f"row matrix must be 2-D (points x ndim), got shape {array.shape}"
            )
        return cls(array.T, ndim=ndim)

    @staticmethod
    def _freeze(rows: np.ndarray, ndim: int | None) -> np.ndarray:
        if rows.shape[1] == 0:
            raise InvalidDomainError("points must have at least one coordinate")
        if ndim is not None and rows.shape[1] != ndim:
            raise InvalidDomainError(
                f"points have {rows.shape[1]} coordinates but ndim={ndim} was requested"
            )
        if not np.all(np.isfinite(rows)):
            raise InvalidDomainError("coordinates must be finite")

        frozen = np.array(rows, copy=True)
        frozen.flags.writeable = False
        return frozen

    @property
    def coords(self) -> np.ndarray:
        """Read-only (n, ndim) coordinate array."""
        return self._coords

    @property
    def ndim(self) -> int:
        """Number of coordinates per point."""
        return self._coords.shape[1]

    @property
    def dtype(self) -> np.dtype:
        """Numeric type of the coordinates."""
        return self._coords.dtype

    def element_count(self) -> int:
        """Number of points."""
        return self._coords.shape[0]

    def write_coordinates(self, buffer: np.ndarray, index: int) -> None:
        """Copy the coordinates of point `index` into `buffer`."""
        buffer[:] = self._coords[check_index(index, self._coords.shape[0])]

    def coordinates(self, index: int) -> np.ndarray:
        """Return a copy of the coordinates of point `index`."""
        return self._coords[check_index(index, self._coords.shape[0])].copy()

    def __len__(self) -> int:
        return self._coords.shape[0]

    def __repr__(self) -> str:
        return f"PointSet({len(self)} points, ndim={self.ndim}, dtype={self.dtype})"
