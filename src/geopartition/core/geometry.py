"""Vector helpers shared by the geometric partitioners.

Validation happens here so that every partitioner rejects bad parameters
at construction time with the same errors.
"""

from collections.abc import Sequence

import numpy as np

from geopartition.domain import SpatialDomain
from geopartition.exceptions import ConfigurationError


def unit_vector(vector: Sequence[float] | np.ndarray, parameter: str = "normal") -> np.ndarray:
    """Normalize a direction vector.

    Args:
        vector: Direction with at least one component
        parameter: Name reported in errors

    Returns:
        Read-only float array of unit length

    Raises:
        ConfigurationError: If the vector is empty, not 1-D, non-finite or zero
    """
    try:
        array = np.asarray(vector, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(parameter, f"must be a numeric vector ({e})") from e

    if array.ndim != 1 or array.size == 0:
        raise ConfigurationError(parameter, f"must be a non-empty 1-D vector, got shape {array.shape}")
    if not np.all(np.isfinite(array)):
        raise ConfigurationError(parameter, "components must be finite")

    # rescale first so the norm neither overflows nor underflows
    scale = np.max(np.abs(array))
    if scale == 0.0:
        raise ConfigurationError(parameter, "must have non-zero length")
    scaled = array / scale

    unit = scaled / np.linalg.norm(scaled)
    if not np.isclose(np.linalg.norm(unit), 1.0):
        raise ConfigurationError(parameter, "cannot be scaled to unit length")
    unit.flags.writeable = False
    return unit


def check_tolerance(tol: float) -> float:
    """Validate a tolerance value.

    Raises:
        ConfigurationError: If `tol` is negative or not finite
    """
    try:
        value = float(tol)
    except (TypeError, ValueError) as e:
        raise ConfigurationError("tol", f"must be a number ({e})") from e
    if not np.isfinite(value):
        raise ConfigurationError("tol", "must be finite")
    if value < 0.0:
        raise ConfigurationError("tol", f"must be non-negative, got {value}")
    return value


def projected_distance(x: np.ndarray, y: np.ndarray, unit: np.ndarray) -> float:
    """Length of the projection of ``x - y`` onto `unit`."""
    return abs(float(np.dot(np.subtract(x, y, dtype=np.float64), unit)))


def perpendicular_distance(x: np.ndarray, y: np.ndarray, unit: np.ndarray) -> float:
    """Length of the component of ``x - y`` orthogonal to `unit`."""
    d = np.subtract(x, y, dtype=np.float64)
    return float(np.linalg.norm(d - np.dot(d, unit) * unit))


def check_positive(value: float, parameter: str) -> float:
    """Validate a strictly positive, finite parameter.

    Raises:
        ConfigurationError: If `value` is not a positive finite number
    """
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(parameter, f"must be a number ({e})") from e
    if not np.isfinite(number) or number <= 0.0:
        raise ConfigurationError(parameter, f"must be positive and finite, got {number}")
    return number


def check_fraction(fraction: float) -> float:
    """Validate a fraction strictly between 0 and 1.

    Raises:
        ConfigurationError: If `fraction` is outside ``(0, 1)``
    """
    try:
        value = float(fraction)
    except (TypeError, ValueError) as e:
        raise ConfigurationError("fraction", f"must be a number ({e})") from e
    if not 0.0 < value < 1.0:
        raise ConfigurationError("fraction", f"must lie strictly between 0 and 1, got {value}")
    return value


def coordinate_rows(domain: SpatialDomain) -> np.ndarray:
    """Gather the coordinates of every element of `domain`.

    Returns:
        Float64 array of shape ``(element_count, ndim)``
    """
    n = domain.element_count()
    rows = np.empty((n, domain.ndim), dtype=np.float64)
    buf = np.empty(domain.ndim, dtype=domain.dtype)
    for i in range(n):
        domain.write_coordinates(buf, i)
        rows[i] = buf
    return rows
