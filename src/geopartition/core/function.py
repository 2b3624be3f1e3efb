"""Partitioners built from user-supplied predicate functions."""

from collections.abc import Callable

import numpy as np

from geopartition.core.partitioner import (
    CoordinatePredicatePartitioner,
    IndexPredicatePartitioner,
)


class IndexFunctionPartition(IndexPredicatePartitioner):
    """Partition with a predicate ``func(i, j) -> bool`` on element indices.

    The function may look anything up it needs, e.g. attribute values
    stored alongside the domain.
    """

    def __init__(self, func: Callable[[int, int], bool]) -> None:
        self.func = func

    def __call__(self, i: int, j: int) -> bool:
        return bool(self.func(i, j))

    def __repr__(self) -> str:
        return f"IndexFunctionPartition({getattr(self.func, '__name__', self.func)!s})"


class CoordinateFunctionPartition(CoordinatePredicatePartitioner):
    """Partition with a predicate ``func(x, y) -> bool`` on coordinates.

    The arrays passed to `func` are scratch buffers owned by the algorithm
    and are overwritten after the call returns; copy them to keep them.
    """

    def __init__(
        self,
        func: Callable[[np.ndarray, np.ndarray], bool],
        ndim: int | None = None,
    ) -> None:
        self.func = func
        self.ndim = ndim

    def __call__(self, x: np.ndarray, y: np.ndarray) -> bool:
        return bool(self.func(x, y))

    def __repr__(self) -> str:
        return f"CoordinateFunctionPartition({getattr(self.func, '__name__', self.func)!s})"


def FunctionPartition(
    func: Callable[..., bool],
    spatial: bool = True,
    ndim: int | None = None,
) -> IndexFunctionPartition | CoordinateFunctionPartition:
    """Create a partitioner from a predicate function.

    Args:
        func: Predicate on two elements
        spatial: If True, `func` receives coordinates; otherwise indices
        ndim: Expected dimensionality for coordinate predicates

    Returns:
        CoordinateFunctionPartition or IndexFunctionPartition
    """
    if spatial:
        return CoordinateFunctionPartition(func, ndim=ndim)
    return IndexFunctionPartition(func)
