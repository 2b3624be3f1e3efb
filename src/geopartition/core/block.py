"""Partitioning into axis-aligned blocks of a regular grid."""

from collections.abc import Sequence

import numpy as np

from geopartition.core.geometry import check_positive, coordinate_rows
from geopartition.core.partitioner import DirectPartitioner
from geopartition.domain import SpatialDomain
from geopartition.exceptions import ConfigurationError, DimensionMismatchError


class BlockPartition(DirectPartitioner):
    """Partition points into the blocks of a grid anchored at their minimum corner.

    The grid starts at the component-wise minimum of the coordinates and
    each block spans `sides` along every axis. Points sharing a block form
    a subset. Subsets are ordered by block position (first axis slowest)
    and empty blocks produce no subset.

    Example:
        BlockPartition(10.0)          # 10 x 10 blocks in 2D
        BlockPartition((10.0, 5.0))   # 10 wide, 5 tall

    Attributes:
        sides: Block side lengths, one per axis (read-only), or a single
            side shared by every axis
    """

    def __init__(self, sides: float | Sequence[float] | np.ndarray) -> None:
        if np.ndim(sides) == 0:
            self.sides = np.array([check_positive(sides, "sides")])
            self._per_axis = False
        else:
            values = [check_positive(s, "sides") for s in np.asarray(sides).ravel()]
            if np.ndim(sides) != 1 or not values:
                raise ConfigurationError("sides", "must be a number or a non-empty 1-D sequence")
            self.sides = np.array(values)
            self._per_axis = True
        self.sides.flags.writeable = False

    @property
    def ndim(self) -> int | None:
        """Dimensionality fixed by per-axis sides, None for a shared side."""
        return self.sides.shape[0] if self._per_axis else None

    def assign(self, domain: SpatialDomain, rng: np.random.Generator) -> list[list[int]]:
        if self.ndim is not None and self.ndim != domain.ndim:
            raise DimensionMismatchError(self.ndim, domain.ndim)
        rows = coordinate_rows(domain)
        if len(rows) == 0:
            return []

        cells = np.floor((rows - rows.min(axis=0)) / self.sides).astype(np.int64)
        blocks: dict[tuple[int, ...], list[int]] = {}
        for i, cell in enumerate(map(tuple, cells.tolist())):
            blocks.setdefault(cell, []).append(i)
        return [blocks[cell] for cell in sorted(blocks)]

    def __repr__(self) -> str:
        if self._per_axis:
            return f"BlockPartition(sides={tuple(self.sides.tolist())})"
        return f"BlockPartition(sides={self.sides[0]})"
