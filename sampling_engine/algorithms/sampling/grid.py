# ==============================================================================
# file: sampling_engine/algorithms/sampling/grid.py
# Acceleration grid: each cell keeps the index of at most one accepted point.
# ==============================================================================
from __future__ import annotations
import math
from typing import Iterator, Optional, Tuple

import numpy as np

from ...core.constants import DEFAULT_MAX_GRID_CELLS, DIMENSIONS, EMPTY_CELL
from ...core.errors import GridAllocationError, GridOccupiedError
from ...numerics.vector import Vec2


class SpatialGrid:
    """
    Grid of cells with side r / sqrt(2). A cell stores an index into the
    sampler's point list, or EMPTY_CELL.
    """

    def __init__(
        self,
        width: float,
        height: float,
        radius: float,
        max_cells: int = DEFAULT_MAX_GRID_CELLS,
    ):
        self.cell_size = radius / math.sqrt(DIMENSIONS)
        self.cols = int(math.ceil(width / self.cell_size))
        self.rows = int(math.ceil(height / self.cell_size))

        total = self.rows * self.cols
        if total > max_cells:
            raise GridAllocationError(
                f"Grid {self.rows}x{self.cols} ({total} cells) exceeds limit of {max_cells} cells"
            )
        try:
            self.cells = np.full((self.rows, self.cols), EMPTY_CELL,
                                 dtype=self._index_dtype(total))
        except (MemoryError, ValueError) as e:
            raise GridAllocationError(
                f"Cannot allocate grid {self.rows}x{self.cols}: {e}"
            ) from e

    @staticmethod
    def _index_dtype(total: int):
        # at most one point per cell, so identities stay below the cell count
        return np.int32 if total <= np.iinfo(np.int32).max else np.int64

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def cell_index_of(self, point: Vec2) -> Tuple[int, int]:
        row = int(math.floor(point.y / self.cell_size))
        col = int(math.floor(point.x / self.cell_size))
        # y < height can still round onto the far edge when height / cell_size is whole
        return min(row, self.rows - 1), min(col, self.cols - 1)

    def in_range(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Optional[int]:
        """Index stored at (row, col); None for an empty or out-of-range cell."""
        if not self.in_range(row, col):
            return None
        idx = int(self.cells[row, col])
        return None if idx == EMPTY_CELL else idx

    def is_occupied(self, row: int, col: int) -> bool:
        return self.get(row, col) is not None

    def set(self, point: Vec2, identity: int) -> Tuple[int, int]:
        row, col = self.cell_index_of(point)
        current = int(self.cells[row, col])
        if current != EMPTY_CELL:
            raise GridOccupiedError(
                f"Cell ({row}, {col}) already holds point {current}, cannot store {identity}"
            )
        self.cells[row, col] = identity
        return row, col

    def window(self, point: Vec2, radius: float) -> Iterator[int]:
        """
        Yields stored indices, row-major, from the cells covering the square
        [x - radius, x + radius] x [y - radius, y + radius], clipped to the grid.
        """
        min_r = int(math.floor((point.y - radius) / self.cell_size))
        max_r = int(math.floor((point.y + radius) / self.cell_size))
        min_c = int(math.floor((point.x - radius) / self.cell_size))
        max_c = int(math.floor((point.x + radius) / self.cell_size))

        r0, r1 = max(min_r, 0), min(max_r, self.rows - 1)
        c0, c1 = max(min_c, 0), min(max_c, self.cols - 1)
        if r0 > r1 or c0 > c1:
            return

        block = self.cells[r0 : r1 + 1, c0 : c1 + 1]
        for idx in block[block != EMPTY_CELL]:
            yield int(idx)

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells != EMPTY_CELL))
