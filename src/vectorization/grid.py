"""
Cell Grid - 2x2 marching-squares cells over an ink mask
"""
from typing import Optional, Tuple
import logging

import numpy as np

from .cells import CellPattern

logger = logging.getLogger(__name__)

Vertex = Tuple[int, int]  # (col, row) in padded grid coordinates


class CellGrid:
    """
    Read-only grid of cell patterns with a one-cell empty border.

    For a W x H image the grid is (H + 2) rows by (W + 2) columns. Cell
    (col=x+1, row=y+1) holds the window whose top-left sample is pixel
    (x, y). The border ring is never written, so a walker standing on any
    interior cell can step once in any direction without leaving the grid.
    """

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2:
            raise ValueError(f"Cell array must be 2-D, got shape {cells.shape}")
        self._cells = cells.astype(np.uint8, copy=True)
        self._cells.setflags(write=False)

    @classmethod
    def from_mask(cls, mask: np.ndarray) -> "CellGrid":
        """
        Build the grid from an (H, W) ink mask.

        Args:
            mask: Array of 0/1 samples, row-major (y, x)

        Returns:
            CellGrid of shape (H + 2, W + 2)
        """
        mask = np.asarray(mask, dtype=np.uint8) & 1
        height, width = mask.shape

        # Out-of-bounds samples to the right and below read as background
        padded = np.zeros((height + 1, width + 1), dtype=np.uint8)
        padded[:height, :width] = mask

        tl = padded[:height, :width]
        tr = padded[:height, 1:width + 1]
        bl = padded[1:height + 1, :width]
        br = padded[1:height + 1, 1:width + 1]

        cells = np.zeros((height + 2, width + 2), dtype=np.uint8)
        cells[1:height + 1, 1:width + 1] = tl | tr << 1 | bl << 2 | br << 3

        logger.debug(f"Built {width + 2}x{height + 2} cell grid")
        return cls(cells)

    @property
    def width(self) -> int:
        """Number of columns, padding included"""
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        """Number of rows, padding included"""
        return self._cells.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._cells.shape

    @property
    def keys(self) -> np.ndarray:
        """The raw pattern keys, read-only"""
        return self._cells

    def contains(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def pattern_at(self, col: int, row: int) -> CellPattern:
        if not self.contains(col, row):
            raise IndexError(f"Cell ({col}, {row}) outside {self.width}x{self.height} grid")
        return CellPattern(int(self._cells[row, col]))

    def find_start(self) -> Optional[Vertex]:
        """First non-uniform cell in row-major order, or None"""
        boundary = (self._cells != int(CellPattern.EMPTY)) & (self._cells != int(CellPattern.FULL))
        rows, cols = np.nonzero(boundary)
        if len(rows) == 0:
            return None
        # np.nonzero returns indices in row-major (C) order
        return int(cols[0]), int(rows[0])

    def ink_cells(self) -> np.ndarray:
        """Boolean mask of cells that are not EMPTY"""
        return self._cells != int(CellPattern.EMPTY)
