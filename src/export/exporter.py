"""
Path Renderer - Paints traced paths and cell grids to PNG
"""
from pathlib import Path
from typing import Union, List
from enum import Enum
import logging

import numpy as np
from PIL import Image

from ..vectorization.grid import CellGrid, Vertex

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


class RenderMode(Enum):
    PATH = "path"  # One black pixel per path vertex
    GRID = "grid"  # Black wherever a cell holds any ink


class PathRenderer:
    """
    Renders vectorization output for inspection.

    Images are the size of the padded cell grid, so pixel (x, y) of the
    output corresponds to cell (col=x, row=y).
    """

    SUPPORTED_MODES = {m.value for m in RenderMode}

    def render(
        self,
        mode: Union[RenderMode, str],
        grid: CellGrid,
        path: List[Vertex],
        output_path: Union[str, Path],
    ) -> Path:
        """
        Render in the requested mode.

        Args:
            mode: What to draw
            grid: Cell grid the path was traced on
            path: Traced vertices (ignored in grid mode)
            output_path: PNG file to write

        Returns:
            Path to the written file
        """
        if isinstance(mode, str):
            mode = RenderMode(mode.lower())

        if mode == RenderMode.PATH:
            return self.render_path(grid, path, output_path)
        elif mode == RenderMode.GRID:
            return self.render_grid(grid, output_path)
        else:
            raise ValueError(f"Unsupported render mode: {mode}")

    def render_path(self, grid: CellGrid, path: List[Vertex], output_path: Union[str, Path]) -> Path:
        """White canvas with one black pixel per vertex"""
        canvas = self._blank(grid)
        for col, row in path:
            canvas[row, col] = BLACK
        return self._save(canvas, output_path)

    def render_grid(self, grid: CellGrid, output_path: Union[str, Path]) -> Path:
        """White canvas, black wherever the cell is not empty"""
        canvas = self._blank(grid)
        canvas[grid.ink_cells()] = BLACK
        return self._save(canvas, output_path)

    def _blank(self, grid: CellGrid) -> np.ndarray:
        canvas = np.empty((grid.height, grid.width, 4), dtype=np.uint8)
        canvas[:] = WHITE
        return canvas

    def _save(self, canvas: np.ndarray, output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        logger.info(f"Writing {canvas.shape[1]}x{canvas.shape[0]} PNG: {output_path}")
        Image.fromarray(canvas).save(output_path, format="PNG")
        return output_path
