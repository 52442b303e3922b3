"""
Raster to Vector Converter - Traces line art into an ordered vertex path
"""
from typing import List, Optional
from dataclasses import dataclass
import logging

import numpy as np

from ..ingestion.preprocessor import ImagePreprocessor, PreprocessingConfig
from .grid import CellGrid, Vertex
from .tracer import ContourTracer, TraceResult, TraceStatus

logger = logging.getLogger(__name__)


@dataclass
class VectorData:
    """Container for all vectorized data"""
    grid: CellGrid
    trace: TraceResult
    width: int  # Source image size
    height: int

    @property
    def path(self) -> List[Vertex]:
        return self.trace.path

    @property
    def status(self) -> TraceStatus:
        return self.trace.status


class RasterToVector:
    """
    Converts a black-on-white raster to a single traced contour.

    Pipeline:
    1. Binarization (anything but the background colour is ink)
    2. Cell grid construction (2x2 windows, padded)
    3. Contour tracing
    """

    def __init__(
        self,
        preprocessor: Optional[ImagePreprocessor] = None,
        tracer: Optional[ContourTracer] = None,
    ):
        self.preprocessor = preprocessor or ImagePreprocessor()
        self.tracer = tracer or ContourTracer()

    @classmethod
    def with_background(cls, background) -> "RasterToVector":
        return cls(preprocessor=ImagePreprocessor(PreprocessingConfig(background=tuple(background))))

    def vectorize(self, rgba: np.ndarray) -> VectorData:
        """Convert an (H, W, 4) RGBA array to vector data"""
        logger.info("Starting vectorization...")

        mask = self.preprocessor.binarize(rgba)
        grid = CellGrid.from_mask(mask)
        trace = self.tracer.trace(grid)

        logger.info(f"Traced {len(trace.path)} vertices ({trace.status.value})")

        return VectorData(
            grid=grid,
            trace=trace,
            width=mask.shape[1],
            height=mask.shape[0],
        )
