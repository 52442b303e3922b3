# Vectorization module
# Converts binarized rasters to an ordered contour:
# - 2x2 cell classification (marching squares)
# - Padded cell grid
# - Boundary walk with a direction-transition table

from .cells import CellPattern, Direction, rotate
from .grid import CellGrid
from .tracer import ContourTracer, TraceError, TraceResult, TraceStatus
from .vectorizer import RasterToVector, VectorData

__all__ = [
    "CellPattern",
    "Direction",
    "rotate",
    "CellGrid",
    "ContourTracer",
    "TraceError",
    "TraceResult",
    "TraceStatus",
    "RasterToVector",
    "VectorData",
]
