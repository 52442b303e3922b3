"""
Image Preprocessor - Reduces a decoded raster to a two-valued ink mask
"""
from typing import Optional, Tuple
from dataclasses import dataclass
import logging

import numpy as np

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255, 255)


@dataclass
class PreprocessingConfig:
    """Configuration for binarization"""
    background: Tuple[int, int, int, int] = WHITE


class ImagePreprocessor:
    """
    Binarizes line art for contour tracing.

    A pixel is ink unless it equals the background colour exactly, so
    anti-aliased greys and fully transparent pixels both count as ink.
    """

    def __init__(self, config: Optional[PreprocessingConfig] = None):
        self.config = config or PreprocessingConfig()

    def binarize(self, rgba: np.ndarray) -> np.ndarray:
        """Convert an (H, W, 4) RGBA array to an (H, W) uint8 ink mask"""
        if rgba.ndim != 3 or rgba.shape[2] != 4:
            raise ValueError(f"Expected an (H, W, 4) RGBA array, got shape {rgba.shape}")

        background = np.asarray(self.config.background, dtype=np.uint8)
        mask = np.any(rgba != background, axis=2).astype(np.uint8)

        logger.debug(f"Binarized {mask.shape[1]}x{mask.shape[0]} image, {int(mask.sum())} ink pixels")
        return mask

    @staticmethod
    def sample(mask: np.ndarray, x: int, y: int) -> int:
        """Sample the ink mask; anything outside the image is background"""
        height, width = mask.shape
        if x < 0 or y < 0 or x >= width or y >= height:
            return 0
        return int(mask[y, x])
