"""
Image Loader - Decodes raster input into an RGBA array
"""
from pathlib import Path
from typing import Union, Optional, Tuple
from dataclasses import dataclass
import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


@dataclass
class LoadedImage:
    """Container for a decoded raster"""
    filepath: Path
    format: Optional[str]  # As detected by Pillow from the file contents
    rgba: np.ndarray  # (H, W, 4) uint8
    metadata: dict

    @property
    def width(self) -> int:
        return self.rgba.shape[1]

    @property
    def height(self) -> int:
        return self.rgba.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


class ImageLoader:
    """
    Loads any raster format Pillow can decode.

    The format is detected from the file contents, so the extension does
    not matter. Every image is converted to 8-bit RGBA before it is handed
    to the binarizer.
    """

    def load(self, filepath: Union[str, Path]) -> LoadedImage:
        """Load an image from file path"""
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        logger.info(f"Loading image: {filepath}")
        try:
            with Image.open(filepath) as img:
                detected = img.format
                mode = img.mode
                rgba = np.array(img.convert("RGBA"), dtype=np.uint8)
        except (UnidentifiedImageError, OSError) as e:
            raise ValueError(f"Cannot decode image {filepath}: {e}") from e

        logger.debug(f"Decoded {detected} image, mode {mode}, size {rgba.shape[1]}x{rgba.shape[0]}")

        return LoadedImage(
            filepath=filepath,
            format=detected,
            rgba=rgba,
            metadata={"mode": mode},
        )
