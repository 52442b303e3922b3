# Ingestion module
# Handles loading and binarization of raster input:
# - Any format Pillow can decode (detected from contents)
# - RGBA normalization
# - Ink / background mask

from .loader import ImageLoader, LoadedImage
from .preprocessor import ImagePreprocessor, PreprocessingConfig

__all__ = ["ImageLoader", "LoadedImage", "ImagePreprocessor", "PreprocessingConfig"]
