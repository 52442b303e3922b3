"""
Pytest configuration and fixtures for tracing tests
"""
import pytest
import sys
from pathlib import Path

import numpy as np
from PIL import Image

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def make_rgba(width, height, ink=(), color=BLACK):
    """White RGBA canvas with the given (x, y) pixels painted"""
    rgba = np.empty((height, width, 4), dtype=np.uint8)
    rgba[:] = WHITE
    for x, y in ink:
        rgba[y, x] = color
    return rgba


def make_mask(width, height, ink=()):
    mask = np.zeros((height, width), dtype=np.uint8)
    for x, y in ink:
        mask[y, x] = 1
    return mask


@pytest.fixture
def write_image(tmp_path):
    """Factory writing a white PNG with black ink pixels into tmp_path"""
    def _write(width, height, ink=(), name="input.png", fmt="PNG"):
        path = tmp_path / name
        Image.fromarray(make_rgba(width, height, ink)).save(path, format=fmt)
        return path
    return _write


@pytest.fixture
def output_dir(tmp_path):
    """Temporary output directory for tests"""
    output = tmp_path / "output"
    output.mkdir()
    return output
