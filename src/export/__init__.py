# Export module
# Writes vectorization output as PNG:
# - Traced path (one pixel per vertex)
# - Cell grid debug view

from .exporter import PathRenderer, RenderMode

__all__ = ["PathRenderer", "RenderMode"]
