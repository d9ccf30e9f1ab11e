"""Raster rendering of sampled curves.

Modules:
    - canvas: OpenCV-backed RGB raster buffer (fill polygon/circle, AA lines, save)
    - curve_renderer: thick-segment chains with circle fallback

Invariants:
    - Pixel coordinates, image frame (top-left origin, +Y down)
    - RGB uint8 buffers end-to-end
"""

from .canvas import Canvas, RasterCanvas
from .curve_renderer import RenderStats, draw_line_for_points, draw_thick_polyline

__all__ = [
    'Canvas',
    'RasterCanvas',
    'RenderStats',
    'draw_line_for_points',
    'draw_thick_polyline',
]
