"""OpenCV raster canvas for curve rendering.

Wraps a numpy uint8 (H, W, 3) RGB buffer and exposes the drawing
primitives the curve renderer needs:
    - fill_background(color)
    - fill_polygon(points, color)          cv2.fillPoly
    - fill_circle(center, radius, color)   cv2.circle, thickness=-1
    - draw_antialiased_segment(p1, p2, color)   cv2.line, LINE_AA
    - save(path)                           atomic PNG via utils.fs

Invariants:
    - Buffer is RGB (not OpenCV's BGR); colors are passed through as-is
      and PIL encodes them as RGB on save
    - Float coordinates keep SHIFT_BITS fractional bits (cv2 `shift`)
    - Geometry outside the canvas is clipped by OpenCV

The renderer only depends on the Canvas protocol, so tests can record
calls with a fake canvas instead of inspecting pixels.
"""

import logging
from pathlib import Path
from typing import Protocol, Sequence, Tuple, Union

import cv2
import numpy as np

from bezier_art.utils import fs
from bezier_art.utils.geometry import PointLike

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

SHIFT_BITS = 4
_SCALE = 1 << SHIFT_BITS


class Canvas(Protocol):
    """Drawing surface used by the curve renderer."""

    def fill_polygon(self, points: Sequence[PointLike], color: Color) -> None: ...

    def fill_circle(self, center: PointLike, radius: float, color: Color) -> None: ...

    def draw_antialiased_segment(self, p1: PointLike, p2: PointLike, color: Color) -> None: ...


def _check_color(color: Sequence[int]) -> Color:
    if len(color) != 3:
        raise ValueError(f"Color must be an RGB triple, got {color!r}")
    rgb = tuple(int(c) for c in color)
    if any(c < 0 or c > 255 for c in rgb):
        raise ValueError(f"Color components must be in [0, 255], got {rgb}")
    return rgb


def _fixed(p: PointLike) -> Tuple[int, int]:
    """Point → cv2 fixed-point pixel coordinates."""
    return (int(round(p[0] * _SCALE)), int(round(p[1] * _SCALE)))


class RasterCanvas:
    """RGB raster buffer with OpenCV fill primitives.

    Parameters
    ----------
    width, height : int
        Canvas size in pixels, > 0
    antialias : bool
        Antialiased edges for polygons and circles, default True.
        draw_antialiased_segment() is always antialiased.

    Attributes
    ----------
    buffer : np.ndarray
        (height, width, 3) uint8 RGB pixels, black on creation
    """

    def __init__(self, width: int, height: int, antialias: bool = True):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}×{height}")
        self.width = int(width)
        self.height = int(height)
        self.line_type = cv2.LINE_AA if antialias else cv2.LINE_8
        self.buffer = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def fill_background(self, color: Sequence[int]) -> None:
        self.buffer[:, :] = _check_color(color)

    def fill_polygon(self, points: Sequence[PointLike], color: Sequence[int]) -> None:
        """Fill a simple polygon given in boundary order."""
        if len(points) < 3:
            raise ValueError(f"Polygon needs at least 3 points, got {len(points)}")
        pts = np.array([_fixed(p) for p in points], dtype=np.int32)
        cv2.fillPoly(self.buffer, [pts], _check_color(color), self.line_type, SHIFT_BITS)

    def fill_circle(self, center: PointLike, radius: float, color: Sequence[int]) -> None:
        """Fill a disc; radius in pixels, > 0."""
        if radius <= 0:
            raise ValueError(f"Circle radius must be positive, got {radius}")
        cv2.circle(
            self.buffer,
            _fixed(center),
            int(round(radius * _SCALE)),
            _check_color(color),
            -1,
            self.line_type,
            SHIFT_BITS,
        )

    def draw_antialiased_segment(self, p1: PointLike, p2: PointLike, color: Sequence[int]) -> None:
        """One-pixel antialiased line from p1 to p2."""
        cv2.line(
            self.buffer,
            _fixed(p1),
            _fixed(p2),
            _check_color(color),
            1,
            cv2.LINE_AA,
            SHIFT_BITS,
        )

    def to_array(self) -> np.ndarray:
        """Copy of the pixel buffer, (H, W, 3) uint8 RGB."""
        return self.buffer.copy()

    def save(self, path: Union[str, Path]) -> Path:
        """Encode the buffer to an image file atomically.

        Raises
        ------
        RuntimeError
            If encoding or writing fails
        """
        path = Path(path)
        fs.atomic_save_image(self.buffer, path)
        logger.info(f"Saved {self.width}×{self.height} canvas to {path}")
        return path
