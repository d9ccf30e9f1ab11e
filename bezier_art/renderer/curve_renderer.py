"""Curve renderer: sampled points → thick connected strokes.

For each consecutive pair (p[i], p[i+1]):
    - build_quad() succeeds → canvas.fill_polygon(quad corners)
    - build_quad() rejects  → canvas.fill_circle() at both endpoints,
      radius = stroke_width / 2, so short segments still leave a
      continuous stroke

Stateless: segments are independent, later segments paint over earlier
ones. The canvas is only used for the duration of a call.

Usage:
    from bezier_art.renderer import RasterCanvas, draw_thick_polyline
    canvas = RasterCanvas(800, 600)
    stats = draw_thick_polyline(canvas, points, (255, 100, 100), stroke_width=6)
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from bezier_art.renderer.canvas import Canvas, Color
from bezier_art.utils.geometry import (
    MIN_SEGMENT_LENGTH,
    DegenerateSegment,
    PointLike,
    build_quad,
)

logger = logging.getLogger(__name__)


@dataclass
class RenderStats:
    """Per-call segment counts."""
    segments: int = 0
    quads: int = 0
    fallbacks: int = 0

    def __add__(self, other: "RenderStats") -> "RenderStats":
        return RenderStats(
            self.segments + other.segments,
            self.quads + other.quads,
            self.fallbacks + other.fallbacks,
        )

    def to_dict(self) -> dict:
        return {
            'segments': self.segments,
            'quads': self.quads,
            'fallbacks': self.fallbacks,
        }


def draw_thick_polyline(
    canvas: Canvas,
    points: Sequence[PointLike],
    color: Color,
    stroke_width: int,
    min_length: float = MIN_SEGMENT_LENGTH
) -> RenderStats:
    """Draw consecutive points as thick segments with circle fallback.

    Parameters
    ----------
    canvas : Canvas
        Target surface (fill_polygon, fill_circle)
    points : Sequence[PointLike]
        Ordered points; fewer than 2 draws nothing
    color : Color
        RGB triple
    stroke_width : int
        Perpendicular thickness in px, > 0
    min_length : float
        Closeness threshold passed to build_quad()

    Returns
    -------
    RenderStats
        Number of segments, quads filled and circle fallbacks
    """
    stats = RenderStats()
    radius = stroke_width / 2

    for p1, p2 in zip(points, points[1:]):
        stats.segments += 1
        result = build_quad(p1, p2, stroke_width, min_length)
        if isinstance(result, DegenerateSegment):
            canvas.fill_circle(p1, radius, color)
            canvas.fill_circle(p2, radius, color)
            stats.fallbacks += 1
        else:
            canvas.fill_polygon(result.corners, color)
            stats.quads += 1

    logger.debug(
        f"Thick polyline: {stats.segments} segments, "
        f"{stats.quads} quads, {stats.fallbacks} circle fallbacks"
    )
    return stats


def draw_line_for_points(
    canvas: Canvas,
    points: Sequence[PointLike],
    color: Color
) -> int:
    """Draw consecutive points as 1-px antialiased segments.

    Returns the number of segments drawn.
    """
    count = 0
    for p1, p2 in zip(points, points[1:]):
        canvas.draw_antialiased_segment(p1, p2, color)
        count += 1
    return count
