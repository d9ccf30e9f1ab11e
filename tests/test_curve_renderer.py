"""Test curve renderer fallback contract.

Tests for bezier_art.renderer.curve_renderer:
    - Long segments → one fill_polygon call with the quad corners
    - Short segments → two fill_circle calls (radius = width / 2)
    - Mixed sequences keep paint order
    - Fewer than two points draw nothing
    - Thin antialiased polylines
    - RenderStats accumulation

A recording fake canvas captures calls; pixel output is covered in
test_canvas.py.

Run:
    pytest tests/test_curve_renderer.py -v
"""

import pytest

from bezier_art.renderer import RasterCanvas, RenderStats, draw_line_for_points, draw_thick_polyline
from bezier_art.utils import geometry

RED = (255, 0, 0)


# ============================================================================
# FIXTURES
# ============================================================================

class RecordingCanvas:
    """Canvas stand-in that records every drawing call in order."""

    def __init__(self):
        self.calls = []

    def fill_polygon(self, points, color):
        self.calls.append(('polygon', tuple(points), color))

    def fill_circle(self, center, radius, color):
        self.calls.append(('circle', center, radius, color))

    def draw_antialiased_segment(self, p1, p2, color):
        self.calls.append(('segment', p1, p2, color))

    def kinds(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def canvas():
    return RecordingCanvas()


# ============================================================================
# THICK POLYLINE
# ============================================================================

def test_long_segment_fills_quad(canvas):
    stats = draw_thick_polyline(canvas, [(0, 0), (10, 0)], RED, 4)

    assert canvas.kinds() == ['polygon']
    _, corners, color = canvas.calls[0]
    assert color == RED
    expected = geometry.build_quad((0, 0), (10, 0), 4)
    assert corners == expected.corners
    assert stats == RenderStats(segments=1, quads=1, fallbacks=0)


def test_short_segment_falls_back_to_circles(canvas):
    stats = draw_thick_polyline(canvas, [(0, 0), (3, 4)], RED, 10)

    assert canvas.calls == [
        ('circle', (0, 0), 5.0, RED),
        ('circle', (3, 4), 5.0, RED),
    ]
    assert stats == RenderStats(segments=1, quads=0, fallbacks=1)


def test_odd_width_radius_is_half_width(canvas):
    draw_thick_polyline(canvas, [(0, 0), (1, 1)], RED, 5)
    radii = [c[2] for c in canvas.calls]
    assert radii == [2.5, 2.5]


def test_mixed_sequence_preserves_order(canvas):
    points = [(0, 0), (20, 0), (21, 0), (40, 0)]
    stats = draw_thick_polyline(canvas, points, RED, 6)

    assert canvas.kinds() == ['polygon', 'circle', 'circle', 'polygon']
    assert canvas.calls[1][1] == (20, 0)
    assert canvas.calls[2][1] == (21, 0)
    assert stats.segments == 3
    assert stats.quads == 2
    assert stats.fallbacks == 1


def test_custom_min_length(canvas):
    draw_thick_polyline(canvas, [(0, 0), (3, 4)], RED, 2, min_length=1.0)
    assert canvas.kinds() == ['polygon']


@pytest.mark.parametrize("points", [[], [(5, 5)]])
def test_fewer_than_two_points_draws_nothing(canvas, points):
    stats = draw_thick_polyline(canvas, points, RED, 4)
    assert canvas.calls == []
    assert stats == RenderStats()


def test_sampled_curve_every_segment_handled(canvas):
    samples = geometry.sample_curve([(0, 0), (300, 500), (600, 0)], 200)
    stats = draw_thick_polyline(canvas, samples, RED, 6)

    assert stats.segments == len(samples) - 1
    assert stats.quads + stats.fallbacks == stats.segments
    assert canvas.kinds().count('polygon') == stats.quads
    assert canvas.kinds().count('circle') == 2 * stats.fallbacks


def test_works_with_raster_canvas():
    canvas = RasterCanvas(64, 64)
    stats = draw_thick_polyline(canvas, [(5, 32), (60, 32), (61, 33)], RED, 6)
    assert stats == RenderStats(segments=2, quads=1, fallbacks=1)
    assert tuple(canvas.buffer[32, 30]) == RED


# ============================================================================
# THIN POLYLINE
# ============================================================================

def test_draw_line_for_points(canvas):
    points = [(0, 0), (1, 1), (2, 0), (3, 3)]
    count = draw_line_for_points(canvas, points, RED)

    assert count == 3
    assert canvas.calls == [
        ('segment', (0, 0), (1, 1), RED),
        ('segment', (1, 1), (2, 0), RED),
        ('segment', (2, 0), (3, 3), RED),
    ]


def test_draw_line_for_points_single_point(canvas):
    assert draw_line_for_points(canvas, [(1, 1)], RED) == 0
    assert canvas.calls == []


# ============================================================================
# STATS
# ============================================================================

def test_render_stats_add_and_dict():
    total = RenderStats(3, 2, 1) + RenderStats(4, 4, 0)
    assert total == RenderStats(7, 6, 1)
    assert total.to_dict() == {'segments': 7, 'quads': 6, 'fallbacks': 1}
