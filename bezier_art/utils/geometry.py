"""Geometric operations for Bézier curves and thick strokes.

Provides:
    - Point value type (immutable, compared by value)
    - Explicit-form (Bernstein) Bézier evaluation for any number of control points
    - Uniform curve sampling, scalar and vectorized
    - Thick-segment quadrilateral construction with degenerate-case rejection

Used by:
    - Curve renderer: sampled curve → chain of filled quads (or circle fallback)
    - Scene driver: random control points → sampled curve

All coordinates are in pixels, image frame (top-left origin, +Y down).

Degenerate segments are NOT exceptions: build_quad() returns a
DegenerateSegment value that callers branch on with isinstance().
"""

import enum
import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple, Union

import numpy as np

# Segments at or below this length (px) get the circle fallback
MIN_SEGMENT_LENGTH = 5.0


class Point(NamedTuple):
    """2D point (x, y) in pixels."""
    x: float
    y: float


PointLike = Union[Point, Tuple[float, float]]


class InvalidInputError(ValueError):
    """Raised for inputs that cannot describe a curve (e.g. no control points)."""


class RejectReason(enum.Enum):
    """Why build_quad() declined to build a quadrilateral."""
    TOO_CLOSE = "points too close"
    DEGENERATE_POLYGON = "degenerate polygon"


@dataclass(frozen=True)
class StrokeQuad:
    """Four corners of a thick segment, in polygon fill order."""
    a: Point
    b: Point
    c: Point
    d: Point

    @property
    def corners(self) -> Tuple[Point, Point, Point, Point]:
        return (self.a, self.b, self.c, self.d)


@dataclass(frozen=True)
class DegenerateSegment:
    """Rejected segment; callers substitute the circle fallback."""
    reason: RejectReason
    length: float


QuadResult = Union[StrokeQuad, DegenerateSegment]


# ============================================================================
# BEZIER EVALUATION
# ============================================================================

def binomial_coefficient(n: int, k: int) -> int:
    """Exact binomial coefficient C(n, k).

    Parameters
    ----------
    n : int
        Curve degree (number of control points - 1), n ≥ 0
    k : int
        Control point index, 0 ≤ k ≤ n

    Returns
    -------
    int
        C(n, k), exact for any n (arbitrary-precision integers)
    """
    if n < 0 or k < 0 or k > n:
        raise ValueError(f"Binomial coefficient undefined for n={n}, k={k}")
    return math.comb(n, k)


def _as_points(control_points: Sequence[PointLike]) -> Sequence[Point]:
    if len(control_points) == 0:
        raise InvalidInputError("Control point sequence is empty")
    return [Point(float(p[0]), float(p[1])) for p in control_points]


def evaluate_at(t: float, control_points: Sequence[PointLike]) -> Point:
    """Evaluate a Bézier curve of arbitrary degree at parameter t.

    Parameters
    ----------
    t : float
        Curve parameter, conventionally in [0, 1)
    control_points : Sequence[PointLike]
        Ordered control points, N ≥ 1 (degree N-1)

    Returns
    -------
    Point
        Position on the curve

    Raises
    ------
    InvalidInputError
        If control_points is empty

    Notes
    -----
    Explicit form:
    B(t) = Σ C(n, i) · (1-t)^(n-i) · t^i · P_i,   n = N-1

    Integer powers of 0.0 give 1.0 for exponent 0, so the endpoint
    terms are exact at t=0. A single control point is a constant curve.
    """
    points = _as_points(control_points)
    n = len(points) - 1
    u = 1.0 - t

    x = 0.0
    y = 0.0
    for i, p in enumerate(points):
        weight = binomial_coefficient(n, i) * u ** (n - i) * t ** i
        x += weight * p.x
        y += weight * p.y
    return Point(x, y)


def bernstein_matrix(t_values: np.ndarray, degree: int) -> np.ndarray:
    """Bernstein basis weights for many parameter values at once.

    Parameters
    ----------
    t_values : np.ndarray
        Parameter values, shape (M,)
    degree : int
        Curve degree n ≥ 0

    Returns
    -------
    np.ndarray
        Weights, shape (M, n+1), float64; row j holds C(n,i)(1-t_j)^(n-i)t_j^i
    """
    t = np.asarray(t_values, dtype=np.float64).reshape(-1, 1)
    i = np.arange(degree + 1)
    coeffs = np.array(
        [float(binomial_coefficient(degree, k)) for k in range(degree + 1)],
        dtype=np.float64,
    )
    # np.power(0.0, 0) == 1.0
    return coeffs * np.power(1.0 - t, degree - i) * np.power(t, i)


def sample_curve(control_points: Sequence[PointLike], precision: int) -> list:
    """Sample a Bézier curve at `precision` uniformly spaced parameters.

    Parameters
    ----------
    control_points : Sequence[PointLike]
        Ordered control points, N ≥ 1
    precision : int
        Number of samples, ≥ 1

    Returns
    -------
    list[Point]
        `precision` points at t = 0, 1/precision, ..., (precision-1)/precision

    Raises
    ------
    InvalidInputError
        If control_points is empty or precision < 1

    Notes
    -----
    The sampled curve is open-ended: t never reaches 1.0, so the last
    control point is not part of the output (unless N=1). Consecutive
    entries are meant to be connected by the renderer.
    """
    points = _as_points(control_points)
    if precision < 1:
        raise InvalidInputError(f"Precision must be ≥ 1, got {precision}")

    t = np.arange(precision, dtype=np.float64) / precision
    weights = bernstein_matrix(t, len(points) - 1)  # (precision, N)
    coords = weights @ np.asarray(points, dtype=np.float64)  # (precision, 2)
    return [Point(float(x), float(y)) for x, y in coords]


# ============================================================================
# THICK SEGMENTS
# ============================================================================

def distance(p1: PointLike, p2: PointLike) -> float:
    """Euclidean distance between two points (symmetric, ≥ 0)."""
    dx = abs(p2[0] - p1[0])
    dy = abs(p2[1] - p1[1])
    return math.sqrt(dx * dx + dy * dy)


def build_quad(
    p1: PointLike,
    p2: PointLike,
    width: float,
    min_length: float = MIN_SEGMENT_LENGTH
) -> QuadResult:
    """Build the quadrilateral approximating a thick segment p1 → p2.

    Parameters
    ----------
    p1, p2 : PointLike
        Segment endpoints
    width : float
        Stroke width in px, > 0
    min_length : float
        Closeness threshold; segments with length ≤ min_length are rejected

    Returns
    -------
    StrokeQuad or DegenerateSegment
        Corners (p1 - o), (p1 + o), (p2 + o), (p2 - o) with
        o = (width/2) · (|dy|/d, |dx|/d), or the rejection reason

    Raises
    ------
    ValueError
        If width is not positive

    Notes
    -----
    The projection factors use absolute deltas, so no angle is computed.
    Rejection is an expected outcome: the renderer draws two filled
    circles of radius width/2 instead.
    """
    if width <= 0:
        raise ValueError(f"Stroke width must be positive, got {width}")

    d = distance(p1, p2)
    if d <= min_length:
        return DegenerateSegment(RejectReason.TOO_CLOSE, d)
    if d == 0.0:
        # Only reachable with a negative min_length; no direction to offset along
        return DegenerateSegment(RejectReason.DEGENERATE_POLYGON, d)

    x1, y1 = float(p1[0]), float(p1[1])
    x2, y2 = float(p2[0]), float(p2[1])
    tg = abs(y2 - y1) / d
    ctg = abs(x2 - x1) / d
    half_width = width / 2

    ox = half_width * tg
    oy = half_width * ctg

    a = Point(x1 - ox, y1 - oy)
    b = Point(x1 + ox, y1 + oy)
    c = Point(x2 + ox, y2 + oy)
    last = Point(x2 - ox, y2 - oy)

    if a == last:
        return DegenerateSegment(RejectReason.DEGENERATE_POLYGON, d)

    return StrokeQuad(a, b, c, last)
