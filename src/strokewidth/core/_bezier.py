"""Internal Bezier curve algebra.

This is an internal module containing the polynomial helpers behind the fill
classifier: power-basis coefficients, real root solving and the split of
segments into y-monotone pieces. Not intended for public use.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from strokewidth.domain import LineSegment, QuadraticSegment, Ray, Segment
from strokewidth.domain.segment import solve_quadratic

_EPSILON = 1e-12


def power_coefficients(values: Sequence[float]) -> tuple[float, ...]:
    """Convert Bernstein control values to power basis coefficients.

    Args:
        values: One coordinate of 2, 3 or 4 control points

    Returns:
        Coefficients (c0, c1, ...) of c0 + c1*t + c2*t^2 + ...
    """
    if len(values) == 2:
        v0, v1 = values
        return (v0, v1 - v0)
    if len(values) == 3:
        v0, v1, v2 = values
        return (v0, 2.0 * (v1 - v0), v0 - 2.0 * v1 + v2)
    if len(values) == 4:
        v0, v1, v2, v3 = values
        return (
            v0,
            3.0 * (v1 - v0),
            3.0 * (v0 - 2.0 * v1 + v2),
            -v0 + 3.0 * v1 - 3.0 * v2 + v3,
        )
    raise ValueError(f"Expected 2-4 control values, got {len(values)}")


def polyval(coefficients: Sequence[float], t: float) -> float:
    """Evaluate c0 + c1*t + ... with Horner's rule."""
    result = 0.0
    for coefficient in reversed(coefficients):
        result = result * t + coefficient
    return result


def derivative(coefficients: Sequence[float]) -> tuple[float, ...]:
    return tuple(k * coefficients[k] for k in range(1, len(coefficients)))


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** (1.0 / 3.0), value)


def solve_cubic(c0: float, c1: float, c2: float, c3: float) -> list[float]:
    """Real roots of c0 + c1*t + c2*t^2 + c3*t^3.

    Uses Cardano's method (trigonometric form for three real roots) and
    polishes every root with a Newton step.
    """
    scale = max(abs(c0), abs(c1), abs(c2), abs(c3))
    if scale == 0.0:
        return []
    if abs(c3) <= _EPSILON * scale:
        return solve_quadratic(c0, c1, c2)

    a = c2 / c3
    b = c1 / c3
    c = c0 / c3
    # Depressed cubic x^3 + p x + q with t = x - a / 3
    p = b - a * a / 3.0
    q = 2.0 * a * a * a / 27.0 - a * b / 3.0 + c
    shift = a / 3.0
    disc = (q / 2.0) ** 2 + (p / 3.0) ** 3

    if abs(p) < _EPSILON:
        roots = [_cbrt(-q) - shift]
    elif disc > 0.0:
        root = math.sqrt(disc)
        roots = [_cbrt(-q / 2.0 + root) + _cbrt(-q / 2.0 - root) - shift]
    else:
        radius = 2.0 * math.sqrt(-p / 3.0)
        cos_arg = max(-1.0, min(1.0, (3.0 * q / (2.0 * p)) * math.sqrt(-3.0 / p)))
        phi = math.acos(cos_arg) / 3.0
        roots = [radius * math.cos(phi - 2.0 * math.pi * k / 3.0) - shift for k in range(3)]

    coefficients = (c0, c1, c2, c3)
    slope = derivative(coefficients)
    polished = []
    for t in roots:
        d = polyval(slope, t)
        if d != 0.0:
            t -= polyval(coefficients, t) / d
        polished.append(t)
    return polished


def solve_polynomial(coefficients: Sequence[float]) -> list[float]:
    """Real roots of a polynomial of degree 1 to 3 given in power basis."""
    if len(coefficients) == 2:
        return solve_quadratic(coefficients[0], coefficients[1], 0.0)
    if len(coefficients) == 3:
        return solve_quadratic(*coefficients)
    if len(coefficients) == 4:
        return solve_cubic(*coefficients)
    raise ValueError(f"Unsupported polynomial degree {len(coefficients) - 1}")


@dataclass(frozen=True, slots=True)
class MonotonePiece:
    """A y-monotone parameter range of a segment.

    Attributes:
        y_min: Lowest y on the piece
        y_max: Highest y on the piece
        direction: +1 when y increases along the piece, -1 when it decreases
        t0: First parameter of the piece
        t1: Last parameter of the piece
        xs: Power coefficients of x(t)
        ys: Power coefficients of y(t)
    """

    y_min: float
    y_max: float
    direction: int
    t0: float
    t1: float
    xs: tuple[float, ...]
    ys: tuple[float, ...]

    def crossing_x(self, y: float) -> float:
        """X coordinate where the piece passes through height y."""
        if len(self.ys) == 2:
            t = (y - self.ys[0]) / self.ys[1]
            return self.xs[0] + self.xs[1] * t
        return polyval(self.xs, self._parameter_at(y))

    def _parameter_at(self, y: float) -> float:
        shifted = (self.ys[0] - y, *self.ys[1:])
        best_t = None
        best_gap = math.inf
        for t in solve_polynomial(shifted):
            gap = max(self.t0 - t, t - self.t1, 0.0)
            if gap < best_gap:
                best_t = t
                best_gap = gap
        if best_t is not None and best_gap <= 1e-6:
            return min(max(best_t, self.t0), self.t1)
        return self._bisect(y)

    def _bisect(self, y: float) -> float:
        lo, hi = self.t0, self.t1
        for _ in range(60):
            mid = (lo + hi) / 2.0
            below = polyval(self.ys, mid) < y
            if below == (self.direction > 0):
                lo = mid
            else:
                hi = mid
        return (lo + hi) / 2.0


def control_values(segment: Segment) -> tuple[list[float], list[float]]:
    """Split the control points of a segment into x and y lists."""
    return [p.x for p in segment.points], [p.y for p in segment.points]


def monotone_pieces(segment: Segment) -> list[MonotonePiece]:
    """Split a segment at its vertical extrema.

    Horizontal pieces carry no winding and are left out.
    """
    xs_values, ys_values = control_values(segment)
    xs = power_coefficients(xs_values)
    ys = power_coefficients(ys_values)

    splits = [0.0]
    if not isinstance(segment, LineSegment):
        extrema = sorted(t for t in solve_polynomial(derivative(ys)) if 0.0 < t < 1.0)
        splits.extend(extrema)
    splits.append(1.0)

    pieces = []
    for t0, t1 in zip(splits, splits[1:]):
        if t1 <= t0:
            continue
        # endpoints come straight from the control points so neighbours agree exactly
        y0 = ys_values[0] if t0 == 0.0 else polyval(ys, t0)
        y1 = ys_values[-1] if t1 == 1.0 else polyval(ys, t1)
        if y0 == y1:
            continue
        pieces.append(
            MonotonePiece(
                y_min=min(y0, y1),
                y_max=max(y0, y1),
                direction=1 if y1 > y0 else -1,
                t0=t0,
                t1=t1,
                xs=xs,
                ys=ys,
            )
        )
    return pieces


def ray_intersections(
    segment: Segment, ray: Ray, epsilon: float = 1e-9
) -> list[tuple[float, float]]:
    """Find where a finite ray crosses a segment.

    The segment is projected onto the ray normal and the roots of that
    polynomial are the crossing parameters. Collinear overlaps yield nothing.

    Args:
        segment: Outline segment
        ray: Probe line segment
        epsilon: Slack accepted on the segment parameter before clamping

    Returns:
        List of (line_t, segment_t) pairs with both parameters in [0, 1]
    """
    direction = ray.p1 - ray.p0
    length_sq = direction.length_squared()
    if length_sq == 0.0:
        return []

    xs_values, ys_values = control_values(segment)
    xs = power_coefficients(xs_values)
    ys = power_coefficients(ys_values)
    # cross(direction, S(t) - ray.p0) == 0
    projected = [direction.x * ys[k] - direction.y * xs[k] for k in range(len(xs))]
    projected[0] -= direction.x * ray.p0.y - direction.y * ray.p0.x

    hits = []
    for t in solve_polynomial(projected):
        if not -epsilon <= t <= 1.0 + epsilon:
            continue
        t = min(max(t, 0.0), 1.0)
        x = polyval(xs, t) - ray.p0.x
        y = polyval(ys, t) - ray.p0.y
        line_t = (x * direction.x + y * direction.y) / length_sq
        if 0.0 <= line_t <= 1.0:
            hits.append((line_t, t))
    return hits


def quadratic_derivative(segment: QuadraticSegment, t: float) -> tuple[float, float]:
    """B'(t) = 2(1-t)(p1-p0) + 2t(p2-p1)."""
    p0, p1, p2 = segment.p0, segment.p1, segment.p2
    return (
        2.0 * (1.0 - t) * (p1.x - p0.x) + 2.0 * t * (p2.x - p1.x),
        2.0 * (1.0 - t) * (p1.y - p0.y) + 2.0 * t * (p2.y - p1.y),
    )
