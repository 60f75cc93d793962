"""Outline segments.

A glyph outline is a chain of directed segments:
- LineSegment: straight piece between two on-curve points
- QuadraticSegment: TrueType style quadratic Bezier
- CubicSegment: PostScript/CFF style cubic Bezier

LineSegment doubles as the probe ray and the rib type of the measurement
engine, so it also answers nearest-point queries.
"""

import math
from dataclasses import dataclass
from typing import ClassVar

from fontTools.misc.transform import Transform

from strokewidth.domain.geometry import BoundingBox, Point, Vector


_EPSILON = 1e-12


def _fmt(value: float) -> str:
    return f"{value:g}"


def solve_quadratic(c0: float, c1: float, c2: float) -> list[float]:
    """Real roots of c0 + c1*t + c2*t^2.

    Falls back to the linear solution when c2 is negligible. A double root is
    reported twice.
    """
    scale = max(abs(c0), abs(c1), abs(c2))
    if scale == 0.0:
        return []
    if abs(c2) <= _EPSILON * scale:
        if abs(c1) <= _EPSILON * scale:
            return []
        return [-c0 / c1]

    disc = c1 * c1 - 4.0 * c2 * c0
    if disc < 0.0:
        return []
    root = math.sqrt(disc)
    q = -0.5 * (c1 + math.copysign(root, c1))
    if q == 0.0:
        return [0.0, 0.0]
    return [q / c2, c0 / q]


def _extrema_params(c0: float, c1: float, c2: float) -> list[float]:
    """Parameters in (0, 1) where a derivative c0 + c1*t + c2*t^2 vanishes."""
    return [t for t in solve_quadratic(c0, c1, c2) if 0.0 < t < 1.0]


@dataclass(frozen=True, slots=True)
class LineSegment:
    """A straight directed segment.

    Attributes:
        p0: Start point
        p1: End point
    """

    kind: ClassVar[str] = "line"

    p0: Point
    p1: Point

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p1

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.p0, self.p1)

    def eval(self, t: float) -> Point:
        return self.p0.lerp(self.p1, t)

    def midpoint(self) -> Point:
        return self.p0.midpoint(self.p1)

    def vector(self) -> Vector:
        return self.p1 - self.p0

    def length(self) -> float:
        return self.vector().length()

    def nearest(self, point: Point) -> tuple[float, float]:
        """Find the closest point of the segment to a given point.

        Projects the point onto the infinite line, then clamps to the segment endpoints.

        Args:
            point: The point to project

        Returns:
            Tuple of (t, distance_squared) for the nearest point on the segment
        """
        direction = self.vector()
        length_sq = direction.length_squared()
        if length_sq < 1e-20:
            return 0.0, (point - self.p0).length_squared()
        t = (point - self.p0).dot(direction) / length_sq
        t = max(0.0, min(1.0, t))
        return t, (point - self.eval(t)).length_squared()

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(self.points)

    def transformed(self, transform: Transform) -> "LineSegment":
        return LineSegment(self.p0.transformed(transform), self.p1.transformed(transform))

    def reversed(self) -> "LineSegment":
        return LineSegment(self.p1, self.p0)

    def svg_command(self) -> str:
        return f"L{_fmt(self.p1.x)},{_fmt(self.p1.y)}"


@dataclass(frozen=True, slots=True)
class QuadraticSegment:
    """A quadratic Bezier segment.

    Attributes:
        p0: Start point (on-curve)
        p1: Control point (off-curve)
        p2: End point (on-curve)
    """

    kind: ClassVar[str] = "quadratic"

    p0: Point
    p1: Point
    p2: Point

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p2

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.p0, self.p1, self.p2)

    def eval(self, t: float) -> Point:
        mt = 1.0 - t
        a = mt * mt
        b = 2.0 * mt * t
        c = t * t
        return Point(
            a * self.p0.x + b * self.p1.x + c * self.p2.x,
            a * self.p0.y + b * self.p1.y + c * self.p2.y,
        )

    def bounding_box(self) -> BoundingBox:
        points = [self.p0, self.p2]
        for axis in ("x", "y"):
            v0 = getattr(self.p0, axis)
            v1 = getattr(self.p1, axis)
            v2 = getattr(self.p2, axis)
            # B'(t) / 2 = (v0 - 2 v1 + v2) t + (v1 - v0)
            for t in _extrema_params(v1 - v0, v0 - 2 * v1 + v2, 0.0):
                points.append(self.eval(t))
        return BoundingBox.from_points(points)

    def transformed(self, transform: Transform) -> "QuadraticSegment":
        return QuadraticSegment(
            self.p0.transformed(transform),
            self.p1.transformed(transform),
            self.p2.transformed(transform),
        )

    def reversed(self) -> "QuadraticSegment":
        return QuadraticSegment(self.p2, self.p1, self.p0)

    def svg_command(self) -> str:
        return f"Q{_fmt(self.p1.x)},{_fmt(self.p1.y)} {_fmt(self.p2.x)},{_fmt(self.p2.y)}"


@dataclass(frozen=True, slots=True)
class CubicSegment:
    """A cubic Bezier segment.

    Cubic segments can be classified and intersected, but the measurement
    engine has no tangent for them.

    Attributes:
        p0: Start point (on-curve)
        p1: First control point
        p2: Second control point
        p3: End point (on-curve)
    """

    kind: ClassVar[str] = "cubic"

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p3

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.p0, self.p1, self.p2, self.p3)

    def eval(self, t: float) -> Point:
        mt = 1.0 - t
        a = mt * mt * mt
        b = 3.0 * mt * mt * t
        c = 3.0 * mt * t * t
        d = t * t * t
        return Point(
            a * self.p0.x + b * self.p1.x + c * self.p2.x + d * self.p3.x,
            a * self.p0.y + b * self.p1.y + c * self.p2.y + d * self.p3.y,
        )

    def bounding_box(self) -> BoundingBox:
        points = [self.p0, self.p3]
        for axis in ("x", "y"):
            v0 = getattr(self.p0, axis)
            v1 = getattr(self.p1, axis)
            v2 = getattr(self.p2, axis)
            v3 = getattr(self.p3, axis)
            # B'(t) / 3 = a t^2 + b t + c
            a = -v0 + 3 * v1 - 3 * v2 + v3
            b = 2 * (v0 - 2 * v1 + v2)
            c = v1 - v0
            for t in _extrema_params(c, b, a):
                points.append(self.eval(t))
        return BoundingBox.from_points(points)

    def transformed(self, transform: Transform) -> "CubicSegment":
        return CubicSegment(
            self.p0.transformed(transform),
            self.p1.transformed(transform),
            self.p2.transformed(transform),
            self.p3.transformed(transform),
        )

    def reversed(self) -> "CubicSegment":
        return CubicSegment(self.p3, self.p2, self.p1, self.p0)

    def svg_command(self) -> str:
        return (
            f"C{_fmt(self.p1.x)},{_fmt(self.p1.y)} "
            f"{_fmt(self.p2.x)},{_fmt(self.p2.y)} "
            f"{_fmt(self.p3.x)},{_fmt(self.p3.y)}"
        )


Segment = LineSegment | QuadraticSegment | CubicSegment

# Probe rays and ribs are plain line segments
Ray = LineSegment
Rib = LineSegment
