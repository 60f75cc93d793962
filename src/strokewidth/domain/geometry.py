"""Planar primitives shared by the outline and measurement types.

This module defines the fundamental geometric types used throughout strokewidth:
- Point: A position in glyph coordinates
- Vector: A displacement between two points
- BoundingBox: An axis-aligned box enclosing outline geometry
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from fontTools.misc.transform import Transform


@dataclass(frozen=True, slots=True)
class Vector:
    """A 2D displacement.

    Attributes:
        x: Horizontal component
        y: Vertical component
    """

    x: float
    y: float

    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> "Vector":
        """Create a vector pointing at an angle (radians, counter-clockwise from +x)."""
        return cls(length * math.cos(angle), length * math.sin(angle))

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Vector":
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def angle(self) -> float:
        """Angle of the vector in radians; a zero vector has angle 0."""
        return math.atan2(self.y, self.x)

    def turn_90(self) -> "Vector":
        """Rotate by a quarter turn: (x, y) -> (-y, x)."""
        return Vector(-self.y, self.x)

    def rotate(self, angle: float) -> "Vector":
        """Rotate counter-clockwise by an angle in radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in glyph coordinates.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
    """

    x: float
    y: float

    def __add__(self, offset: Vector) -> "Point":
        return Point(self.x + offset.x, self.y + offset.y)

    def __sub__(self, other: "Point") -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Interpolate linearly towards another point."""
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def midpoint(self, other: "Point") -> "Point":
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def rotate_about(self, center: "Point", angle: float) -> "Point":
        """Rotate counter-clockwise around a center by an angle in radians."""
        return center + (self - center).rotate(angle)

    def transformed(self, transform: Transform) -> "Point":
        """Apply an affine fontTools transform."""
        x, y = transform.transformPoint((self.x, self.y))
        return Point(x, y)

    def is_close(self, other: "Point", tolerance: float = 1e-9) -> bool:
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Left edge
        min_y: Bottom edge (top edge in y-down coordinates)
        max_x: Right edge
        max_y: Top edge (bottom edge in y-down coordinates)
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox":
        """Smallest box holding every point.

        Raises:
            ValueError: If no points are given
        """
        xs: list[float] = []
        ys: list[float] = []
        for point in points:
            xs.append(point.x)
            ys.append(point.y)
        if not xs:
            raise ValueError("Cannot build a bounding box from no points")
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def max_dimension(self) -> float:
        return max(self.width, self.height)

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def union(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def inflate(self, margin: float) -> "BoundingBox":
        """Grow the box by a margin on every side."""
        return BoundingBox(
            self.min_x - margin,
            self.min_y - margin,
            self.max_x + margin,
            self.max_y + margin,
        )

    def expand(self) -> "BoundingBox":
        """Round outward to the nearest integer coordinates."""
        return BoundingBox(
            math.floor(self.min_x),
            math.floor(self.min_y),
            math.ceil(self.max_x),
            math.ceil(self.max_y),
        )
