"""Domain models for strokewidth.

This module contains the geometric and result models the measurement engine
works on. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Independent of fonttools implementation details

Key classes:
- Point, Vector: Planar primitives
- LineSegment, QuadraticSegment, CubicSegment: Outline segments
- Contour, Shape: Closed outlines under the nonzero winding rule
- BoundingBox: Axis-aligned extent of a shape
- Circle, FittedWidth, WidthCandidates: Measurement results
"""

from strokewidth.domain.geometry import BoundingBox, Point, Vector
from strokewidth.domain.result import Circle, FittedWidth, WidthCandidates
from strokewidth.domain.segment import (
    CubicSegment,
    LineSegment,
    QuadraticSegment,
    Ray,
    Rib,
    Segment,
)
from strokewidth.domain.shape import Contour, Shape

__all__: list[str] = [
    # Primitives
    "Point",
    "Vector",
    "BoundingBox",
    # Segments
    "LineSegment",
    "QuadraticSegment",
    "CubicSegment",
    "Segment",
    "Ray",
    "Rib",
    # Outlines
    "Contour",
    "Shape",
    # Results
    "Circle",
    "FittedWidth",
    "WidthCandidates",
]
