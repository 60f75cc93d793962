"""Nonzero winding classification and ray probing of a shape.

The FillClassifier answers the questions every other engine component asks
about a shape: is this point inked, where does this ray cross the outline,
and which way does the outline run at a given spot.
"""

from dataclasses import dataclass

from strokewidth.config import GeometryConfig
from strokewidth.core._bezier import monotone_pieces, quadratic_derivative, ray_intersections
from strokewidth.domain import (
    CubicSegment,
    LineSegment,
    Point,
    QuadraticSegment,
    Ray,
    Segment,
    Shape,
    Vector,
)
from strokewidth.exceptions import UnsupportedSegmentError


@dataclass(frozen=True, slots=True)
class LineIntersection:
    """Crossing of a ray and an outline segment.

    Attributes:
        line_t: Parameter along the ray, in [0, 1]
        segment_t: Parameter along the segment, in [0, 1]
    """

    line_t: float
    segment_t: float


class FillClassifier:
    """Classifies points and probes rays against a shape.

    Curves are split into y-monotone pieces once, so each winding query is a
    flat scan over the pieces.

    Example:
        classifier = FillClassifier(shape)
        if classifier.is_filled(Point(10, 20)):
            ...
    """

    def __init__(self, shape: Shape, config: GeometryConfig | None = None) -> None:
        """Initialize the classifier.

        Args:
            shape: Shape to classify against
            config: Geometry tolerances (defaults if None)
        """
        self.shape = shape
        self.config = config or GeometryConfig()
        self._segments: list[Segment] = list(shape.segments())
        self._pieces = [piece for segment in self._segments for piece in monotone_pieces(segment)]

    @property
    def segments(self) -> list[Segment]:
        return self._segments

    def winding(self, point: Point) -> int:
        """Compute the winding number of the shape around a point.

        Sums the signed crossings of a horizontal test ray running from the
        point towards +x. A piece counts when the point's height lies in
        [y_min, y_max) of the piece and the crossing lies right of the point.

        Args:
            point: The point to test

        Returns:
            Signed winding number (0 means outside)
        """
        x = point.x
        y = point.y
        total = 0
        for piece in self._pieces:
            if piece.y_min <= y < piece.y_max and piece.crossing_x(y) > x:
                total += piece.direction
        return total

    def is_filled(self, point: Point) -> bool:
        """Check whether a point is inked under the nonzero rule."""
        return self.winding(point) != 0

    def intersect(self, ray: Ray, segment: Segment) -> list[LineIntersection]:
        """Find the crossings of a ray with one segment.

        Args:
            ray: Probe line segment
            segment: Outline segment

        Returns:
            Crossings with both parameters in [0, 1]; a quadratic may give two
        """
        return [
            LineIntersection(line_t, segment_t)
            for line_t, segment_t in ray_intersections(
                segment, ray, self.config.intersection_epsilon
            )
        ]

    def intersections(self, ray: Ray) -> list[tuple[LineIntersection, Segment]]:
        """Find the crossings of a ray with every segment, in outline order."""
        hits = []
        for segment in self._segments:
            for intersection in self.intersect(ray, segment):
                hits.append((intersection, segment))
        return hits

    def tangent(self, segment: Segment, t: float) -> tuple[Point, Vector]:
        """Get the point at t and the tangent direction there.

        The tangent is not normalized. For a line it is the chord p1 - p0,
        for a quadratic the Bezier derivative. Where the derivative vanishes
        (a control point on an end point) the chord p2 - p0 gives the
        limiting direction. Only a segment collapsed to a point has a zero
        tangent.

        Raises:
            UnsupportedSegmentError: For cubic segments
        """
        if isinstance(segment, LineSegment):
            return segment.eval(t), segment.vector()
        if isinstance(segment, QuadraticSegment):
            dx, dy = quadratic_derivative(segment, t)
            if dx == 0.0 and dy == 0.0:
                dx, dy = segment.p2.x - segment.p0.x, segment.p2.y - segment.p0.y
            return segment.eval(t), Vector(dx, dy)
        if isinstance(segment, CubicSegment):
            raise UnsupportedSegmentError(segment.kind)
        raise UnsupportedSegmentError(type(segment).__name__)
