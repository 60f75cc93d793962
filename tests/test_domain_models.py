"""Tests for domain models to verify they work correctly."""

import math

import pytest
from fontTools.misc.transform import Transform

from strokewidth.domain import (
    BoundingBox,
    Circle,
    Contour,
    CubicSegment,
    FittedWidth,
    LineSegment,
    Point,
    QuadraticSegment,
    Shape,
    Vector,
    WidthCandidates,
)
from strokewidth.exceptions import ContourError, NoMeasurableStrokeError


class TestVector:
    """Tests for Vector class."""

    def test_arithmetic(self) -> None:
        """Test vector addition, subtraction, negation and scaling."""
        a = Vector(1.0, 2.0)
        b = Vector(3.0, -1.0)
        assert a + b == Vector(4.0, 1.0)
        assert a - b == Vector(-2.0, 3.0)
        assert -a == Vector(-1.0, -2.0)
        assert a * 2 == Vector(2.0, 4.0)
        assert 2 * a == Vector(2.0, 4.0)

    def test_length(self) -> None:
        """Test length and squared length."""
        v = Vector(3.0, 4.0)
        assert v.length() == 5.0
        assert v.length_squared() == 25.0

    def test_turn_90(self) -> None:
        """Test quarter turn maps (x, y) to (-y, x)."""
        assert Vector(1.0, 0.0).turn_90() == Vector(-0.0, 1.0)
        assert Vector(2.0, 3.0).turn_90() == Vector(-3.0, 2.0)

    def test_angle(self) -> None:
        """Test angle is measured counter-clockwise from +x."""
        assert Vector(0.0, 1.0).angle() == pytest.approx(math.pi / 2)
        assert Vector(-1.0, 0.0).angle() == pytest.approx(math.pi)

    def test_from_angle_and_rotate(self) -> None:
        """Test building and rotating vectors by angle."""
        v = Vector.from_angle(math.pi / 2, 2.0)
        assert v.x == pytest.approx(0.0, abs=1e-12)
        assert v.y == pytest.approx(2.0)

        r = Vector(1.0, 0.0).rotate(math.pi)
        assert r.x == pytest.approx(-1.0)
        assert r.y == pytest.approx(0.0, abs=1e-12)


class TestPoint:
    """Tests for Point class."""

    def test_point_vector_arithmetic(self) -> None:
        """Test Point - Point gives a Vector and Point + Vector a Point."""
        p = Point(1.0, 1.0)
        q = Point(4.0, 5.0)
        assert q - p == Vector(3.0, 4.0)
        assert p + Vector(3.0, 4.0) == q

    def test_midpoint_and_distance(self) -> None:
        """Test midpoint and distance."""
        p = Point(0.0, 0.0)
        q = Point(6.0, 8.0)
        assert p.midpoint(q) == Point(3.0, 4.0)
        assert p.distance_to(q) == 10.0

    def test_rotate_about(self) -> None:
        """Test rotation about a center."""
        p = Point(2.0, 1.0).rotate_about(Point(1.0, 1.0), math.pi / 2)
        assert p.x == pytest.approx(1.0)
        assert p.y == pytest.approx(2.0)

    def test_transformed(self) -> None:
        """Test applying a fontTools transform."""
        p = Point(3.0, 4.0).transformed(Transform(1, 0, 0, -1, 0, 0))
        assert p == Point(3.0, -4.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 150.0  # type: ignore[misc]

    def test_point_hashable(self) -> None:
        """Test that points can be used in sets."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2


class TestBoundingBox:
    """Tests for BoundingBox class."""

    def test_from_points(self) -> None:
        """Test building a box from points."""
        box = BoundingBox.from_points([Point(1, 5), Point(-2, 3), Point(4, -1)])
        assert box == BoundingBox(-2, -1, 4, 5)
        assert box.width == 6
        assert box.height == 6

    def test_from_no_points(self) -> None:
        """Test an empty point list is rejected."""
        with pytest.raises(ValueError):
            BoundingBox.from_points([])

    def test_inflate_and_expand(self) -> None:
        """Test inflating then rounding outward to integers."""
        box = BoundingBox(0.0, 0.0, 10.0, 100.0).inflate(3.0).expand()
        assert box == BoundingBox(-3, -3, 13, 103)

        box = BoundingBox(0.2, 0.2, 1.2, 1.2).expand()
        assert box == BoundingBox(0, 0, 2, 2)

    def test_union(self) -> None:
        """Test union of two boxes."""
        box = BoundingBox(0, 0, 1, 1).union(BoundingBox(2, -1, 3, 0.5))
        assert box == BoundingBox(0, -1, 3, 1)


class TestSegments:
    """Tests for segment types."""

    def test_line_eval_and_nearest(self) -> None:
        """Test evaluating a line and projecting onto it."""
        line = LineSegment(Point(0, 0), Point(10, 0))
        assert line.eval(0.25) == Point(2.5, 0)
        t, distance_sq = line.nearest(Point(3, 4))
        assert t == pytest.approx(0.3)
        assert distance_sq == pytest.approx(16.0)

    def test_line_nearest_clamps(self) -> None:
        """Test projection past an endpoint clamps to it."""
        line = LineSegment(Point(0, 0), Point(10, 0))
        t, distance_sq = line.nearest(Point(-3, 4))
        assert t == 0.0
        assert distance_sq == pytest.approx(25.0)

    def test_quadratic_bounding_box_includes_extremum(self) -> None:
        """Test the box of a quadratic is tight around the curve."""
        quad = QuadraticSegment(Point(0, 0), Point(5, 10), Point(10, 0))
        box = quad.bounding_box()
        assert box.max_y == pytest.approx(5.0)
        assert box.min_x == 0
        assert box.max_x == 10

    def test_cubic_eval_endpoints(self) -> None:
        """Test a cubic passes through its endpoints."""
        cubic = CubicSegment(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0))
        assert cubic.eval(0.0) == Point(0, 0)
        assert cubic.eval(1.0) == Point(10, 0)
        assert cubic.bounding_box().max_y == pytest.approx(7.5)

    def test_svg_commands(self) -> None:
        """Test SVG path commands."""
        assert LineSegment(Point(0, 0), Point(1.5, 2)).svg_command() == "L1.5,2"
        quad = QuadraticSegment(Point(0, 0), Point(1, 2), Point(3, 4))
        assert quad.svg_command() == "Q1,2 3,4"


class TestContour:
    """Tests for Contour class."""

    def test_polygon(self) -> None:
        """Test building a closed polygon."""
        contour = Contour.polygon([(0, 0), (10, 0), (10, 10)])
        assert len(contour) == 3
        assert contour.segments[-1].end == contour.start

    def test_open_contour_rejected(self) -> None:
        """Test an open contour raises ContourError."""
        segments = (
            LineSegment(Point(0, 0), Point(10, 0)),
            LineSegment(Point(10, 0), Point(10, 10)),
        )
        with pytest.raises(ContourError, match="not closed"):
            Contour(segments)

    def test_broken_contour_rejected(self) -> None:
        """Test disconnected segments raise ContourError."""
        segments = (
            LineSegment(Point(0, 0), Point(10, 0)),
            LineSegment(Point(11, 0), Point(0, 0)),
        )
        with pytest.raises(ContourError, match="segment 1 starts"):
            Contour(segments)

    def test_empty_contour_rejected(self) -> None:
        """Test a contour without segments raises ContourError."""
        with pytest.raises(ContourError):
            Contour(())

    def test_svg_path(self) -> None:
        """Test SVG serialization of a contour."""
        contour = Contour.polygon([(0, 0), (10, 0), (10, 10)])
        assert contour.to_svg_path() == "M0,0 L10,0 L10,10 L0,0 Z"


class TestShape:
    """Tests for Shape class."""

    def test_segments_and_counts(self, plus_shape: Shape) -> None:
        """Test iterating every segment."""
        assert plus_shape.segment_count == 8
        assert len(list(plus_shape.segments())) == 8
        assert not plus_shape.is_empty()

    def test_bounding_box(self, plus_shape: Shape) -> None:
        """Test bounding box and max dimension."""
        assert plus_shape.bounding_box == BoundingBox(0, 0, 100, 100)
        assert plus_shape.max_dimension == 100

    def test_empty_shape(self) -> None:
        """Test an empty shape has a zero box."""
        shape = Shape(())
        assert shape.is_empty()
        assert shape.bounding_box == BoundingBox(0, 0, 0, 0)

    def test_probe_box(self, narrow_rectangle: Shape) -> None:
        """Test probe box is inflated by a share of the larger side."""
        assert narrow_rectangle.probe_box(0.03) == BoundingBox(-3, -3, 13, 103)

    def test_transformed(self, narrow_rectangle: Shape) -> None:
        """Test transforming every contour."""
        moved = narrow_rectangle.transformed(Transform().translate(5, -5))
        assert moved.bounding_box == BoundingBox(5, -5, 15, 95)


class TestWidthCandidates:
    """Tests for WidthCandidates class."""

    def _fitted(self, y: float, radius: float) -> FittedWidth:
        rib = LineSegment(Point(0, y), Point(2 * radius, y))
        return FittedWidth(rib, Circle(rib.midpoint(), radius))

    def test_empty(self) -> None:
        """Test an empty result has no widths."""
        candidates = WidthCandidates()
        assert not candidates.has_measurement
        assert candidates.min_width is None
        assert candidates.max_width is None
        with pytest.raises(NoMeasurableStrokeError):
            candidates.width_range()

    def test_running_min_max(self) -> None:
        """Test min and max follow the fitted diameters."""
        candidates = WidthCandidates()
        candidates.add(self._fitted(0, 5))
        candidates.add(self._fitted(10, 2))
        candidates.add(self._fitted(20, 8))
        assert candidates.width_range() == (4.0, 16.0)

    def test_unique_rib_count(self) -> None:
        """Test duplicate ribs are counted once."""
        candidates = WidthCandidates()
        candidates.add(self._fitted(0, 5))
        candidates.add(self._fitted(0.01, 5))
        candidates.add(self._fitted(10, 5))
        assert candidates.unique_rib_count() == 2
        assert candidates.fitted[0].width == 10.0
