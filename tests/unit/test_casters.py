"""Unit tests for the ray casting strategies."""

import math

import pytest

from strokewidth.config import ResolutionConfig
from strokewidth.core.casters import (
    INVERTED_FILL_WARNING,
    RadialRayCaster,
    SegmentRayCaster,
    probe_ray,
)
from strokewidth.core.fill import FillClassifier
from strokewidth.domain import (
    Contour,
    CubicSegment,
    LineSegment,
    Point,
    QuadraticSegment,
    Shape,
)
from strokewidth.exceptions import UnsupportedSegmentError, UnsupportedShapeError


def _cusped_rectangle() -> Shape:
    """A 100 x 20 rectangle whose right side is a quadratic with p1 == p0."""
    cusp = QuadraticSegment(Point(100, 0), Point(100, 0), Point(100, 20))
    return Shape(
        (
            Contour(
                (
                    LineSegment(Point(0, 0), Point(100, 0)),
                    cusp,
                    LineSegment(Point(100, 20), Point(0, 20)),
                    LineSegment(Point(0, 20), Point(0, 0)),
                )
            ),
        )
    )


def _cusped_ring() -> Shape:
    """The reference ring with its outer left side drawn as a cusped quadratic."""
    outer = Contour(
        (
            QuadraticSegment(Point(100, 0), Point(100, 0), Point(100, 600)),
            LineSegment(Point(100, 600), Point(500, 600)),
            LineSegment(Point(500, 600), Point(500, 0)),
            LineSegment(Point(500, 0), Point(100, 0)),
        )
    )
    inner = Contour.polygon([(200, 60), (400, 60), (400, 540), (200, 540)])
    return Shape((outer, inner))


def _diamond_ring() -> Shape:
    """Diamond with a diamond hole, all vertices on the axes."""
    return Shape.from_polygons(
        [(100, 0), (0, 100), (-100, 0), (0, -100)],
        [(50, 0), (0, -50), (-50, 0), (0, 50)],
    )


class TestProbeRay:
    """Tests for probe_ray."""

    def test_centered_on_point(self) -> None:
        """Test the probe runs through the point in both directions."""
        ray = probe_ray(Point(5, 5), math.pi / 2, 10.0)
        assert ray.midpoint().x == pytest.approx(5.0)
        assert ray.midpoint().y == pytest.approx(5.0)
        assert ray.p0.y == pytest.approx(-5.0)
        assert ray.p1.y == pytest.approx(15.0)
        assert ray.length() == pytest.approx(20.0)


class TestRadialRayCaster:
    """Tests for RadialRayCaster class."""

    def test_ring(self, ring_shape: Shape) -> None:
        """Test every ray hits the ring and yields a rib across a side."""
        result = RadialRayCaster(FillClassifier(ring_shape)).cast()

        assert result.centroid is not None
        assert len(result.rays) == 360
        assert len(result.ribs) == 360
        assert result.warnings == []
        for rib in result.ribs:
            assert rib.length() == pytest.approx(100.0) or rib.length() == pytest.approx(60.0)

    def test_diagnostic_rays_end_on_outline(self, ring_shape: Shape) -> None:
        """Test hit rays run from the center of mass to the outline."""
        result = RadialRayCaster(FillClassifier(ring_shape)).cast()
        for ray in result.rays:
            assert ray.p0 == result.centroid
            assert ray.length() < 300

    def test_angle_steps(self, ring_shape: Shape) -> None:
        """Test the number of rays comes from configuration."""
        resolution = ResolutionConfig(angle_steps=36)
        result = RadialRayCaster(FillClassifier(ring_shape), resolution).cast()
        assert len(result.rays) == 36

    def test_filled_center_unsupported(self, plus_shape: Shape) -> None:
        """Test shapes with an inked center of mass are rejected."""
        with pytest.raises(UnsupportedShapeError):
            RadialRayCaster(FillClassifier(plus_shape)).cast()

    def test_inverted_fill_warning(self) -> None:
        """Test a suspicious fill is reported but casting continues."""
        outer = [(0, 0), (100, 0), (100, 100), (0, 100)]
        hole = [(45, 45), (45, 55), (55, 55), (55, 45)]
        result = RadialRayCaster(FillClassifier(Shape.from_polygons(outer, hole))).cast()
        assert result.warnings == [INVERTED_FILL_WARNING]
        assert result.ribs

    def test_cusped_quadratic(self) -> None:
        """Test a quadratic with its control point on its start is measured."""
        result = RadialRayCaster(FillClassifier(_cusped_ring())).cast()

        assert len(result.ribs) == 360
        for rib in result.ribs:
            assert rib.length() == pytest.approx(100.0) or rib.length() == pytest.approx(60.0)

    def test_first_hit_tie_keeps_outline_order(self) -> None:
        """Test a ray through a shared vertex keeps the earlier segment."""
        caster = RadialRayCaster(FillClassifier(_diamond_ring()))
        intersection, segment = caster._first_hit(LineSegment(Point(0, 0), Point(200, 0)))

        assert intersection.line_t == pytest.approx(0.25)
        assert segment == LineSegment(Point(50, 0), Point(0, -50))

    def test_nearest_rib_tie_keeps_first(self) -> None:
        """Test two ribs equally far from the hit keep the one met first."""
        shape = Shape.from_polygons(
            [(0, 0), (10, 0), (10, 100), (0, 100)], [(30, 0), (40, 0), (40, 100), (30, 100)]
        )
        caster = RadialRayCaster(FillClassifier(shape))

        rib = caster._nearest_rib(LineSegment(Point(-128, 50), Point(128, 50)), Point(20, 50))

        assert rib is not None
        assert rib.p0.x == pytest.approx(0.0)
        assert rib.p1.x == pytest.approx(10.0)


class TestSegmentRayCaster:
    """Tests for SegmentRayCaster class."""

    def test_probe_count(self, narrow_rectangle: Shape) -> None:
        """Test one probe per sample of every segment."""
        result = SegmentRayCaster(FillClassifier(narrow_rectangle)).cast()
        assert len(result.rays) == 4 * 10
        assert result.centroid is None

    def test_keeps_all_ribs(self, ring_shape: Shape) -> None:
        """Test every inked stretch of every probe is kept."""
        result = SegmentRayCaster(FillClassifier(ring_shape)).cast()
        assert len(result.ribs) >= len(result.rays)

    def test_segment_samples(self, narrow_rectangle: Shape) -> None:
        """Test the sample count comes from configuration."""
        resolution = ResolutionConfig(segment_samples=3)
        result = SegmentRayCaster(FillClassifier(narrow_rectangle), resolution).cast()
        assert len(result.rays) == 12

    def test_cubic_unsupported(self) -> None:
        """Test cubic outlines fail fast."""
        arch = CubicSegment(Point(0, 0), Point(0, 40), Point(100, 40), Point(100, 0))
        base = LineSegment(Point(100, 0), Point(0, 0))
        shape = Shape((Contour((arch, base)),))
        with pytest.raises(UnsupportedSegmentError):
            SegmentRayCaster(FillClassifier(shape)).cast()

    def test_cusped_quadratic(self) -> None:
        """Test the start of a quadratic with p1 == p0 casts along its chord normal."""
        shape = _cusped_rectangle()
        result = SegmentRayCaster(FillClassifier(shape)).cast()

        assert len(result.rays) == shape.segment_count * 10
        start_ray = result.rays[10]
        assert start_ray.midpoint().x == pytest.approx(100.0)
        assert start_ray.midpoint().y == pytest.approx(0.0)
        assert start_ray.p0.y == pytest.approx(0.0, abs=1e-9)
        assert start_ray.p1.y == pytest.approx(0.0, abs=1e-9)
        assert result.ribs
