"""Ray casting strategies that discover rib candidates.

Two strategies are available:
- RadialRayCaster: Sprays rays from the center of mass and keeps, for each
  ray, the rib nearest to where it first hits the outline
- SegmentRayCaster: Probes along the normal of every outline segment and
  keeps every rib found
"""

import logging
import math
from dataclasses import dataclass, field

from strokewidth.config import GeometryConfig, ResolutionConfig
from strokewidth.core.centroid import CentroidEstimator
from strokewidth.core.fill import FillClassifier, LineIntersection
from strokewidth.core.inked import InkedSegmentExtractor
from strokewidth.domain import LineSegment, Point, Ray, Rib, Segment, Vector

logger = logging.getLogger(__name__)

INVERTED_FILL_WARNING = "inverted fill suspected: most of the probe box is inked"


@dataclass
class CastResult:
    """Rays and ribs produced by one casting pass.

    Attributes:
        rays: Diagnostic rays, in casting order
        ribs: Rib candidates for the circle fitter
        centroid: Center of mass the rays were cast from, if any
        warnings: Non-fatal diagnostics
    """

    rays: list[Ray] = field(default_factory=list)
    ribs: list[Rib] = field(default_factory=list)
    centroid: Point | None = None
    warnings: list[str] = field(default_factory=list)


def probe_ray(through: Point, angle: float, half_length: float) -> Ray:
    """Build a probe line through a point.

    Args:
        through: Point the probe passes through (its midpoint)
        angle: Direction of the probe in radians
        half_length: Distance from the point to either end

    Returns:
        Line segment running from behind the point to ahead of it
    """
    reach = Vector.from_angle(angle, half_length)
    return LineSegment(through + (-reach), through + reach)


class _RayCaster:
    def __init__(
        self,
        classifier: FillClassifier,
        resolution: ResolutionConfig | None = None,
        geometry: GeometryConfig | None = None,
    ) -> None:
        self.classifier = classifier
        self.resolution = resolution or ResolutionConfig()
        self.geometry = geometry or classifier.config
        self.extractor = InkedSegmentExtractor(classifier)

    @property
    def ray_length(self) -> float:
        return self.geometry.ray_extent * self.classifier.shape.max_dimension


class RadialRayCaster(_RayCaster):
    """Center of mass strategy.

    Works for shapes whose center of mass falls outside the ink, such as
    "o" or "O". For each ray from the center of mass, the outline normal at
    the first hit is turned away from the center and probed; the inked
    stretch nearest the hit point becomes the rib.
    """

    def cast(self) -> CastResult:
        """Cast rays around the center of mass.

        Returns:
            CastResult with one rib per ray that hit the outline

        Raises:
            DegenerateShapeError: If the shape has too little ink
            UnsupportedShapeError: If the center of mass lies inside the ink
            UnsupportedSegmentError: If a ray first hits a cubic segment
        """
        estimator = CentroidEstimator(self.classifier, self.resolution, self.geometry)
        estimate = estimator.estimate()
        center = estimator.require_unfilled(estimate)

        result = CastResult(centroid=center)
        if estimate.inverted_fill_suspected:
            result.warnings.append(INVERTED_FILL_WARNING)

        length = self.ray_length
        steps = self.resolution.angle_steps
        for i in range(steps):
            angle = math.radians(i * 360.0 / steps)
            ray = LineSegment(center, center + Vector.from_angle(angle, length))

            nearest = self._first_hit(ray)
            if nearest is None:
                result.rays.append(ray)
                continue

            intersection, segment = nearest
            hit, tangent = self.classifier.tangent(segment, intersection.segment_t)
            normal = self._away_from(center, hit, tangent.turn_90())
            result.rays.append(LineSegment(center, hit))

            if normal.length_squared() == 0.0:
                logger.debug("Zero-length segment at (%.2f, %.2f), ray skipped", hit.x, hit.y)
                continue

            rib = self._nearest_rib(probe_ray(hit, normal.angle(), length), hit)
            if rib is not None:
                result.ribs.append(rib)

        return result

    def _first_hit(self, ray: Ray) -> tuple[LineIntersection, Segment] | None:
        nearest = None
        for intersection, segment in self.classifier.intersections(ray):
            if nearest is None or intersection.line_t < nearest[0].line_t:
                nearest = (intersection, segment)
        return nearest

    @staticmethod
    def _away_from(center: Point, hit: Point, normal: Vector) -> Vector:
        if (hit + normal).distance_to(center) > (hit + (-normal)).distance_to(center):
            return normal
        return -normal

    def _nearest_rib(self, probe: Ray, hit: Point) -> Rib | None:
        best = None
        best_distance = math.inf
        for rib in self.extractor.inked_segments(probe):
            _, distance_sq = rib.nearest(hit)
            if distance_sq < best_distance:
                best = rib
                best_distance = distance_sq
        return best


class SegmentRayCaster(_RayCaster):
    """All-segments strategy.

    Probes along the outline normal at evenly spaced parameters of every
    segment and keeps every inked stretch. Works for any shape, at the cost
    of many more ribs.
    """

    def cast(self) -> CastResult:
        """Cast normal probes from every segment.

        Raises:
            UnsupportedSegmentError: If the shape contains cubic segments
        """
        result = CastResult()
        length = self.ray_length
        samples = self.resolution.segment_samples
        for segment in self.classifier.segments:
            for k in range(samples):
                point, tangent = self.classifier.tangent(segment, k / samples)
                normal = tangent.turn_90()
                if normal.length_squared() == 0.0:
                    logger.debug(
                        "Zero-length segment at (%.2f, %.2f), probe skipped", point.x, point.y
                    )
                    continue
                probe = probe_ray(point, normal.angle(), length)
                result.rays.append(probe)
                result.ribs.extend(self.extractor.inked_segments(probe))
        return result
