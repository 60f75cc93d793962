"""Inscribed circle fitting for rib candidates."""

import logging
import math
from collections.abc import Iterable

from strokewidth.config import ResolutionConfig
from strokewidth.core.fill import FillClassifier
from strokewidth.domain import Circle, FittedWidth, Point, Ray, Rib, WidthCandidates

logger = logging.getLogger(__name__)


class InscribedCircleFitter:
    """Fits the largest circle around a rib midpoint that stays in the ink.

    Candidate radii are tried from the full half-rib downwards: a point
    walks from the rib start towards the midpoint in doubling steps, and the
    first point whose full rotation about the midpoint stays filled sets the
    radius.

    Example:
        fitter = InscribedCircleFitter(classifier)
        candidates = fitter.fit(ribs)
    """

    def __init__(
        self, classifier: FillClassifier, resolution: ResolutionConfig | None = None
    ) -> None:
        self.classifier = classifier
        self.resolution = resolution or ResolutionConfig()
        samples = self.resolution.rotation_samples
        angles = [math.radians(k * 360.0 / samples) for k in range(samples)]
        self._rotations = [(math.cos(a), math.sin(a)) for a in angles]

    def _ring_filled(self, center: Point, point: Point) -> bool:
        dx = point.x - center.x
        dy = point.y - center.y
        for cos_a, sin_a in self._rotations:
            rotated = Point(center.x + dx * cos_a - dy * sin_a, center.y + dx * sin_a + dy * cos_a)
            if not self.classifier.is_filled(rotated):
                return False
        return True

    def fit_rib(self, rib: Rib) -> FittedWidth | None:
        """Fit a circle centered on the midpoint of one rib.

        Args:
            rib: Cross-section candidate

        Returns:
            FittedWidth, or None when no circle larger than the minimum
            radius fits
        """
        mid = rib.midpoint()
        t = 0.0
        step = self.resolution.fit_initial_step
        while t <= self.resolution.fit_max_t:
            point = rib.eval(t)
            if self._ring_filled(mid, point):
                radius = point.distance_to(mid)
                if radius > self.resolution.min_radius:
                    return FittedWidth(rib, Circle(mid, radius))
                logger.debug(
                    "Suspiciously small rib (%.3f, %.3f)-(%.3f, %.3f), radius %.3f",
                    rib.p0.x, rib.p0.y, rib.p1.x, rib.p1.y, radius,
                )
                return None
            t += step
            step *= 2
        return None

    def fit(self, ribs: Iterable[Rib], rays: Iterable[Ray] = ()) -> WidthCandidates:
        """Fit every rib and collect the widths.

        Args:
            ribs: Rib candidates
            rays: Diagnostic rays to carry into the result

        Returns:
            WidthCandidates with running min/max over the fitted diameters
        """
        candidates = WidthCandidates(rays=list(rays))
        for rib in ribs:
            candidates.rib_count += 1
            fitted = self.fit_rib(rib)
            if fitted is not None:
                candidates.add(fitted)
        return candidates
