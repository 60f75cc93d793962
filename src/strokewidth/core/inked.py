"""Extraction of the inked stretches of a probe ray."""

from strokewidth.core.fill import FillClassifier
from strokewidth.domain import LineSegment, Ray, Rib


class InkedSegmentExtractor:
    """Cuts a probe ray into the pieces that run through ink.

    Each returned rib starts and ends on the outline and has a filled
    midpoint. Intersections where the ray only grazes the outline, with ink
    on both sides, do not split the ray.
    """

    def __init__(self, classifier: FillClassifier) -> None:
        self.classifier = classifier
        self.config = classifier.config

    def crossing_parameters(self, ray: Ray) -> list[float]:
        """Get the sorted ray parameters where the ray enters or leaves ink.

        Args:
            ray: Probe line segment

        Returns:
            Ascending line parameters with near-duplicates collapsed
        """
        epsilon = self.config.graze_epsilon
        params = []
        for intersection, _segment in self.classifier.intersections(ray):
            t = intersection.line_t
            before = self.classifier.is_filled(ray.eval(t - epsilon))
            after = self.classifier.is_filled(ray.eval(t + epsilon))
            if before and after:
                continue
            params.append(t)

        params.sort()
        # Walk backwards so removals keep the earlier of two close parameters
        for i in range(len(params) - 1, 0, -1):
            if abs(params[i] - params[i - 1]) < self.config.duplicate_epsilon:
                del params[i]
        return params

    def inked_segments(self, ray: Ray) -> list[Rib]:
        """Get every stretch of the ray lying inside the shape.

        Args:
            ray: Probe line segment

        Returns:
            Ribs in ray order
        """
        params = self.crossing_parameters(ray)
        ribs = []
        for t0, t1 in zip(params, params[1:]):
            rib = LineSegment(ray.eval(t0), ray.eval(t1))
            if self.classifier.is_filled(rib.midpoint()):
                ribs.append(rib)
        return ribs
