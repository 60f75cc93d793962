"""Discrete center of mass estimation."""

from dataclasses import dataclass

from strokewidth.config import GeometryConfig, ResolutionConfig
from strokewidth.core.fill import FillClassifier
from strokewidth.domain import Point
from strokewidth.exceptions import DegenerateShapeError, UnsupportedShapeError


@dataclass(frozen=True, slots=True)
class CentroidEstimate:
    """Result of a center of mass scan.

    Attributes:
        point: Mean position of the filled grid samples
        filled_count: Number of filled samples
        sample_count: Number of samples tested
        inverted_fill_suspected: True when most of the probe box is filled,
            which usually means the outline direction is reversed
    """

    point: Point
    filled_count: int
    sample_count: int
    inverted_fill_suspected: bool = False

    @property
    def filled_ratio(self) -> float:
        if self.sample_count == 0:
            return 0.0
        return self.filled_count / self.sample_count


def _grid_axis(start: float, size: float, divisions: int) -> range:
    step = max(1, int(size // divisions))
    return range(int(start), int(start + size), step)


class CentroidEstimator:
    """Estimates the center of mass of a shape on a sampling grid.

    The grid covers the shape's probe box. Only the filled samples are
    averaged, so the estimate is the center of the ink, which for letters
    like "o" lies in the counter.
    """

    def __init__(
        self,
        classifier: FillClassifier,
        resolution: ResolutionConfig | None = None,
        geometry: GeometryConfig | None = None,
    ) -> None:
        self.classifier = classifier
        self.resolution = resolution or ResolutionConfig()
        self.geometry = geometry or classifier.config

    def estimate(self) -> CentroidEstimate:
        """Scan the probe box and average the filled samples.

        Returns:
            CentroidEstimate with the mean filled position

        Raises:
            DegenerateShapeError: If too few samples are filled
        """
        box = self.classifier.shape.probe_box(self.geometry.bbox_margin)
        divisions = self.resolution.grid_divisions

        sum_x = 0.0
        sum_y = 0.0
        filled = 0
        total = 0
        for x in _grid_axis(box.min_x, box.width, divisions):
            for y in _grid_axis(box.min_y, box.height, divisions):
                total += 1
                if self.classifier.is_filled(Point(x, y)):
                    sum_x += x
                    sum_y += y
                    filled += 1

        if filled < self.geometry.min_filled_samples:
            raise DegenerateShapeError(
                f"only {filled} of {total} grid samples are filled "
                f"(need {self.geometry.min_filled_samples})"
            )

        return CentroidEstimate(
            point=Point(sum_x / filled, sum_y / filled),
            filled_count=filled,
            sample_count=total,
            inverted_fill_suspected=filled / total > self.geometry.inverted_fill_ratio,
        )

    def require_unfilled(self, estimate: CentroidEstimate) -> Point:
        """Check that rays can start from the estimated center of mass.

        Raises:
            UnsupportedShapeError: If the center of mass lies inside the ink
        """
        if self.classifier.is_filled(estimate.point):
            x, y = estimate.point.to_tuple()
            raise UnsupportedShapeError(f"center of mass ({x:.1f}, {y:.1f}) lies inside the ink")
        return estimate.point
