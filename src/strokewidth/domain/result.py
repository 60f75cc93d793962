"""Measurement results.

This module defines what the measurement engine hands back:
- Circle: An inscribed circle
- FittedWidth: A rib together with the circle fitted inside it
- WidthCandidates: Every fitted width plus diagnostics for one measurement
"""

from dataclasses import dataclass, field

from strokewidth.domain.geometry import Point
from strokewidth.domain.segment import Ray, Rib
from strokewidth.exceptions import NoMeasurableStrokeError


@dataclass(frozen=True, slots=True)
class Circle:
    """A circle.

    Attributes:
        center: Center point
        radius: Radius in font units
    """

    center: Point
    radius: float

    @property
    def diameter(self) -> float:
        return 2.0 * self.radius


@dataclass(frozen=True, slots=True)
class FittedWidth:
    """A rib and the largest circle found inside the ink around its midpoint.

    Attributes:
        rib: Cross-section candidate
        circle: Inscribed circle centered on the rib midpoint
    """

    rib: Rib
    circle: Circle

    @property
    def width(self) -> float:
        """Stroke width estimate, the circle diameter."""
        return self.circle.diameter


@dataclass
class WidthCandidates:
    """Outcome of one stroke width measurement.

    ``min_width`` and ``max_width`` are None when no rib could be fitted;
    check ``has_measurement`` before using them.

    Attributes:
        rays: Diagnostic rays cast while searching for ribs (may be empty)
        fitted: Ribs that received an inscribed circle
        rib_count: Number of ribs offered to the circle fitter
        min_width: Smallest fitted diameter, None when nothing was fitted
        max_width: Largest fitted diameter, None when nothing was fitted
        centroid: Estimated center of mass (center-of-mass strategy only)
        warnings: Non-fatal diagnostics raised during the measurement
    """

    rays: list[Ray] = field(default_factory=list)
    fitted: list[FittedWidth] = field(default_factory=list)
    rib_count: int = 0
    min_width: float | None = None
    max_width: float | None = None
    centroid: Point | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def has_measurement(self) -> bool:
        return bool(self.fitted)

    def add(self, fitted_width: FittedWidth) -> None:
        """Record a fitted rib and update the running min/max."""
        self.fitted.append(fitted_width)
        width = fitted_width.width
        if self.min_width is None or width < self.min_width:
            self.min_width = width
        if self.max_width is None or width > self.max_width:
            self.max_width = width

    def width_range(self) -> tuple[float, float]:
        """Get (min_width, max_width).

        Raises:
            NoMeasurableStrokeError: If no rib was fitted
        """
        if self.min_width is None or self.max_width is None:
            raise NoMeasurableStrokeError(
                f"none of {self.rib_count} ribs could be fitted with a circle"
            )
        return self.min_width, self.max_width

    def unique_rib_count(self, decimals: int = 1) -> int:
        """Count distinct fitted ribs after rounding their endpoints."""
        unique = {
            tuple(round(value, decimals) for value in (*f.rib.p0.to_tuple(), *f.rib.p1.to_tuple()))
            for f in self.fitted
        }
        return len(unique)
