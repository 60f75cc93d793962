"""Stroke width measurement engine.

The StrokeWidthMeter ties the components together:
1. Classify the shape with the nonzero winding rule
2. Cast rays with the selected strategy to find rib candidates
3. Fit an inscribed circle into every rib
4. Report the minimum and maximum diameter along with every candidate
"""

import logging
import time

import structlog

from strokewidth.config import RayStrategy, StrokeWidthSettings, get_default_settings
from strokewidth.core.casters import RadialRayCaster, SegmentRayCaster
from strokewidth.core.fill import FillClassifier
from strokewidth.core.fitter import InscribedCircleFitter
from strokewidth.domain import Shape, WidthCandidates


class StrokeWidthMeter:
    """Measures the stroke widths of a shape.

    The meter is stateless between calls, so one instance can measure any
    number of shapes.

    Example:
        meter = StrokeWidthMeter()
        candidates = meter.measure(shape, RayStrategy.ALL_SEGMENTS)
        low, high = candidates.width_range()
    """

    def __init__(
        self,
        settings: StrokeWidthSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the meter.

        Args:
            settings: Application settings (defaults if None)
            logger: Bound logger for measurement events
        """
        self.settings = settings or get_default_settings()
        self.logger = logger or structlog.wrap_logger(
            logging.getLogger("strokewidth"), wrapper_class=structlog.stdlib.BoundLogger
        )

    def measure(
        self,
        shape: Shape,
        strategy: RayStrategy | str | None = None,
        include_rays: bool | None = None,
    ) -> WidthCandidates:
        """Measure the stroke widths of a shape.

        Args:
            shape: Filled outline to measure
            strategy: Ray casting strategy (configured default if None)
            include_rays: Keep diagnostic rays (configured default if None)

        Returns:
            WidthCandidates; min/max are None when no rib could be fitted

        Raises:
            DegenerateShapeError: If the shape has too little ink
            UnsupportedShapeError: If the center of mass strategy cannot be used
            UnsupportedSegmentError: If a tangent of a cubic segment is needed
        """
        measurement = self.settings.measurement
        strategy = RayStrategy(strategy or measurement.strategy)
        if include_rays is None:
            include_rays = measurement.include_rays

        start = time.perf_counter()
        classifier = FillClassifier(shape, self.settings.geometry)
        if strategy is RayStrategy.CENTER_OF_MASS:
            caster = RadialRayCaster(classifier, self.settings.resolution, self.settings.geometry)
        else:
            caster = SegmentRayCaster(classifier, self.settings.resolution, self.settings.geometry)
        cast = caster.cast()

        fitter = InscribedCircleFitter(classifier, self.settings.resolution)
        candidates = fitter.fit(cast.ribs, cast.rays if include_rays else ())
        candidates.centroid = cast.centroid
        candidates.warnings.extend(cast.warnings)

        for warning in cast.warnings:
            self.logger.warning("Measurement warning", warning=warning, strategy=strategy.value)

        self.logger.debug(
            "Shape measured",
            strategy=strategy.value,
            segments=shape.segment_count,
            rays=len(cast.rays),
            ribs=candidates.rib_count,
            fitted=len(candidates.fitted),
            min_width=candidates.min_width,
            max_width=candidates.max_width,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return candidates


def measure_stroke_width(
    shape: Shape,
    strategy: RayStrategy | str = RayStrategy.CENTER_OF_MASS,
    include_rays: bool = True,
    settings: StrokeWidthSettings | None = None,
) -> WidthCandidates:
    """Measure a shape with a one-off meter.

    Args:
        shape: Filled outline to measure
        strategy: Ray casting strategy
        include_rays: Keep diagnostic rays in the result
        settings: Application settings (defaults if None)

    Returns:
        WidthCandidates for the shape
    """
    return StrokeWidthMeter(settings).measure(shape, strategy, include_rays)
