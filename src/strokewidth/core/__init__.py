"""Core measurement algorithms for strokewidth.

This module contains the geometric engine:

- Fill classification (nonzero winding, ray intersection, tangents)
- Center of mass estimation on a sampling grid
- Ray casting strategies that discover rib candidates
- Inscribed circle fitting that turns ribs into widths

All services are designed to be:
- Synchronous and free of I/O
- Read-only with respect to the shape they measure

Key classes:
- FillClassifier: Winding number, intersections and tangents of a shape
- CentroidEstimator: Grid based center of mass
- InkedSegmentExtractor: Splits a probe ray into inked stretches
- RadialRayCaster: Center of mass strategy
- SegmentRayCaster: All-segments strategy
- InscribedCircleFitter: Circle fitting and min/max tracking
- StrokeWidthMeter: Engine facade
"""

from strokewidth.core.casters import CastResult, RadialRayCaster, SegmentRayCaster, probe_ray
from strokewidth.core.centroid import CentroidEstimate, CentroidEstimator
from strokewidth.core.fill import FillClassifier, LineIntersection
from strokewidth.core.fitter import InscribedCircleFitter
from strokewidth.core.inked import InkedSegmentExtractor
from strokewidth.core.meter import StrokeWidthMeter, measure_stroke_width

__all__ = [
    # Casting
    "CastResult",
    "RadialRayCaster",
    "SegmentRayCaster",
    "probe_ray",
    # Center of mass
    "CentroidEstimate",
    "CentroidEstimator",
    # Classification
    "FillClassifier",
    "LineIntersection",
    # Fitting
    "InkedSegmentExtractor",
    "InscribedCircleFitter",
    # Engine
    "StrokeWidthMeter",
    "measure_stroke_width",
]
