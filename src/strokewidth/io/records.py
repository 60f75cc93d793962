"""Tag records for measured stroke widths.

A record is one comma-delimited row:

    family,location,tag,value

where ``location`` describes the design location (empty for the default
location) and ``value`` is the width normalized to 1000 units per em.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from strokewidth.domain import WidthCandidates

STROKE_WIDTH_MIN_TAG = "/quant/stroke_width_min"
STROKE_WIDTH_MAX_TAG = "/quant/stroke_width_max"


def _format_coordinate(value: float) -> str:
    if value == round(value):
        return str(int(value))
    return f"{value:.2f}"


def location_descriptor(location: Mapping[str, float]) -> str:
    """Describe a location for a record row.

    Examples: ``""`` for the default location, ``wght@400``, and
    ``"wdth,wght@87.50,400"`` for more than one axis (quoted since the
    row itself is comma-delimited).
    """
    if not location:
        return ""
    tags = ",".join(location.keys())
    values = ",".join(_format_coordinate(v) for v in location.values())
    quote = '"' if "," in tags else ""
    return f"{quote}{tags}@{values}{quote}"


def filename_fragment(location: Mapping[str, float]) -> str:
    """Describe a location for use in a file name, e.g. ``wght400.00``."""
    return "_".join(f"{tag}{value:.2f}" for tag, value in location.items())


@dataclass(frozen=True)
class TagRecord:
    """One measured value for a family at a location.

    Attributes:
        family: Family name
        location: Location descriptor (see location_descriptor)
        tag: Tag path, e.g. /quant/stroke_width_min
        value: Normalized value
    """

    family: str
    location: str
    tag: str
    value: float

    def to_csv(self) -> str:
        return f"{self.family},{self.location},{self.tag},{self.value:.2f}"


def width_records(
    family: str,
    location: Mapping[str, float],
    candidates: WidthCandidates,
    scale: float = 1.0,
) -> list[TagRecord]:
    """Build the min/max stroke width records of one measurement.

    Args:
        family: Family name
        location: Design location the shape was drawn at
        candidates: Measurement result
        scale: Normalization scale applied to the widths

    Returns:
        Min and max records, or an empty list when nothing was measured
    """
    if not candidates.has_measurement:
        return []
    low, high = candidates.width_range()
    descriptor = location_descriptor(location)
    return [
        TagRecord(family, descriptor, STROKE_WIDTH_MIN_TAG, low * scale),
        TagRecord(family, descriptor, STROKE_WIDTH_MAX_TAG, high * scale),
    ]
