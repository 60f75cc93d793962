"""Font I/O and output formatting.

This module provides:
- FontReader: Load TTF/OTF fonts and draw characters as shapes
- Converters between fonttools pens and domain shapes
- Tag records for measured widths
- SVG/HTML debug rendering
"""

from strokewidth.io.converter import ShapePen, draw_glyph_shape, recording_to_shape
from strokewidth.io.reader import FontReader
from strokewidth.io.records import (
    STROKE_WIDTH_MAX_TAG,
    STROKE_WIDTH_MIN_TAG,
    TagRecord,
    filename_fragment,
    location_descriptor,
    width_records,
)
from strokewidth.io.svg import render_debug_html, render_debug_svg, svg_output_path

__all__ = [
    "STROKE_WIDTH_MAX_TAG",
    "STROKE_WIDTH_MIN_TAG",
    "FontReader",
    "ShapePen",
    "TagRecord",
    "draw_glyph_shape",
    "filename_fragment",
    "location_descriptor",
    "recording_to_shape",
    "render_debug_html",
    "render_debug_svg",
    "svg_output_path",
    "width_records",
]
