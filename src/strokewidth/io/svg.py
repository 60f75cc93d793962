"""SVG and HTML debug rendering of measurements."""

from collections.abc import Iterable
from pathlib import Path

import svgwrite

from strokewidth.config import GeometryConfig
from strokewidth.domain import Shape, WidthCandidates

SHAPE_COLOR = "darkgray"
RAY_COLOR = "lightblue"
RIB_COLOR = "pink"
CIRCLE_COLOR = "magenta"
MAX_CIRCLE_COLOR = "green"
MIN_CIRCLE_COLOR = "red"

# Circles this close to the extreme widths are highlighted
EXTREME_TOLERANCE = 0.1


def _near(width: float, extreme: float | None) -> bool:
    return extreme is not None and abs(width - extreme) <= EXTREME_TOLERANCE


def render_debug_svg(
    shape: Shape,
    candidates: WidthCandidates,
    show_rays: bool = True,
    geometry: GeometryConfig | None = None,
) -> str:
    """Draw a shape with its rays, ribs and fitted circles.

    The widest circles are drawn in green and the narrowest in red, both
    with a heavier line.

    Args:
        shape: Measured shape
        candidates: Result of measuring the shape
        show_rays: Draw the diagnostic rays
        geometry: Geometry settings used to size the view (defaults if None)

    Returns:
        SVG document as a string
    """
    geometry = geometry or GeometryConfig()
    box = shape.probe_box(geometry.bbox_margin)
    line_width = geometry.bbox_margin * shape.max_dimension / 64.0

    dwg = svgwrite.Drawing()
    dwg.viewbox(box.min_x, box.min_y, box.width, box.height)
    dwg.add(dwg.path(d=shape.to_svg_path(), fill=SHAPE_COLOR))

    if show_rays:
        rays = dwg.g(id="rays", stroke=RAY_COLOR, stroke_width=line_width)
        for ray in candidates.rays:
            rays.add(dwg.line(ray.p0.to_tuple(), ray.p1.to_tuple()))
        dwg.add(rays)

    fitted = dwg.g(id="ribs", fill="none")
    for item in candidates.fitted:
        width = line_width
        circle_color = CIRCLE_COLOR
        if _near(item.width, candidates.max_width):
            width, circle_color = 3 * line_width, MAX_CIRCLE_COLOR
        elif _near(item.width, candidates.min_width):
            width, circle_color = 3 * line_width, MIN_CIRCLE_COLOR
        fitted.add(
            dwg.line(
                item.rib.p0.to_tuple(), item.rib.p1.to_tuple(), stroke=RIB_COLOR, stroke_width=width
            )
        )
        fitted.add(
            dwg.circle(
                center=item.circle.center.to_tuple(),
                r=item.circle.radius,
                stroke=circle_color,
                stroke_width=width,
            )
        )
    dwg.add(fitted)

    return dwg.tostring()


def render_debug_html(svgs: Iterable[str], columns: int = 3) -> str:
    """Lay SVG documents out in a grid on one HTML page."""
    template = " ".join(["1fr"] * columns)
    parts = [
        "<style>",
        f".grid {{ display: grid; grid-template-columns: {template}; }}",
        "</style>",
        '<div class="grid">',
    ]
    for svg in svgs:
        parts.extend(["<div>", svg, "</div>"])
    parts.append("</div>")
    return "\n".join(parts) + "\n"


def svg_output_path(base: Path, fragment: str) -> Path:
    """Derive a per-location SVG path, e.g. out.svg -> outwght400.00.svg."""
    return base.with_name(f"{base.stem}{fragment}{base.suffix}")
