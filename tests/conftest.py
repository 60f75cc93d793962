"""Shared fixtures: reference shapes and small generated fonts."""

import logging
from pathlib import Path

import pytest
import structlog
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib.tables.TupleVariation import TupleVariation

from strokewidth.domain import Shape

# Counter-clockwise rectangles in y-up coordinates
VERTICAL_BAR = [(45, 0), (55, 0), (55, 100), (45, 100)]
HORIZONTAL_BAR = [(0, 45), (100, 45), (100, 55), (0, 55)]

RING_OUTER = [(100, 0), (100, 600), (500, 600), (500, 0)]
RING_INNER = [(200, 60), (400, 60), (400, 540), (200, 540)]
# Inner corners move 50 units towards the middle at the heaviest weight
RING_INNER_DELTAS = [(50, 50), (-50, 50), (-50, -50), (50, -50)]


def rectangle(x0: float, y0: float, x1: float, y1: float) -> list[tuple[float, float]]:
    return [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]


@pytest.fixture
def narrow_rectangle() -> Shape:
    """A 10 x 100 upright rectangle."""
    return Shape.from_polygons(rectangle(0, 0, 10, 100))


@pytest.fixture
def plus_shape() -> Shape:
    """Two overlapping 10-wide bars forming a plus sign."""
    return Shape.from_polygons(VERTICAL_BAR, HORIZONTAL_BAR)


@pytest.fixture
def l_shape() -> Shape:
    """An L with a 10-wide upright arm and a 20-wide foot."""
    return Shape.from_polygons(rectangle(0, 0, 10, 100), rectangle(0, 0, 100, 20))


@pytest.fixture
def ring_shape() -> Shape:
    """A rectangular "o": 100-wide sides, 60-wide top and bottom."""
    return Shape.from_polygons(RING_OUTER, RING_INNER)


def _draw_polygons(*polygons: list[tuple[float, float]]):
    pen = TTGlyphPen(None)
    for polygon in polygons:
        pen.moveTo(polygon[0])
        for point in polygon[1:]:
            pen.lineTo(point)
        pen.closePath()
    return pen.glyph()


def build_ring_font(
    path: Path,
    family: str = "Ring Test",
    variable: bool = False,
    upm: int = 1000,
    scale: int = 1,
    weight_class: int = 400,
) -> Path:
    """Write a TrueType font whose "o" is a rectangular ring.

    Coordinates are multiplied by ``scale`` so that fonts with a larger
    units per em keep the same proportions.
    """
    outer = [(x * scale, y * scale) for x, y in RING_OUTER]
    inner = [(x * scale, y * scale) for x, y in RING_INNER]

    fb = FontBuilder(upm, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space", "o"])
    fb.setupCharacterMap({0x20: "space", ord("o"): "o"})
    fb.setupGlyf(
        {
            ".notdef": _draw_polygons(rectangle(50, 0, 450, 700)),
            "space": TTGlyphPen(None).glyph(),
            "o": _draw_polygons(outer, inner),
        }
    )
    fb.setupHorizontalMetrics({".notdef": (500, 50), "space": (250, 0), "o": (600 * scale, 100)})
    fb.setupHorizontalHeader(ascent=800 * scale, descent=-200 * scale)
    fb.setupOS2(
        sTypoAscender=800 * scale,
        sTypoDescender=-200 * scale,
        usWinAscent=800 * scale,
        usWinDescent=200 * scale,
        usWeightClass=weight_class,
        fsSelection=0x40,
    )
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": "Regular",
            "uniqueFontIdentifier": f"{family}-Regular",
            "fullName": f"{family} Regular",
            "psName": f"{family.replace(' ', '')}-Regular",
            "version": "Version 1.000",
        }
    )
    fb.setupPost()

    if variable:
        fb.setupFvar(axes=[("wght", 100, 400, 900, "Weight")], instances=[])
        deltas = [(0, 0)] * len(outer)
        deltas += [(dx * scale, dy * scale) for dx, dy in RING_INNER_DELTAS]
        deltas += [(0, 0)] * 4  # phantom points
        fb.setupGvar({"o": [TupleVariation({"wght": (0.0, 1.0, 1.0)}, deltas)]})

    fb.save(str(path))
    return path


@pytest.fixture
def static_font(tmp_path: Path) -> Path:
    return build_ring_font(tmp_path / "RingTest-Regular.ttf")


@pytest.fixture
def variable_font(tmp_path: Path) -> Path:
    return build_ring_font(tmp_path / "RingTest[wght].ttf", variable=True)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by configure_logging once a test is done."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_strokewidth", False):
            root_logger.removeHandler(handler)
            handler.close()
    structlog.reset_defaults()
