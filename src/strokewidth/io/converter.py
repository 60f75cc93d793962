"""Converters between fonttools outlines and domain shapes.

This module handles the conversion from fonttools pen output to the
Shape model the measurement engine works on.
"""

from typing import Any

from fontTools.pens.basePen import BasePen
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.recordingPen import RecordingPen, replayRecording
from fontTools.pens.transformPen import TransformPen

from strokewidth.domain import Contour, CubicSegment, LineSegment, Point, QuadraticSegment, Shape

# Fonts are y-up, debug output and the engine's diagnostics are y-down
FLIP_Y = (1, 0, 0, -1, 0, 0)


class ShapePen(BasePen):
    """Pen that collects drawing commands into a Shape.

    BasePen takes care of implied on-curve points, contours without any
    on-curve point and cubic super-beziers, so only single segments arrive
    here. Open contours are closed with a straight line since the shape is
    always filled.

    Example:
        pen = ShapePen()
        glyph.draw(pen)
        shape = pen.shape()
    """

    def __init__(self, glyphSet: Any = None) -> None:  # noqa: N803
        super().__init__(glyphSet)
        self._contours: list[Contour] = []
        self._segments: list[LineSegment | QuadraticSegment | CubicSegment] = []
        self._start: Point | None = None
        self._current: Point | None = None

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self._flush()
        self._start = Point(*pt)
        self._current = self._start

    def _lineTo(self, pt: tuple[float, float]) -> None:
        end = Point(*pt)
        if end != self._current:
            self._segments.append(LineSegment(self._current, end))
        self._current = end

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        end = Point(*pt2)
        self._segments.append(QuadraticSegment(self._current, Point(*pt1), end))
        self._current = end

    def _curveToOne(
        self, pt1: tuple[float, float], pt2: tuple[float, float], pt3: tuple[float, float]
    ) -> None:
        end = Point(*pt3)
        self._segments.append(CubicSegment(self._current, Point(*pt1), Point(*pt2), end))
        self._current = end

    def _closePath(self) -> None:
        self._flush()

    def _endPath(self) -> None:
        self._flush()

    def _flush(self) -> None:
        if self._segments and self._current != self._start:
            self._segments.append(LineSegment(self._current, self._start))
        if self._segments:
            self._contours.append(Contour(tuple(self._segments)))
        self._segments = []
        self._start = None
        self._current = None

    def shape(self) -> Shape:
        """Get the shape drawn so far, closing any pending contour."""
        self._flush()
        return Shape(tuple(self._contours))


def recording_to_shape(recording: list[tuple[str, tuple[Any, ...]]]) -> Shape:
    """Convert a RecordingPen recording to a Shape.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic, possibly ending in None
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ())

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        Shape with one contour per non-empty recorded contour
    """
    pen = ShapePen()
    replayRecording(recording, pen)
    return pen.shape()


def draw_glyph_shape(
    glyph: Any,
    convert_cubics: bool = True,
    max_err: float = 1.0,
    flip_y: bool = True,
) -> Shape:
    """Draw a fonttools glyph into a Shape.

    Args:
        glyph: Glyph object from a fonttools glyph set
        convert_cubics: Replace cubic curves by quadratic approximations
        max_err: Maximum approximation error for cubic conversion (font units)
        flip_y: Mirror the outline vertically into y-down coordinates

    Returns:
        Shape of the glyph outline
    """
    recording = RecordingPen()
    pen: Any = recording
    if flip_y:
        pen = TransformPen(pen, FLIP_Y)
    if convert_cubics:
        pen = Cu2QuPen(pen, max_err, reverse_direction=False)
    glyph.draw(pen)
    return recording_to_shape(recording.value)
