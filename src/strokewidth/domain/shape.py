"""Closed outline shapes.

This module defines the shape the measurement engine probes:
- Contour: A closed chain of segments
- Shape: One or more contours filled with the nonzero winding rule
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from functools import cached_property

from fontTools.misc.transform import Transform

from strokewidth.domain.geometry import BoundingBox, Point
from strokewidth.domain.segment import LineSegment, Segment
from strokewidth.exceptions import ContourError

CLOSURE_TOLERANCE = 1e-9


@dataclass(frozen=True, slots=True)
class Contour:
    """A closed contour.

    Consecutive segments share endpoints and the last segment ends where the
    first one starts.

    Attributes:
        segments: Segments in drawing order

    Raises:
        ContourError: If the contour is empty, broken or open
    """

    segments: tuple[Segment, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise ContourError("Contour has no segments")

        for index, (current, following) in enumerate(zip(self.segments, self.segments[1:])):
            if not current.end.is_close(following.start, CLOSURE_TOLERANCE):
                raise ContourError(
                    f"Segment {index} ends at {current.end.to_tuple()} but segment "
                    f"{index + 1} starts at {following.start.to_tuple()}"
                )

        first = self.segments[0].start
        last = self.segments[-1].end
        if not last.is_close(first, CLOSURE_TOLERANCE):
            raise ContourError(
                f"Contour is not closed: ends at {last.to_tuple()}, starts at {first.to_tuple()}"
            )

    @classmethod
    def polygon(cls, points: Sequence[tuple[float, float]]) -> "Contour":
        """Build a closed polygon from its vertices.

        Args:
            points: Vertices in order, without repeating the first one

        Returns:
            Contour made of line segments
        """
        if len(points) < 2:
            raise ContourError("A polygon needs at least two vertices")
        vertices = [Point(x, y) for x, y in points]
        return cls(
            tuple(
                LineSegment(vertices[i], vertices[(i + 1) % len(vertices)])
                for i in range(len(vertices))
            )
        )

    @property
    def start(self) -> Point:
        return self.segments[0].start

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def bounding_box(self) -> BoundingBox:
        box = self.segments[0].bounding_box()
        for segment in self.segments[1:]:
            box = box.union(segment.bounding_box())
        return box

    def transformed(self, transform: Transform) -> "Contour":
        return Contour(tuple(segment.transformed(transform) for segment in self.segments))

    def reversed(self) -> "Contour":
        return Contour(tuple(segment.reversed() for segment in reversed(self.segments)))

    def to_svg_path(self) -> str:
        start = self.start
        commands = [f"M{start.x:g},{start.y:g}"]
        commands.extend(segment.svg_command() for segment in self.segments)
        commands.append("Z")
        return " ".join(commands)


@dataclass(frozen=True)
class Shape:
    """The filled outline of a glyph at one design location.

    Immutable once built. The region is defined by the nonzero winding rule,
    so overlapping contours with the same direction stay filled and
    contours with opposite direction cut holes.

    Attributes:
        contours: Closed contours in drawing order
    """

    contours: tuple[Contour, ...]

    @classmethod
    def from_polygons(cls, *polygons: Sequence[tuple[float, float]]) -> "Shape":
        """Build a shape from polygon vertex lists."""
        return cls(tuple(Contour.polygon(points) for points in polygons))

    def segments(self) -> Iterator[Segment]:
        """Iterate every segment of every contour."""
        for contour in self.contours:
            yield from contour.segments

    @property
    def segment_count(self) -> int:
        return sum(len(contour) for contour in self.contours)

    def is_empty(self) -> bool:
        return len(self.contours) == 0

    @cached_property
    def bounding_box(self) -> BoundingBox:
        """Tight bounding box, including curve extrema.

        An empty shape has a zero-sized box at the origin.
        """
        if self.is_empty():
            return BoundingBox(0.0, 0.0, 0.0, 0.0)
        box = self.contours[0].bounding_box()
        for contour in self.contours[1:]:
            box = box.union(contour.bounding_box())
        return box

    @property
    def max_dimension(self) -> float:
        return self.bounding_box.max_dimension

    def probe_box(self, margin_ratio: float) -> BoundingBox:
        """Bounding box grown by a margin and rounded outward to integers.

        Args:
            margin_ratio: Margin as a fraction of the larger dimension

        Returns:
            Box used to size sampling grids
        """
        box = self.bounding_box
        return box.inflate(margin_ratio * box.max_dimension).expand()

    def transformed(self, transform: Transform) -> "Shape":
        """Apply an affine fontTools transform to every contour."""
        return Shape(tuple(contour.transformed(transform) for contour in self.contours))

    def to_svg_path(self) -> str:
        return " ".join(contour.to_svg_path() for contour in self.contours)
