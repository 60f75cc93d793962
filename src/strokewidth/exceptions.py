"""Exception hierarchy for Strokewidth."""


class StrokeWidthError(Exception):
    """Base exception for all Strokewidth errors."""

    pass


class FontError(StrokeWidthError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested character has no glyph in the font."""

    def __init__(self, char: str, font: str) -> None:
        self.char = char
        self.font = font
        super().__init__(f"Character {char!r} is not mapped by font '{font}'")


class GeometryError(StrokeWidthError):
    """Errors in geometric calculations."""

    pass


class ContourError(GeometryError):
    """Contour is open or its segments are not connected."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UnsupportedSegmentError(GeometryError):
    """Operation is not implemented for this kind of segment."""

    def __init__(self, kind: str, operation: str = "tangent") -> None:
        self.kind = kind
        self.operation = operation
        super().__init__(f"Unsupported segment: {operation} is not implemented for {kind} segments")


class UnsupportedShapeError(GeometryError):
    """Shape cannot be measured with the requested ray casting strategy."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unsupported shape: {reason}")


class DegenerateShapeError(GeometryError):
    """Shape has no usable filled area."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Degenerate shape: {reason}")


class NoMeasurableStrokeError(StrokeWidthError):
    """No rib survived circle fitting."""

    def __init__(self, reason: str = "no rib could be fitted with a circle") -> None:
        self.reason = reason
        super().__init__(f"No measurable stroke: {reason}")
