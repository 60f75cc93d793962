"""Font reader for loading TTF/OTF fonts.

This module provides the FontReader class for loading font files
and extracting the outline of a character at a design location.
"""

from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from strokewidth.config import FontConfig
from strokewidth.domain import Shape
from strokewidth.exceptions import FontLoadError, GlyphNotFoundError
from strokewidth.io.converter import draw_glyph_shape

WGHT_TAG = "wght"
ITAL_TAG = "ital"

Location = dict[str, float]


class FontReader:
    """Loads TTF/OTF fonts and extracts character outlines.

    Handles static and variable fonts. Locations are given in user space
    (the values shown in font menus, e.g. wght 400).

    Example:
        with FontReader(Path("font.ttf")) as reader:
            for location in reader.locations_of_interest():
                shape = reader.get_shape("o", location)
    """

    def __init__(self, font_path: Path, config: FontConfig | None = None) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
            config: Outline extraction settings (defaults if None)
        """
        self._font_path = font_path
        self._config = config or FontConfig()
        self._font: TTFont | None = None

    @property
    def path(self) -> Path:
        return self._font_path

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontLoadError: If the file is missing or is not a readable font
        """
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            self._font = TTFont(str(self._font_path))
        except (TTLibError, OSError) as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def normalization_scale(self) -> float:
        """Multiplier converting font units to the reference units per em."""
        return self._config.normalization_scale(self.units_per_em)

    @property
    def family_name(self) -> str:
        """Return the family name.

        Prefers the typographic family name (name ID 16) over the legacy
        family name (name ID 1). Falls back to the file stem.
        """
        font = self._require_font()
        if "name" in font:
            for name_id in (16, 1):
                name = font["name"].getDebugName(name_id)
                if name:
                    return name
        return self._font_path.stem

    @property
    def is_variable(self) -> bool:
        return "fvar" in self._require_font()

    @property
    def axes(self) -> dict[str, tuple[float, float, float]]:
        """Return the variation axes as {tag: (min, default, max)}."""
        font = self._require_font()
        if "fvar" not in font:
            return {}
        return {
            axis.axisTag: (axis.minValue, axis.defaultValue, axis.maxValue)
            for axis in font["fvar"].axes
        }

    def locations_of_interest(self) -> list[Location]:
        """List the design locations worth measuring.

        Variable fonts with a weight axis are measured every weight_step
        units from the axis minimum to its maximum, inclusive. Everything
        else is measured once at the default location.
        """
        axis = self.axes.get(WGHT_TAG)
        if axis is None:
            return [{}]
        low, _, high = axis
        return [
            {WGHT_TAG: float(wght)}
            for wght in range(int(low), int(high) + 1, self._config.weight_step)
        ]

    def record_location(self, location: Location) -> Location:
        """Complete a location for record keeping.

        Static fonts carry their weight class and italic flag so that rows
        of different family members stay distinguishable.
        """
        font = self._require_font()
        labelled = dict(location)
        if WGHT_TAG not in labelled and "OS/2" in font:
            labelled[WGHT_TAG] = float(font["OS/2"].usWeightClass)
        if ITAL_TAG not in labelled and self._is_italic(font):
            labelled[ITAL_TAG] = 1.0
        return labelled

    @staticmethod
    def _is_italic(font: TTFont) -> bool:
        if "OS/2" in font and font["OS/2"].fsSelection & 0x01:
            return True
        return bool(font["head"].macStyle & 0x02)

    def glyph_name_for(self, char: str) -> str:
        """Map a character to its glyph name.

        Raises:
            GlyphNotFoundError: If the font does not map the character
        """
        cmap = self._require_font().getBestCmap() or {}
        glyph_name = cmap.get(ord(char))
        if glyph_name is None:
            raise GlyphNotFoundError(char, self._font_path.name)
        return glyph_name

    def has_char(self, char: str) -> bool:
        cmap = self._require_font().getBestCmap() or {}
        return ord(char) in cmap

    def get_shape(self, char: str, location: Location | None = None) -> Shape:
        """Get the outline of a character as a Shape.

        Args:
            char: Character to draw
            location: User space location; axes the font lacks are ignored

        Returns:
            Shape in y-down coordinates

        Raises:
            GlyphNotFoundError: If the font does not map the character
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        glyph_name = self.glyph_name_for(char)
        axes = self.axes
        user_location = {tag: value for tag, value in (location or {}).items() if tag in axes}
        glyph_set = font.getGlyphSet(location=user_location or None)
        return draw_glyph_shape(
            glyph_set[glyph_name],
            convert_cubics=self._config.convert_cubics,
            max_err=self._config.cubic_max_error,
        )

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
