"""Strokewidth - Estimate stroke widths of glyph outlines.

Strokewidth probes the filled outline of a character with rays, collects the
cross-sections ("ribs") that pass through ink, and fits the largest circle
inside each one. The smallest and largest circle diameters are reported as
the minimum and maximum stroke width of the glyph.

Example:
    $ strokewidth measure Roboto[wdth,wght].ttf --char o

This prints one min/max record pair per weight instance of the font.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
