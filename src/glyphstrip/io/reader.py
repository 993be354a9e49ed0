"""Font reader for loading TTF/OTF fonts.

This module provides the FontReader class for loading font files with
fonttools and extracting the font-unit metrics the rasterizer needs.
"""

from dataclasses import dataclass, field
from pathlib import Path

from fontTools.ttLib import TTFont


@dataclass(frozen=True)
class FontUnits:
    """Vertical metrics and advances of a font, in font units.

    Attributes:
        units_per_em: Resolution of the font coordinate system
        ascender: Distance from baseline to top of the line (positive)
        descender: Distance from baseline to bottom of the line (negative)
        line_gap: Extra spacing between lines
        advances: Advance width per Unicode code point
    """

    units_per_em: int
    ascender: int
    descender: int
    line_gap: int
    advances: dict[int, int] = field(default_factory=dict)

    def advance(self, char: str) -> int | None:
        """Advance width of a character, or None if the font lacks it."""
        return self.advances.get(ord(char))


class FontReader:
    """Loads TTF/OTF fonts and extracts metric data.

    Example:
        reader = FontReader(Path("font.ttf"))
        reader.load()
        units = reader.font_units()
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        if "CFF " in self._font or "CFF2" in self._font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        return self._font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def family_name(self) -> str:
        """Return the font family name, or the file stem if unnamed.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        if "name" in self._font:
            name = self._font["name"].getDebugName(1)  # type: ignore[attr-defined]
            if name:
                return name
        return self._font_path.stem

    def font_units(self) -> FontUnits:
        """Collect vertical metrics and per-character advances.

        Reads the hhea table for ascender, descender and line gap, and
        maps every code point of the best cmap to its hmtx advance.

        Returns:
            FontUnits for the loaded font

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        hhea = self._font["hhea"]
        hmtx = self._font["hmtx"]
        cmap = self._font.getBestCmap() or {}

        advances: dict[int, int] = {}
        for codepoint, glyph_name in cmap.items():
            if glyph_name in hmtx.metrics:
                advances[codepoint] = hmtx[glyph_name][0]

        return FontUnits(
            units_per_em=self.units_per_em,
            ascender=hhea.ascent,  # type: ignore[attr-defined]
            descender=hhea.descent,  # type: ignore[attr-defined]
            line_gap=hhea.lineGap,  # type: ignore[attr-defined]
            advances=advances,
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
