"""Font face: a parsed font at a specific rendering size.

Metrics come from fonttools (font units scaled to pixels); drawing is done
by FreeType through freetype-py, which rasterizes one character at a time
into an 8-bit coverage bitmap that is pasted onto the destination buffer.
"""

import math
import threading
from dataclasses import dataclass
from pathlib import Path

import freetype
from PIL import Image

from glyphstrip.config import HintingMode
from glyphstrip.domain import DrawingContext
from glyphstrip.exceptions import FontLoadError
from glyphstrip.io.reader import FontReader, FontUnits

# Embedded bitmap strikes are skipped so glyphs always come from outlines.
LOAD_FLAGS: dict[HintingMode, int] = {
    HintingMode.NONE: freetype.FT_LOAD_RENDER
    | freetype.FT_LOAD_NO_HINTING
    | freetype.FT_LOAD_NO_BITMAP,
    HintingMode.FULL: freetype.FT_LOAD_RENDER
    | freetype.FT_LOAD_DEFAULT
    | freetype.FT_LOAD_NO_BITMAP,
}


@dataclass(frozen=True)
class FaceMetrics:
    """Vertical metrics in whole pixels.

    Attributes:
        ascent: Pixels above the baseline
        descent: Pixels below the baseline (positive)
        height: Recommended line height (ascent + descent + line gap)
    """

    ascent: int
    descent: int
    height: int


class FontFace:
    """A loaded font bound to a point size and resolution.

    The face is shared read-only between pipeline stages. FreeType keeps
    per-face glyph slot state, so drawing is serialized internally.
    """

    def __init__(
        self,
        path: Path,
        units: FontUnits,
        ft_face: freetype.Face,
        point_size: float,
        dpi: float,
        family_name: str = "",
        font_format: str = "TrueType",
    ) -> None:
        self.path = path
        self.units = units
        self.point_size = point_size
        self.dpi = dpi
        self.family_name = family_name or path.stem
        self.format = font_format
        self._ft_face = ft_face
        self._lock = threading.Lock()

    @property
    def pixel_size(self) -> float:
        return self.point_size * self.dpi / 72.0

    def _to_pixels(self, value: int) -> float:
        return value * self.pixel_size / self.units.units_per_em

    @property
    def metrics(self) -> FaceMetrics:
        ascent = math.ceil(self._to_pixels(self.units.ascender))
        descent = math.ceil(self._to_pixels(-self.units.descender))
        line_gap = math.ceil(self._to_pixels(self.units.line_gap))
        return FaceMetrics(ascent=ascent, descent=descent, height=ascent + descent + line_gap)

    def glyph_advance(self, char: str) -> int | None:
        """Advance width of a character in pixels.

        Args:
            char: Single character

        Returns:
            Rounded advance in pixels, or None if the font has no glyph for it
        """
        advance = self.units.advance(char)
        if advance is None:
            return None
        return round(self._to_pixels(advance))

    def draw(self, text: str, ctx: DrawingContext, origin: tuple[int, int]) -> int:
        """Draw a string into the context's destination.

        Args:
            text: Characters to draw, left to right from the origin
            ctx: Drawing context supplying colors, size, hinting and clip
            origin: Pen start as (x, baseline y) in destination pixels

        Returns:
            Pen x position after the last character
        """
        pen_x, baseline = origin
        flags = LOAD_FLAGS[ctx.hinting]

        with self._lock:
            self._ft_face.set_char_size(
                width=0,
                height=int(round(ctx.point_size * 64)),
                hres=int(round(ctx.dpi)),
                vres=int(round(ctx.dpi)),
            )
            for char in text:
                self._ft_face.load_char(char, flags)
                slot = self._ft_face.glyph
                bitmap = slot.bitmap
                if bitmap.width and bitmap.rows:
                    mask = _coverage_mask(bitmap)
                    _paste_clipped(
                        ctx,
                        mask,
                        pen_x + slot.bitmap_left,
                        baseline - slot.bitmap_top,
                    )
                pen_x += slot.advance.x >> 6

        return pen_x


def _coverage_mask(bitmap) -> Image.Image:
    """Decode a FreeType bitmap into an 8-bit coverage mask.

    Grey bitmaps are used as-is; 1-bit mono bitmaps are expanded to 0/255.
    """
    size = (bitmap.width, bitmap.rows)
    data = bytes(bitmap.buffer)
    if bitmap.pixel_mode == freetype.FT_PIXEL_MODE_MONO:
        return Image.frombytes("1", size, data, "raw", "1", bitmap.pitch).convert("L")
    return Image.frombytes("L", size, data, "raw", "L", bitmap.pitch)


def _paste_clipped(ctx: DrawingContext, mask: Image.Image, x: int, y: int) -> None:
    """Paste the foreground through a coverage mask, clipped to ctx.clip."""
    left, top, right, bottom = ctx.clip
    x0, y0 = max(x, left), max(y, top)
    x1, y1 = min(x + mask.width, right), min(y + mask.height, bottom)
    if x0 >= x1 or y0 >= y1:
        return

    visible = mask.crop((x0 - x, y0 - y, x1 - x, y1 - y))
    ctx.destination.paste(ctx.foreground, (x0, y0), visible)


def load_face(path: Path, point_size: float, dpi: float) -> FontFace:
    """Load a font file and bind it to a rendering size.

    Args:
        path: Path to a TTF or OTF file
        point_size: Font size in points
        dpi: Resolution in dots per inch

    Returns:
        FontFace ready for metrics queries and drawing

    Raises:
        FontLoadError: If the file is missing, unreadable or not a font
    """
    try:
        with FontReader(path) as reader:
            units = reader.font_units()
            family_name = reader.family_name
            font_format = reader.format
    except FileNotFoundError as e:
        raise FontLoadError(str(path), str(e)) from e
    except OSError as e:
        raise FontLoadError(str(path), f"cannot read font file ({e})") from e
    except Exception as e:
        raise FontLoadError(str(path), f"cannot parse font data ({e})") from e

    if units.units_per_em <= 0:
        raise FontLoadError(str(path), "font reports a non-positive units per em")

    try:
        ft_face = freetype.Face(str(path))
    except freetype.FT_Exception as e:
        raise FontLoadError(str(path), f"font engine rejected the file ({e})") from e

    return FontFace(
        path=path,
        units=units,
        ft_face=ft_face,
        point_size=point_size,
        dpi=dpi,
        family_name=family_name,
        font_format=font_format,
    )
