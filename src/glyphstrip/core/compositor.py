"""Left-to-right strip composition."""

from collections.abc import Sequence

from PIL import Image

from glyphstrip.domain import IMAGE_MODE, GlyphImage, StripImage
from glyphstrip.exceptions import CompositionError


def compose_strip(unit: str, glyphs: Sequence[GlyphImage]) -> StripImage:
    """Concatenate glyph images horizontally into one strip.

    Each glyph is copied opaquely into the next free horizontal slot, so
    there are no gaps or overlaps between neighbours.

    Args:
        unit: Text unit the glyphs were rendered from
        glyphs: Same-height glyph images in character order

    Returns:
        Strip whose width is the sum of the glyph widths

    Raises:
        CompositionError: If glyphs is empty or heights differ
    """
    if not glyphs:
        raise CompositionError(f"no glyph images for unit {unit!r}")

    height = glyphs[0].height
    for glyph in glyphs:
        if glyph.height != height:
            raise CompositionError(
                f"glyph {glyph.char!r} is {glyph.height}px high, expected {height}px"
            )

    width = sum(glyph.width for glyph in glyphs)
    strip = Image.new(IMAGE_MODE, (width, height))

    offset = 0
    for glyph in glyphs:
        strip.paste(glyph.image, (offset, 0))
        offset += glyph.width

    return StripImage(
        unit=unit,
        glyphs=tuple(glyph.char for glyph in glyphs),
        image=strip,
    )
