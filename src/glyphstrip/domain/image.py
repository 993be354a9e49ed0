"""Glyph and strip image value types."""

from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class GlyphImage:
    """A fixed-size cell holding exactly one rendered character.

    Attributes:
        char: The character drawn into the cell
        image: Pixel buffer of the cell
    """

    char: str
    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


@dataclass(frozen=True)
class StripImage:
    """Horizontal concatenation of the glyph images of one text unit.

    Attributes:
        unit: The text unit the strip was rendered from
        glyphs: Characters of the composed cells, left to right
        image: Composed pixel buffer
    """

    unit: str
    glyphs: tuple[str, ...]
    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height
