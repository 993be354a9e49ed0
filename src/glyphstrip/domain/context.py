"""Drawing context for rasterizing a single glyph.

A DrawingContext bundles everything the font engine needs to draw one
character: colors, resolution, size, hinting, the destination buffer and
the clip rectangle. One context is created per glyph image and is never
reused.
"""

from dataclasses import dataclass

from PIL import Image

from glyphstrip.config import HintingMode

Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)

IMAGE_MODE = "RGBA"


def contrast_pair(light: bool) -> tuple[Color, Color]:
    """Return (foreground, background) for the given mode.

    Args:
        light: True for black on white, False for white on black

    Returns:
        Foreground and background colors
    """
    if light:
        return BLACK, WHITE
    return WHITE, BLACK


@dataclass(frozen=True)
class DrawingContext:
    """Immutable drawing parameters bound to one destination buffer.

    Attributes:
        foreground: Color glyphs are drawn with
        background: Color the destination was filled with
        dpi: Resolution in dots per inch
        point_size: Font size in points
        hinting: Font engine hinting mode
        destination: Pixel buffer the glyph is drawn into
        clip: Drawable region as (left, top, right, bottom)
    """

    foreground: Color
    background: Color
    dpi: float
    point_size: float
    hinting: HintingMode
    destination: Image.Image
    clip: tuple[int, int, int, int]

    def __post_init__(self) -> None:
        if self.foreground == self.background:
            raise ValueError("foreground and background colors must differ")

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        light: bool,
        dpi: float,
        point_size: float,
        hinting: HintingMode,
    ) -> "DrawingContext":
        """Allocate a fresh destination filled with the background color.

        Args:
            width: Destination width in pixels
            height: Destination height in pixels
            light: Light mode (black on white)
            dpi: Resolution in dots per inch
            point_size: Font size in points
            hinting: Font engine hinting mode

        Returns:
            New drawing context clipped to the whole destination
        """
        foreground, background = contrast_pair(light)
        destination = Image.new(IMAGE_MODE, (width, height), background)
        return cls(
            foreground=foreground,
            background=background,
            dpi=dpi,
            point_size=point_size,
            hinting=hinting,
            destination=destination,
            clip=(0, 0, width, height),
        )
