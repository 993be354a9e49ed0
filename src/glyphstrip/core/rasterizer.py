"""Glyph rasterization into fixed-size cells.

Every character is drawn into its own freshly allocated cell. Cell size is
resolved once per run, either from the configuration or from the font
metrics, and all cells share the same baseline.
"""

from dataclasses import dataclass

from glyphstrip.config import RenderConfig
from glyphstrip.domain import DrawingContext, GlyphImage
from glyphstrip.exceptions import GeometryError
from glyphstrip.io.face import FontFace


@dataclass(frozen=True)
class GlyphGeometry:
    """Cell size and baseline shared by every glyph image of a run.

    Attributes:
        width: Cell width in pixels
        height: Cell height in pixels
        baseline: Baseline offset from the top of the cell in pixels
    """

    width: int
    height: int
    baseline: int


def resolve_geometry(face: FontFace, config: RenderConfig) -> GlyphGeometry:
    """Resolve the glyph cell geometry.

    Explicit width/height in the configuration win. Otherwise height is the
    font ascent plus descent and width is the advance of the reference glyph.

    Args:
        face: Loaded font face
        config: Render configuration

    Returns:
        Resolved geometry

    Raises:
        GeometryError: If the reference glyph has no advance or the resolved
            cell would be empty
    """
    metrics = face.metrics

    height = config.height
    if height == 0:
        height = metrics.ascent + metrics.descent

    width = config.width
    if width == 0:
        advance = face.glyph_advance(config.reference_glyph)
        if advance is None:
            raise GeometryError(
                f"could not get advance width of reference glyph {config.reference_glyph!r}"
            )
        width = advance

    if width <= 0 or height <= 0:
        raise GeometryError(f"resolved cell size {width}x{height} is empty")

    return GlyphGeometry(width=width, height=height, baseline=metrics.ascent)


class GlyphRasterizer:
    """Renders characters into fixed-size glyph images.

    Repeated characters are rendered again on every occurrence; call volume
    is bounded by the input text length.

    Example:
        rasterizer = GlyphRasterizer(face, geometry, config)
        glyphs = rasterizer.rasterize("Hi")
    """

    def __init__(self, face: FontFace, geometry: GlyphGeometry, config: RenderConfig) -> None:
        self.face = face
        self.geometry = geometry
        self.config = config

    def new_context(self) -> DrawingContext:
        """Create a fresh drawing context with a background-filled cell."""
        return DrawingContext.create(
            width=self.geometry.width,
            height=self.geometry.height,
            light=self.config.light,
            dpi=self.config.dpi,
            point_size=self.config.point_size,
            hinting=self.config.hinting,
        )

    def rasterize_char(self, char: str) -> GlyphImage:
        """Render one character at the shared baseline.

        Args:
            char: Single character

        Returns:
            Glyph image owning its own buffer
        """
        ctx = self.new_context()
        self.face.draw(char, ctx, (0, self.geometry.baseline))
        return GlyphImage(char=char, image=ctx.destination)

    def rasterize(self, unit: str) -> list[GlyphImage]:
        """Render every character of a unit, in order."""
        return [self.rasterize_char(char) for char in unit]
