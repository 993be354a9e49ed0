"""Tests for glyph geometry and rasterization."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import freetype
import pytest

from glyphstrip.config import HintingMode, RenderConfig
from glyphstrip.core.rasterizer import GlyphGeometry, GlyphRasterizer, resolve_geometry
from glyphstrip.domain import BLACK, WHITE
from glyphstrip.exceptions import GeometryError
from glyphstrip.io import FaceMetrics, FontFace, load_face

CELL_WIDTH = 12
CELL_HEIGHT = 20


class TestResolveGeometry:
    """Tests for resolve_geometry function."""

    def test_defaults_from_metrics(self, face: FontFace):
        """Test width from reference advance and height from ascent + descent."""
        geometry = resolve_geometry(face, RenderConfig())

        assert geometry == GlyphGeometry(width=CELL_WIDTH, height=CELL_HEIGHT, baseline=16)

    def test_explicit_size_wins(self, face: FontFace):
        """Test configured width and height override metrics."""
        geometry = resolve_geometry(face, RenderConfig(width=30, height=40))

        assert geometry.width == 30
        assert geometry.height == 40
        assert geometry.baseline == 16

    def test_scales_with_dpi(self, box_font_path: Path):
        """Test doubling the DPI doubles the cell."""
        face = load_face(box_font_path, point_size=20.0, dpi=144.0)
        geometry = resolve_geometry(face, RenderConfig(dpi=144.0))

        assert geometry.width == CELL_WIDTH * 2
        assert geometry.height == CELL_HEIGHT * 2

    def test_missing_reference_glyph(self, letters_font_path: Path):
        """Test a font without the reference glyph is a geometry error."""
        face = load_face(letters_font_path, point_size=20.0, dpi=72.0)

        with pytest.raises(GeometryError, match="reference glyph"):
            resolve_geometry(face, RenderConfig())

    def test_missing_reference_glyph_with_explicit_width(self, letters_font_path: Path):
        """Test an explicit width does not need the reference glyph."""
        face = load_face(letters_font_path, point_size=20.0, dpi=72.0)

        geometry = resolve_geometry(face, RenderConfig(width=12))
        assert geometry.width == 12

    def test_custom_reference_glyph(self, letters_font_path: Path):
        """Test the reference glyph is configurable."""
        face = load_face(letters_font_path, point_size=20.0, dpi=72.0)

        geometry = resolve_geometry(face, RenderConfig(reference_glyph="H"))
        assert geometry.width == CELL_WIDTH

    def test_empty_cell(self):
        """Test a zero-sized cell is rejected instead of rendered."""
        face = MagicMock(spec=FontFace)
        face.metrics = FaceMetrics(ascent=0, descent=0, height=0)
        face.glyph_advance.return_value = 0

        with pytest.raises(GeometryError, match="empty"):
            resolve_geometry(face, RenderConfig())


class TestGlyphRasterizer:
    """Tests for GlyphRasterizer class."""

    @pytest.fixture
    def geometry(self) -> GlyphGeometry:
        return GlyphGeometry(width=CELL_WIDTH, height=CELL_HEIGHT, baseline=16)

    def test_new_context_is_fresh(self, face: FontFace, geometry: GlyphGeometry):
        """Test every context owns its own background-filled buffer."""
        rasterizer = GlyphRasterizer(face, geometry, RenderConfig())

        first = rasterizer.new_context()
        second = rasterizer.new_context()

        assert first.destination is not second.destination
        assert first.destination.size == (CELL_WIDTH, CELL_HEIGHT)
        assert first.destination.getpixel((0, 0)) == BLACK

    def test_context_carries_config(self, face: FontFace, geometry: GlyphGeometry):
        """Test context picks up dpi, size, hinting and mode."""
        config = RenderConfig(dpi=96.0, point_size=12.0, hinting=HintingMode.NONE, light=True)
        ctx = GlyphRasterizer(face, geometry, config).new_context()

        assert ctx.dpi == 96.0
        assert ctx.point_size == 12.0
        assert ctx.hinting == HintingMode.NONE
        assert (ctx.foreground, ctx.background) == (BLACK, WHITE)

    def test_dark_glyph_pixels(self, face: FontFace, geometry: GlyphGeometry):
        """Test white box glyph on black background."""
        glyph = GlyphRasterizer(face, geometry, RenderConfig()).rasterize_char("H")

        assert glyph.char == "H"
        assert glyph.image.size == (CELL_WIDTH, CELL_HEIGHT)
        # Box spans x=2..10, y=2..16 (baseline at 16, 14px tall)
        assert glyph.image.getpixel((6, 9)) == WHITE
        assert glyph.image.getpixel((0, 0)) == BLACK
        assert glyph.image.getpixel((6, CELL_HEIGHT - 1)) == BLACK

    def test_light_glyph_pixels(self, face: FontFace, geometry: GlyphGeometry):
        """Test black box glyph on white background."""
        config = RenderConfig(light=True)
        glyph = GlyphRasterizer(face, geometry, config).rasterize_char("H")

        assert glyph.image.getpixel((6, 9)) == BLACK
        assert glyph.image.getpixel((0, 0)) == WHITE

    def test_unhinted_glyph_pixels(self, face: FontFace, geometry: GlyphGeometry):
        """Test hinting none still draws the glyph."""
        config = RenderConfig(hinting=HintingMode.NONE)
        glyph = GlyphRasterizer(face, geometry, config).rasterize_char("H")

        assert glyph.image.getpixel((6, 9)) == WHITE

    @pytest.mark.parametrize(
        "hinting,hinted",
        [(HintingMode.NONE, False), (HintingMode.FULL, True)],
    )
    def test_hinting_reaches_load_flags(
        self, face: FontFace, geometry: GlyphGeometry, hinting: HintingMode, hinted: bool
    ):
        """Test the hinting mode is passed to FreeType as load flags."""
        config = RenderConfig(hinting=hinting)
        with patch.object(
            face._ft_face, "load_char", wraps=face._ft_face.load_char
        ) as mock_load_char:
            GlyphRasterizer(face, geometry, config).rasterize_char("H")

        mock_load_char.assert_called_once()
        char, flags = mock_load_char.call_args.args
        assert char == "H"
        assert bool(flags & freetype.FT_LOAD_NO_HINTING) is not hinted
        assert flags & freetype.FT_LOAD_NO_BITMAP

    def test_mono_bitmap_glyph(self, face: FontFace, geometry: GlyphGeometry):
        """Test a 1-bit bitmap glyph is drawn instead of failing to decode."""
        slot = MagicMock()
        slot.bitmap.width = 10
        slot.bitmap.rows = 10
        slot.bitmap.pitch = 2
        slot.bitmap.pixel_mode = freetype.FT_PIXEL_MODE_MONO
        slot.bitmap.buffer = [0xFF, 0xC0] * 10
        slot.bitmap_left = 1
        slot.bitmap_top = 12
        slot.advance.x = CELL_WIDTH * 64
        ft_face = MagicMock()
        ft_face.glyph = slot
        mono_face = FontFace(
            path=face.path,
            units=face.units,
            ft_face=ft_face,
            point_size=face.point_size,
            dpi=face.dpi,
        )

        glyph = GlyphRasterizer(mono_face, geometry, RenderConfig()).rasterize_char("H")

        # Bitmap covers x=1..10, y=4..13
        assert glyph.image.getpixel((6, 9)) == WHITE
        assert glyph.image.getpixel((10, 13)) == WHITE
        assert glyph.image.getpixel((0, 0)) == BLACK
        assert glyph.image.getpixel((11, 9)) == BLACK

    def test_space_is_background_only(self, face: FontFace, geometry: GlyphGeometry):
        """Test an empty glyph leaves the cell untouched."""
        glyph = GlyphRasterizer(face, geometry, RenderConfig()).rasterize_char(" ")

        assert glyph.image.getcolors() == [(CELL_WIDTH * CELL_HEIGHT, BLACK)]

    def test_rasterize_unit(self, face: FontFace, geometry: GlyphGeometry):
        """Test one glyph image per character, repeats included."""
        glyphs = GlyphRasterizer(face, geometry, RenderConfig()).rasterize("there")

        assert [g.char for g in glyphs] == ["t", "h", "e", "r", "e"]
        assert glyphs[2].image is not glyphs[4].image
        assert all(g.image.size == (CELL_WIDTH, CELL_HEIGHT) for g in glyphs)

    def test_glyph_clipped_to_cell(self, face: FontFace):
        """Test a cell narrower than the glyph clips instead of failing."""
        geometry = GlyphGeometry(width=4, height=CELL_HEIGHT, baseline=16)
        glyph = GlyphRasterizer(face, geometry, RenderConfig()).rasterize_char("H")

        assert glyph.image.size == (4, CELL_HEIGHT)
        assert glyph.image.getpixel((3, 9)) == WHITE
