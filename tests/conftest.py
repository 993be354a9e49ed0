"""Shared fixtures: a monospace box font built with fontTools."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from glyphstrip.config import RenderConfig
from glyphstrip.io import FontFace, load_face

UPM = 1000
ADVANCE = 600
ASCENT = 800
DESCENT = -200

# At 20pt / 72dpi: 20px per em, so cells are 12px wide and 16 + 4 = 20px high
CELL_WIDTH = 12
CELL_HEIGHT = 20

PRINTABLE = "".join(chr(cp) for cp in range(0x21, 0x7F))


def _box_glyph():
    """A filled rectangle from x=100..500, y=0..700 (clockwise)."""
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    return pen.glyph()


def build_box_font(path: Path, chars: str = PRINTABLE) -> Path:
    """Write a TrueType font where every char in chars is a box glyph.

    Space is always present and empty; every glyph advances ADVANCE units.
    """
    glyph_order = [".notdef", "space"]
    cmap = {ord(" "): "space"}
    for char in chars:
        if char == " ":
            continue
        name = f"uni{ord(char):04X}"
        glyph_order.append(name)
        cmap[ord(char)] = name

    glyphs = {name: _box_glyph() for name in glyph_order}
    glyphs["space"] = TTGlyphPen(None).glyph()

    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (ADVANCE, 100) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({"familyName": "Strip Test", "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        usWinAscent=ASCENT,
        usWinDescent=-DESCENT,
    )
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def box_font_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Path to the full printable-ASCII box font."""
    return build_box_font(tmp_path_factory.mktemp("fonts") / "StripTest-Regular.ttf")


@pytest.fixture(scope="session")
def letters_font_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Path to a box font without '$' or digits."""
    return build_box_font(
        tmp_path_factory.mktemp("fonts") / "StripTest-Letters.ttf",
        chars="Hiterh",
    )


@pytest.fixture
def face(box_font_path: Path) -> FontFace:
    """Box font loaded at 20pt / 72dpi."""
    return load_face(box_font_path, point_size=20.0, dpi=72.0)


@pytest.fixture
def fast_config() -> RenderConfig:
    """Default render config with a 10ms pacing interval."""
    return RenderConfig(pacing_interval=0.01)
