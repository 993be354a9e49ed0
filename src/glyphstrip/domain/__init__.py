"""Domain models for glyphstrip.

This module contains the value types that flow through the rendering
pipeline. All models are frozen dataclasses; the pixel buffers they hold
are handed from stage to stage and never written after hand-off.

Key classes:
- DrawingContext: Colors, size, hinting and destination for one glyph
- GlyphImage: A single rendered character cell
- StripImage: The composed cells of one text unit
"""

from glyphstrip.domain.context import (
    BLACK,
    IMAGE_MODE,
    WHITE,
    Color,
    DrawingContext,
    contrast_pair,
)
from glyphstrip.domain.image import GlyphImage, StripImage

__all__: list[str] = [
    # Colors
    "BLACK",
    "WHITE",
    "Color",
    "IMAGE_MODE",
    "contrast_pair",
    # Core types
    "DrawingContext",
    "GlyphImage",
    "StripImage",
]
