"""Core rendering pipeline for glyphstrip.

This module contains the pipeline stages and their orchestration:

- Unit splitting (words or single characters)
- Glyph rasterization into fixed-size cells
- Left-to-right strip composition
- Rendezvous channels and the two-stage pipeline driver

Key functions:
- split_units: Lazily split text into units
- resolve_geometry: Size glyph cells from configuration or font metrics
- compose_strip: Concatenate glyph images into a strip

Key classes:
- GlyphRasterizer: Renders characters into glyph images
- Channel: Unbuffered hand-off between stages
- PipelineDriver: Runs splitter and rasterizer stages concurrently
- TextProcessor: Loads the font, drives the pipeline and writes strips
"""

from glyphstrip.core.channel import Channel
from glyphstrip.core.compositor import compose_strip
from glyphstrip.core.pipeline import PipelineDriver
from glyphstrip.core.processor import TextProcessor, count_units
from glyphstrip.core.rasterizer import GlyphGeometry, GlyphRasterizer, resolve_geometry
from glyphstrip.core.splitter import iter_characters, iter_words, split_units

__all__ = [
    # Pipeline classes
    "Channel",
    "GlyphGeometry",
    "GlyphRasterizer",
    "PipelineDriver",
    "TextProcessor",
    # Functions
    "compose_strip",
    "count_units",
    "iter_characters",
    "iter_words",
    "resolve_geometry",
    "split_units",
]
