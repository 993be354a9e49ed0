"""Font and image I/O layer for glyphstrip.

This module handles reading fonts using fonttools and FreeType and writing
composed strips using Pillow. It provides a narrow abstraction between
those libraries and the rendering pipeline.

Key responsibilities:
- Load TTF/OTF fonts and report metrics in font units and pixels
- Draw characters into pixel buffers at a baseline point
- Encode and write finished strips

Key classes:
- FontReader: Load fonts and extract font-unit metrics
- FontFace: A font bound to a rendering size
- PngSink: Save strips as PNG files
"""

from glyphstrip.io.face import FaceMetrics, FontFace, load_face
from glyphstrip.io.reader import FontReader, FontUnits
from glyphstrip.io.writer import ImageSink, PngSink, safe_unit_name

__all__ = [
    "FaceMetrics",
    "FontFace",
    "FontReader",
    "FontUnits",
    "ImageSink",
    "PngSink",
    "load_face",
    "safe_unit_name",
]
