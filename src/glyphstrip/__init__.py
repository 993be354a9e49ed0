"""Glyphstrip - Render text to image strips one glyph at a time.

Glyphstrip splits a block of text into units (words or single characters),
rasterizes every character of a unit into its own fixed-size cell with a
TrueType/OpenType font, and concatenates the cells left-to-right into one
strip image per unit. Strips are emitted at a throttled pace.

Example:
    $ glyphstrip --fontfile Roboto-Regular.ttf --pts 32

This will repeatedly write out.png, one strip per word of the default text.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
