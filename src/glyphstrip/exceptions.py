"""Exception hierarchy for Glyphstrip."""


class GlyphStripError(Exception):
    """Base exception for all Glyphstrip errors."""

    pass


class FontError(GlyphStripError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading or parsing a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GeometryError(GlyphStripError):
    """Glyph cell geometry could not be resolved from font metrics."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Cannot resolve glyph geometry: {reason}")


class CompositionError(GlyphStripError):
    """Glyph images could not be composed into a strip."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Strip composition failed: {reason}")


class SinkError(GlyphStripError):
    """Error encoding or writing a strip image."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Failed to write '{target}': {reason}")


class PipelineError(GlyphStripError):
    """Unexpected failure inside a pipeline stage."""

    def __init__(self, stage: str, reason: str) -> None:
        self.stage = stage
        self.reason = reason
        super().__init__(f"Pipeline stage '{stage}' failed: {reason}")


class ChannelClosedError(GlyphStripError):
    """Send attempted on a closed channel."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Channel '{name}' is closed")
