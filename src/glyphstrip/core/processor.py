"""Rendering orchestration: font loading, pipeline and image sink.

Key components:
- count_units: Number of units a text splits into
- TextProcessor: Main orchestrator class for a rendering run
"""

import time
from collections.abc import Callable
from pathlib import Path

import structlog

from glyphstrip.config import GlyphStripSettings
from glyphstrip.core.pipeline import PipelineDriver
from glyphstrip.core.splitter import split_units
from glyphstrip.domain import StripImage
from glyphstrip.exceptions import SinkError
from glyphstrip.io import FontFace, ImageSink, PngSink, load_face
from glyphstrip.utils import RenderLogger, RenderStats


def count_units(text: str, settings: GlyphStripSettings) -> int:
    """Count the units a text splits into under the configured policy."""
    render = settings.render
    return sum(1 for _ in split_units(text, render.split_policy, render.delimiter))


class TextProcessor:
    """Orchestrates a rendering run.

    Manages the complete workflow:
    1. Load the font file
    2. Resolve glyph geometry
    3. Stream strips out of the pipeline
    4. Write every strip to the image sink
    5. Collect statistics

    Example:
        settings = GlyphStripSettings(font_path=Path("font.ttf"))
        processor = TextProcessor(settings)
        stats = processor.process("Hi there")
    """

    def __init__(
        self,
        settings: GlyphStripSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize processor with configuration.

        Args:
            settings: Application settings
            logger: Structured logger (module logger if None)
        """
        self.settings = settings
        self.logger = logger or structlog.get_logger("glyphstrip")
        self.render_logger = RenderLogger(self.logger)
        self.face: FontFace | None = None

    def load_face(self) -> FontFace:
        """Load the configured font at the configured size.

        Raises:
            FontLoadError: If the font cannot be read or parsed
        """
        render = self.settings.render
        face = load_face(self.settings.font_path, render.point_size, render.dpi)
        metrics = face.metrics
        self.logger.info(
            "Font loaded",
            path=str(self.settings.font_path),
            family=face.family_name,
            format=face.format,
            upm=face.units.units_per_em,
            ascent=metrics.ascent,
            descent=metrics.descent,
        )
        self.face = face
        return face

    def process(
        self,
        text: str,
        sink: ImageSink | None = None,
        progress_callback: Callable[[int, int, StripImage, Path], None] | None = None,
    ) -> RenderStats:
        """Render a text and write every strip to the sink.

        Args:
            text: Text to render
            sink: Image sink (PNG files per the output settings if None)
            progress_callback: Optional callback(completed, total, strip, path)
                called after each strip is written

        Returns:
            RenderStats with counts, timings and written paths

        Raises:
            FontLoadError: If the font cannot be loaded; nothing is rendered
            GeometryError: If glyph cells cannot be sized; nothing is rendered
            SinkError: If a strip cannot be written; the pipeline is aborted
            GlyphStripError: Any other fatal pipeline error
            KeyboardInterrupt: If rendering is cancelled by user
        """
        stats = self.render_logger.stats
        stats.start_time = time.time()

        face = self.face or self.load_face()
        if sink is None:
            sink = PngSink(self.settings.output)

        total = count_units(text, self.settings)
        driver = PipelineDriver(face, self.settings.render, self.render_logger)
        strips = driver.strips(text)

        self.logger.info(
            "Starting pipeline",
            units=total,
            cell=f"{driver.geometry.width}x{driver.geometry.height}",
            policy=self.settings.render.split_policy.value,
            pacing_ms=round(self.settings.render.pacing_interval * 1000),
        )

        try:
            for index, strip in enumerate(strips):
                try:
                    path = sink.write(strip, index)
                except SinkError as e:
                    self.render_logger.log_error("sink", e)
                    raise
                self.render_logger.log_strip_written(strip.unit, path)

                if progress_callback is not None:
                    progress_callback(index + 1, total, strip, path)
        except KeyboardInterrupt:
            self.logger.info("Cancellation requested by user")
            raise
        finally:
            strips.close()

        stats.end_time = time.time()

        self.logger.info(
            "Rendering complete",
            units=stats.unit_count,
            strips=stats.strip_count,
            glyphs=stats.glyph_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats
