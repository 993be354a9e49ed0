"""Two-stage streaming pipeline from text to strip images.

Stage 1 splits the text into units; stage 2 rasterizes every character of
a unit, composes the strip and hands it to the consumer, then waits for the
pacing interval. Stages run on their own threads and are joined by
unbuffered channels, so strips arrive in unit order with at most one unit
in flight between any two stages.
"""

import threading
import time
import traceback
from collections.abc import Generator

import structlog

from glyphstrip.config import RenderConfig
from glyphstrip.core.channel import Channel
from glyphstrip.core.compositor import compose_strip
from glyphstrip.core.rasterizer import GlyphGeometry, GlyphRasterizer, resolve_geometry
from glyphstrip.core.splitter import split_units
from glyphstrip.domain import StripImage
from glyphstrip.exceptions import ChannelClosedError, GlyphStripError, PipelineError
from glyphstrip.io.face import FontFace
from glyphstrip.utils import RenderLogger


class PipelineDriver:
    """Owns the pipeline stages, their channels and the pacing policy.

    Example:
        driver = PipelineDriver(face, RenderConfig())
        for strip in driver.strips("Hi there"):
            strip.image.save("out.png")
    """

    def __init__(
        self,
        face: FontFace,
        config: RenderConfig,
        render_logger: RenderLogger | None = None,
    ) -> None:
        """Initialize the driver.

        Args:
            face: Loaded font face, shared read-only by all rasterization
            config: Render configuration
            render_logger: Progress logger (a default one is created if None)
        """
        self.face = face
        self.config = config
        self.render_logger = render_logger or RenderLogger(
            structlog.get_logger("glyphstrip.pipeline")
        )
        self.geometry: GlyphGeometry | None = None

    def strips(self, text: str) -> Generator[StripImage, None, None]:
        """Start the pipeline and iterate over the composed strips.

        Geometry is resolved before any stage starts, so geometry errors are
        raised here, before a single unit is produced. Stage errors are
        re-raised from the iterator. Closing the iterator early aborts both
        stages.

        Args:
            text: Text to render

        Returns:
            Generator over strips in unit order

        Raises:
            GeometryError: If the glyph cell size cannot be resolved
        """
        self.geometry = resolve_geometry(self.face, self.config)
        rasterizer = GlyphRasterizer(self.face, self.geometry, self.config)
        return self._run(text, rasterizer)

    def _run(
        self, text: str, rasterizer: GlyphRasterizer
    ) -> Generator[StripImage, None, None]:
        units: Channel[str] = Channel("units")
        strips: Channel[StripImage] = Channel("strips")
        abort = threading.Event()

        threads = [
            threading.Thread(
                target=self._produce,
                args=(text, units),
                name="glyphstrip-splitter",
                daemon=True,
            ),
            threading.Thread(
                target=self._render,
                args=(units, strips, rasterizer, abort),
                name="glyphstrip-rasterizer",
                daemon=True,
            ),
        ]
        for thread in threads:
            thread.start()

        try:
            yield from strips
        finally:
            abort.set()
            aborted = PipelineError("consumer", "pipeline aborted")
            units.close(aborted)
            strips.close(aborted)
            for thread in threads:
                thread.join()

    def _produce(self, text: str, units: Channel[str]) -> None:
        try:
            for unit in split_units(text, self.config.split_policy, self.config.delimiter):
                units.send(unit)
        except ChannelClosedError:
            return
        except Exception as e:
            units.close(_wrap_error("splitter", e))
            return
        units.close()

    def _render(
        self,
        units: Channel[str],
        strips: Channel[StripImage],
        rasterizer: GlyphRasterizer,
        abort: threading.Event,
    ) -> None:
        try:
            for unit in units:
                start = time.perf_counter()
                self.render_logger.log_unit_start(unit)

                glyphs = rasterizer.rasterize(unit)
                strip = compose_strip(unit, glyphs)

                self.render_logger.log_strip_composed(
                    unit=unit,
                    glyph_count=len(glyphs),
                    width=strip.width,
                    height=strip.height,
                    duration_ms=(time.perf_counter() - start) * 1000,
                )
                strips.send(strip)

                if abort.wait(self.config.pacing_interval):
                    return
        except ChannelClosedError:
            units.close(PipelineError("rasterizer", "downstream closed"))
            return
        except Exception as e:
            error = _wrap_error("rasterizer", e)
            if not _is_abort(error):
                self.render_logger.log_error(_error_stage(error), error, traceback.format_exc())
            units.close(error)
            strips.close(error)
            return
        strips.close()


def _is_abort(error: GlyphStripError) -> bool:
    return isinstance(error, PipelineError) and error.stage == "consumer"


def _error_stage(error: GlyphStripError) -> str:
    """Name of the stage an error is attributed to."""
    if isinstance(error, PipelineError):
        return error.stage
    return "rasterizer"


def _wrap_error(stage: str, error: Exception) -> GlyphStripError:
    """Pass domain errors through; wrap anything else with the stage name."""
    if isinstance(error, GlyphStripError):
        return error
    wrapped = PipelineError(stage, f"{type(error).__name__}: {error}")
    wrapped.__cause__ = error
    return wrapped
