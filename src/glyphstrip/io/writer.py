"""Image sink for saving composed strips.

This module provides the PngSink class, which encodes strips as PNG with
Pillow and writes them to a name formatted from the output pattern.
"""

import re
from pathlib import Path
from typing import Protocol

import structlog

from glyphstrip.config import OutputConfig
from glyphstrip.domain import StripImage
from glyphstrip.exceptions import SinkError

_UNSAFE_CHARS = re.compile(r"[^\w.-]+")


class ImageSink(Protocol):
    """Anything that can persist a finished strip."""

    def write(self, strip: StripImage, index: int) -> Path:
        ...


def safe_unit_name(unit: str) -> str:
    """Reduce a text unit to a file-name safe token.

    Examples: "Hi" -> "Hi", "catch!" -> "catch_", "’Twas" -> "_Twas"
    """
    return _UNSAFE_CHARS.sub("_", unit) or "_"


class PngSink:
    """Writes strips as PNG files.

    The default pattern "out.png" overwrites a single file with every strip,
    which gives a live preview in any image viewer that reloads on change.
    Patterns with placeholders keep every strip:

        PngSink(OutputConfig(pattern="strip-{index:04d}-{unit}.png"))

    Example:
        sink = PngSink(OutputConfig())
        path = sink.write(strip, 0)
    """

    def __init__(self, config: OutputConfig) -> None:
        """Initialize the sink.

        Args:
            config: Output pattern and directory
        """
        self._config = config
        self._logger = structlog.get_logger("glyphstrip.io.writer")

    def target_for(self, strip: StripImage, index: int) -> Path:
        """Resolve the output path for a strip.

        Args:
            strip: Strip about to be written
            index: Zero-based position of the strip in the run

        Returns:
            Output path inside the configured directory

        Raises:
            SinkError: If the pattern cannot be formatted
        """
        try:
            name = self._config.pattern.format(index=index, unit=safe_unit_name(strip.unit))
        except (KeyError, IndexError, ValueError) as e:
            raise SinkError(self._config.pattern, f"invalid output pattern ({e})") from e
        return self._config.directory / name

    def write(self, strip: StripImage, index: int) -> Path:
        """Encode a strip as PNG and write it.

        Args:
            strip: Strip to write
            index: Zero-based position of the strip in the run

        Returns:
            Path that was written

        Raises:
            SinkError: If encoding or writing fails
        """
        target = self.target_for(strip, index)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            strip.image.save(target, format="PNG")
        except (OSError, ValueError) as e:
            raise SinkError(str(target), str(e)) from e

        self._logger.info("Wrote strip", path=str(target), unit=strip.unit)
        return target
