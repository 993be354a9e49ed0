"""Logging utilities for Glyphstrip."""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics from a rendering run."""

    unit_count: int = 0
    glyph_count: int = 0
    strip_count: int = 0
    error_count: int = 0
    written_paths: list[Path] = field(default_factory=list)
    strip_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate rendering duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_strip_time_ms(self) -> float | None:
        """Average time to rasterize and compose one strip."""
        if not self.strip_timings_ms:
            return None
        return sum(self.strip_timings_ms) / len(self.strip_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphstrip")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking rendering progress and statistics.

    Called from both pipeline stages and the consuming loop; statistics
    updates are serialized.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()
        self._lock = threading.Lock()

    def log_unit_start(self, unit: str) -> None:
        """Log start of unit rasterization."""
        self._logger.debug("Rendering unit", unit=unit, chars=len(unit))
        with self._lock:
            self._stats.unit_count += 1

    def log_strip_composed(
        self,
        unit: str,
        glyph_count: int,
        width: int,
        height: int,
        duration_ms: float,
    ) -> None:
        """Log a finished strip."""
        self._logger.info(
            "Strip composed",
            unit=unit,
            glyphs=glyph_count,
            size=f"{width}x{height}",
            duration_ms=round(duration_ms, 2),
        )
        with self._lock:
            self._stats.strip_count += 1
            self._stats.glyph_count += glyph_count
            self._stats.strip_timings_ms.append(duration_ms)

    def log_strip_written(self, unit: str, path: Path) -> None:
        """Log a strip handed to the sink."""
        self._logger.debug("Strip written", unit=unit, path=str(path))
        with self._lock:
            self._stats.written_paths.append(path)

    def log_error(
        self,
        stage: str,
        error: BaseException,
        traceback: str | None = None,
    ) -> None:
        """Log a fatal pipeline error."""
        self._logger.error(
            "Pipeline failed",
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        with self._lock:
            self._stats.error_count += 1

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
