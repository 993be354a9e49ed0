"""Configuration management for glyphstrip.

This module provides configuration management using Pydantic models.
All models are frozen: settings are built once (usually by the CLI) and
passed explicitly into every component.

Key classes:
- RenderConfig: Rasterization, geometry and pacing settings
- OutputConfig: Image sink settings
- LoggingConfig: Logging settings
- GlyphStripSettings: Main application settings
"""

from glyphstrip.config.settings import (
    DEFAULT_TEXT,
    GlyphStripSettings,
    HintingMode,
    LoggingConfig,
    OutputConfig,
    RenderConfig,
    SplitPolicy,
)

__all__ = [
    "DEFAULT_TEXT",
    "GlyphStripSettings",
    "HintingMode",
    "LoggingConfig",
    "OutputConfig",
    "RenderConfig",
    "SplitPolicy",
]
