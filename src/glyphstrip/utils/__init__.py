"""Utility functions for glyphstrip.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics and progress logging
"""

from glyphstrip.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
