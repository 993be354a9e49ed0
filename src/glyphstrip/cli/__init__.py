"""Command-line interface for glyphstrip.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bar across the strips of a run
- Verbose/quiet output modes
- Detailed error reporting
"""

from glyphstrip.cli.app import cli, main

__all__ = ["cli", "main"]
