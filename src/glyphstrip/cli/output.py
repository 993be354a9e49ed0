"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for strip rendering.

    Returns:
        Configured Progress instance with bar, current unit and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        TextColumn("{task.fields[unit]}", style="dim"),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphstrip[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, family: str, font_type: str, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        family: Font family name
        font_type: Font format type (e.g., "TrueType", "OpenType")
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    console.print(f"  {family} {SYM_DOT} {upm:,} UPM")


def print_render_info(
    units: int,
    cell_width: int,
    cell_height: int,
    policy: str,
    interval_ms: int,
) -> None:
    """Print rendering configuration.

    Args:
        units: Number of units the text splits into
        cell_width: Glyph cell width in pixels
        cell_height: Glyph cell height in pixels
        policy: Split policy name
        interval_ms: Pacing interval in milliseconds
    """
    console.print(
        f"  {units} units ({policy}) {SYM_DOT} {cell_width}x{cell_height}px cells "
        f"{SYM_DOT} {interval_ms}ms pacing {SYM_DOT} Ctrl+C to cancel"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    last_output: str | None,
    total_time_s: float,
    strips: int,
    glyphs: int,
    files: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        last_output: Path of the last strip written
        total_time_s: Total rendering time in seconds
        strips: Number of strips emitted
        glyphs: Number of glyphs rasterized
        files: Number of distinct files written
        avg_time_ms: Average rasterize-and-compose time per strip
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if last_output:
        line = Text("  ")
        line.append(last_output, style="bold")
        console.print(line)

    console.print(f"  {strips} strips {SYM_DOT} {glyphs} glyphs {SYM_DOT} {files} files")

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg per strip")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(strips: int) -> None:
    """Print cancellation summary.

    Args:
        strips: Number of strips written before cancellation
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {strips} strips written")
