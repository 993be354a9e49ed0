"""CLI application entry point for glyphstrip.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from glyphstrip import __version__
from glyphstrip.cli.output import (
    console,
    create_progress,
    print_cancellation_summary,
    print_error,
    print_font_info,
    print_header,
    print_render_info,
    print_step,
    print_success,
)
from glyphstrip.config import (
    DEFAULT_TEXT,
    GlyphStripSettings,
    HintingMode,
    LoggingConfig,
    OutputConfig,
    RenderConfig,
    SplitPolicy,
)
from glyphstrip.core import TextProcessor, count_units, resolve_geometry
from glyphstrip.domain import StripImage
from glyphstrip.exceptions import FontLoadError, GlyphStripError, SinkError
from glyphstrip.utils import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Create the Typer app
app = typer.Typer(
    name="glyphstrip",
    help="Render text to image strips, one glyph cell at a time.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphstrip[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    fontfile: Annotated[
        Path,
        typer.Option(
            "--fontfile",
            "-f",
            help="Path to TTF/OTF font file",
        ),
    ] = Path("./sample.ttf"),
    dpi: Annotated[
        float,
        typer.Option("--dpi", help="Screen resolution in dots per inch", min=1.0),
    ] = 72.0,
    pts: Annotated[
        float,
        typer.Option("--pts", help="Font size in points", min=1.0),
    ] = 20.0,
    width: Annotated[
        int,
        typer.Option("--width", help="Glyph cell width in pixels (0 = from font)", min=0),
    ] = 0,
    height: Annotated[
        int,
        typer.Option("--height", help="Glyph cell height in pixels (0 = from font)", min=0),
    ] = 0,
    light: Annotated[
        bool,
        typer.Option("--light", help="Black on white instead of white on black"),
    ] = False,
    hinting: Annotated[
        str,
        typer.Option("--hinting", help="Font hinting (none|full)"),
    ] = "full",
    split: Annotated[
        str,
        typer.Option("--split", "-s", help="Unit policy (word|char)"),
    ] = "word",
    interval: Annotated[
        int,
        typer.Option("--interval", help="Delay between strips in milliseconds", min=0),
    ] = 200,
    text: Annotated[
        str | None,
        typer.Option("--text", "-t", help="Text to render (default: Jabberwocky)"),
    ] = None,
    text_file: Annotated[
        Path | None,
        typer.Option("--text-file", help="Read the text to render from a file"),
    ] = None,
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Output file name; {index} and {unit} are substituted",
        ),
    ] = "out.png",
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", help="Directory for output images"),
    ] = Path("."),
    reference_glyph: Annotated[
        str,
        typer.Option("--reference-glyph", help="Character whose advance sets the cell width"),
    ] = "$",
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render text to image strips, one strip per word.

    Every character is drawn into its own fixed-size cell and the cells of a
    word are joined left to right. Strips are written at a steady pace.

    Example:
        glyphstrip --fontfile Roboto-Regular.ttf --pts 32 --light

    This will keep overwriting out.png with one strip per word of the text.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if text is not None and text_file is not None:
        print_error("Cannot use --text and --text-file together")
        raise typer.Exit(code=1)

    # Validate enum arguments
    try:
        hinting_mode = HintingMode(hinting.lower())
    except ValueError:
        print_error(f"Invalid hinting mode: {hinting}", details="Valid values: none, full")
        raise typer.Exit(code=1)

    try:
        split_policy = SplitPolicy(split.lower())
    except ValueError:
        print_error(f"Invalid split policy: {split}", details="Valid values: word, char")
        raise typer.Exit(code=1)

    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)

    # Resolve the text
    if text_file is not None:
        try:
            source_text = text_file.read_text(encoding="utf-8").strip()
        except OSError as e:
            print_error(f"Could not read text file: {text_file}", details=str(e))
            raise typer.Exit(code=1)
    else:
        source_text = text if text is not None else DEFAULT_TEXT

    # Validate input file exists
    if not fontfile.is_file():
        print_error(
            f"Font file not found: {fontfile}",
            details=f"The file '{fontfile}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    # Create settings from CLI arguments
    try:
        settings = GlyphStripSettings(
            font_path=fontfile,
            render=RenderConfig(
                dpi=dpi,
                point_size=pts,
                width=width,
                height=height,
                light=light,
                pacing_interval=interval / 1000.0,
                hinting=hinting_mode,
                split_policy=split_policy,
                reference_glyph=reference_glyph,
            ),
            output=OutputConfig(pattern=output, directory=output_dir),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        print_error(f"Invalid option {location}", details=first["msg"])
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    processor = TextProcessor(settings, logger)
    written = 0

    try:
        # Load font
        if not quiet:
            print_step("Loading font")

        face = processor.load_face()
        geometry = resolve_geometry(face, settings.render)
        total = count_units(source_text, settings)

        if not quiet:
            print_font_info(
                font_path=str(fontfile),
                family=face.family_name,
                font_type=face.format,
                upm=face.units.units_per_em,
            )
            print_step("Rendering")
            print_render_info(
                units=total,
                cell_width=geometry.width,
                cell_height=geometry.height,
                policy=split_policy.value,
                interval_ms=interval,
            )

        if total == 0:
            if not quiet:
                console.print("\nNo text to render.")
            raise typer.Exit(code=0)

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task("Rendering", total=total, unit="")

                    def update_progress(
                        completed: int, _total: int, strip: StripImage, path: Path
                    ) -> None:
                        nonlocal written
                        written = completed
                        progress.update(task_id, completed=completed, unit=strip.unit)
                        if verbose:
                            progress.console.print(f"  {strip.unit} → {path}")

                    stats = processor.process(source_text, progress_callback=update_progress)
            else:
                stats = processor.process(source_text)
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_summary(strips=written)
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if not quiet:
            print_success(
                last_output=str(stats.written_paths[-1]) if stats.written_paths else None,
                total_time_s=stats.duration_seconds,
                strips=stats.strip_count,
                glyphs=stats.glyph_count,
                files=len(set(stats.written_paths)),
                avg_time_ms=stats.avg_strip_time_ms,
            )

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except SinkError as e:
        print_error(f"Could not write {e.target}: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphStripError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
