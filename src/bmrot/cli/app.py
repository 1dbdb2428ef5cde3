"""CLI application entry point for bmrot.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from bmrot import __version__
from bmrot.cli.output import (
    console,
    print_error,
    print_header,
    print_step,
    print_success,
)
from bmrot.config import BmrotSettings, LoggingConfig, ParserConfig, RotationConfig
from bmrot.core import FontRotator
from bmrot.exceptions import (
    BmrotError,
    DescriptorWriteError,
    MalformedValueError,
    SourceUnavailableError,
)

# Create the Typer app
app = typer.Typer(
    name="bmrot",
    help="Rotate BMFont text descriptors 90 degrees clockwise.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]bmrot[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def rotate(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input BMFont text descriptor (.fnt)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the dump to this file instead of stdout",
        ),
    ] = None,
    turns: Annotated[
        int,
        typer.Option(
            "--turns",
            "-t",
            help="Number of 90 degree clockwise turns (0-3)",
            min=0,
            max=3,
        ),
    ] = 1,
    no_rotate: Annotated[
        bool,
        typer.Option(
            "--no-rotate",
            help="Print the parsed descriptor without rotating it",
        ),
    ] = False,
    encoding: Annotated[
        str,
        typer.Option(
            "--encoding",
            help="Text encoding of the descriptor file",
        ),
    ] = "utf-8",
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
    """Rotate a bitmap font descriptor 90 degrees clockwise and print it.

    Only the descriptor is transformed; page sheet images are not loaded.

    Example:
        bmrot font.fnt > font-rotated.fnt
    """
    if not input_font.exists():
        print_error(
            f"Input file not found: {input_font}",
            details=f"The file '{input_font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_font.is_file():
        print_error(
            f"Input path is not a file: {input_font}",
            details="Please provide a path to a BMFont text descriptor.",
        )
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = BmrotSettings(
        rotation=RotationConfig(turns=0 if no_rotate else turns),
        parser=ParserConfig(encoding=encoding),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
            quiet=quiet,
        ),
    )

    # The dump goes to stdout, so the header is only shown when writing a file
    show_progress = output is not None and not quiet
    if show_progress:
        print_header(__version__)
        print_step("Rotating descriptor")

    try:
        rotator = FontRotator(settings)
        dump, stats = rotator.process(font_path=input_font, output_path=output)
    except SourceUnavailableError as e:
        print_error(f"Could not read descriptor: {e.reason}")
        raise typer.Exit(code=1)
    except MalformedValueError as e:
        print_error(
            f"Malformed descriptor: {e.reason}",
            details=f"{e.source}, line {e.line_number}: {e.tag} {e.key}={e.value}",
        )
        raise typer.Exit(code=1)
    except DescriptorWriteError as e:
        print_error(f"Could not write descriptor: {e.reason}")
        raise typer.Exit(code=1)
    except BmrotError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(dump, nl=False)
    elif show_progress:
        print_success(
            output_path=str(output),
            total_time_s=stats.duration_seconds,
            pages=stats.page_count,
            chars=stats.char_count,
            turns=stats.turns,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
