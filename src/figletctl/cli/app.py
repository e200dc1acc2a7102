"""CLI application entry point for figletctl.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from figletctl import __version__
from figletctl.cli.output import SYM_DOT, print_error, print_version
from figletctl.config import FigletCtlSettings, LoggingConfig
from figletctl.core import FigureRenderer
from figletctl.exceptions import (
    EmptyMessageError,
    FigletCtlError,
    FontLoadError,
    UnsupportedCharacterError,
)
from figletctl.io import FigureWriter
from figletctl.utils import configure_logging

app = typer.Typer(
    name="figletctl",
    help="Print a message as large FIGlet text using the standard font.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_version(__version__)
        raise typer.Exit()


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def render(
    message: Annotated[
        str,
        typer.Argument(
            help="Text to render",
            show_default=False,
        ),
    ],
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
            help="Logging level on stderr (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
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
    """Render MESSAGE with the standard FIGlet font and print it.

    Example:
        figletctl "Hello"

    Characters the standard font has no glyph for are rejected; nothing is
    printed in that case.
    """
    try:
        logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    except ValidationError:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL",
        )
        raise typer.Exit(code=1)

    settings = FigletCtlSettings(logging=logging_config)
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    try:
        with FigureRenderer(settings) as renderer:
            figure = renderer.render(message)
        FigureWriter().write(figure)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except EmptyMessageError:
        print_error("Nothing to render", details="The message is empty.")
        raise typer.Exit(code=1)
    except UnsupportedCharacterError as e:
        listed = f" {SYM_DOT} ".join(repr(c) for c in e.characters)
        print_error(
            f"Unsupported characters for font '{e.font_name}'",
            details=listed,
        )
        raise typer.Exit(code=1)
    except FigletCtlError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
