"""Rich console output helpers for the CLI.

Diagnostics go to stderr; stdout carries nothing but the rendered figure.
"""

from rich.console import Console
from rich.text import Text

console = Console()
err_console = Console(stderr=True)

SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_version(version: str) -> None:
    """Print the program name and version.

    Args:
        version: Application version string
    """
    console.print(f"[bold blue]figletctl[/bold blue] v{version}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message to stderr.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Text keeps brackets in user input from being read as markup
    line = Text.assemble((f"{SYM_ERR} Error:", "bold red"), " ", message)
    err_console.print(line)
    if details:
        err_console.print(Text(f"  {details}"))
