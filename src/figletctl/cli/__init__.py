"""Command-line interface for figletctl.

This module provides the CLI using Typer, with rich output on stderr for
diagnostics. Figures themselves are written to stdout untouched.
"""

from figletctl.cli.app import cli

__all__ = ["cli"]
