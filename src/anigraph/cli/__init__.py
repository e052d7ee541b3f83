"""Command-line interface for anigraph.

This package provides the Typer app and console used by every CLI command.
"""

from anigraph.cli.commands import app, console, main

__all__ = ["app", "console", "main"]
