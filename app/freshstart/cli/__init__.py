"""CLI package for freshstart.

This package contains the Typer application and all subcommands.
"""

from freshstart.cli.main import app

__all__ = ["app"]
