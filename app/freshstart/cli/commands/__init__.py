"""CLI commands for freshstart.

This package contains all subcommand implementations.
"""

from freshstart.cli.commands import init, prepare, setup

__all__ = ["init", "prepare", "setup"]
