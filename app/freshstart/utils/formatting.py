"""Rich console formatting utilities.

Provides consistent status lines and logging setup for CLI output.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from freshstart.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Use truecolor on interactive terminals, let Rich decide otherwise."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def setup_logging(verbose: bool = False) -> None:
    """Route the ``freshstart`` loggers through Rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    root = logging.getLogger("freshstart")
    root.handlers.clear()
    root.addHandler(RichHandler(console=err_console, show_path=False, markup=False))
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def create_table(title: str, *columns: str) -> Table:
    """Create a table with the shared header and border styles."""
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    for column in columns:
        table.add_column(column)
    return table


def print_header(message: str) -> None:
    """Print a phase heading; ``message`` is plain text, not markup."""
    console.print()
    console.rule(f"[bold_header]{escape(message)}[/]", style="border")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
