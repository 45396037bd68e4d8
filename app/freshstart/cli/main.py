"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from freshstart import __version__
from freshstart.cli.commands import init, prepare, setup
from freshstart.utils.formatting import setup_logging

app = typer.Typer(
    name="freshstart",
    help="Export, check and rebuild a development machine.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"freshstart version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """freshstart - Export, check and rebuild a development machine.

    Run [bold]prepare[/bold] before wiping a machine and [bold]setup[/bold]
    on the fresh install.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose)


app.add_typer(prepare.app, name="prepare")
app.add_typer(setup.app, name="setup")
app.add_typer(init.app, name="init")


if __name__ == "__main__":
    app()
