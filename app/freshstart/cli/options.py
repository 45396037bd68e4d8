"""Shared option types and helpers for CLI commands."""

from pathlib import Path
from typing import Annotated

import typer

from freshstart.core.context import RunContext
from freshstart.core.errors import SettingsError
from freshstart.core.paths import CONFIG_DIR_ENV, get_config_dir, get_settings_path
from freshstart.core.settings import load_settings
from freshstart.utils.formatting import print_error

ConfigDirOption = Annotated[
    Path | None,
    typer.Option(
        "--config-dir",
        help=f"Directory holding apps.txt, git-config.txt and repos.txt [env: {CONFIG_DIR_ENV}].",
        file_okay=False,
    ),
]

WorkspaceOption = Annotated[
    str | None,
    typer.Option(
        "--workspace",
        "-w",
        help="Workspace directory holding your repositories (default: ~/Projects).",
    ),
]


def load_run_context(config_dir: Path | None, dry_run: bool = False) -> RunContext:
    """Build the run context for a command, exiting on invalid settings.

    Args:
        config_dir: Explicit config directory, or None for the default.
        dry_run: Whether state-changing commands are simulated.

    Returns:
        RunContext with settings loaded.

    Raises:
        typer.Exit: With code 1 if ``config.toml`` is invalid.
    """
    directory = (config_dir or get_config_dir()).expanduser()
    try:
        settings = load_settings(get_settings_path(directory))
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    return RunContext(config_dir=directory, settings=settings, dry_run=dry_run)
