"""Init command implementation.

Writes commented template configuration files.
"""

from pathlib import Path
from typing import Annotated

import typer

from freshstart.cli.options import ConfigDirOption
from freshstart.core.paths import (
    ensure_dir,
    get_apps_path,
    get_config_dir,
    get_git_config_path,
    get_repos_path,
)
from freshstart.utils.formatting import print_error, print_info, print_success

app = typer.Typer(
    help="Create template configuration files.",
    invoke_without_command=True,
)

APPS_TEMPLATE = """\
# Applications to install, one per line:
#   Display Name | package-id
# Find identifiers with: winget search <name>

Git | Git.Git
Visual Studio Code | Microsoft.VisualStudioCode
"""

GIT_CONFIG_TEMPLATE = """\
# Global Git settings, one per line:
#   key = value

# user.name = Your Name
# user.email = you@example.com
init.defaultBranch = main
core.autocrlf = true
"""

REPOS_TEMPLATE = """\
# Repositories to clone into the workspace, one per line:
#   repo_url
#   repo_url|upstream_url      (forks: adds a remote named "upstream")

# https://github.com/you/project.git
# https://github.com/you/fork.git|https://github.com/original/fork.git
"""


def template_targets(config_dir: Path) -> list[tuple[Path, str]]:
    """Return ``(path, content)`` for every template file."""
    return [
        (get_apps_path(config_dir), APPS_TEMPLATE),
        (get_git_config_path(config_dir), GIT_CONFIG_TEMPLATE),
        (get_repos_path(config_dir), REPOS_TEMPLATE),
    ]


@app.callback(invoke_without_command=True)
def init_config(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing files."),
    ] = False,
    config_dir: ConfigDirOption = None,
) -> None:
    """Create apps.txt, git-config.txt and repos.txt templates.

    Existing files are left alone unless --force is given.

    Examples:
        freshstart init
        freshstart init --config-dir ~/dotfiles/freshstart
    """
    if ctx.invoked_subcommand is not None:
        return

    directory = (config_dir or get_config_dir()).expanduser()
    try:
        ensure_dir(directory, "config")
        for path, content in template_targets(directory):
            if path.exists() and not force:
                print_info(f"Keeping existing {path}")
                continue
            path.write_text(content, encoding="utf-8")
            print_success(f"Wrote {path}")
    except (OSError, RuntimeError) as e:
        print_error(f"Failed to write configuration templates: {e}")
        raise typer.Exit(code=1) from e
