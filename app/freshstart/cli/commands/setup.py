"""Setup command implementation.

Run on a fresh machine: installs applications, applies Git settings
and clones repositories, in that order.
"""

from pathlib import Path
from typing import Annotated

import typer

from freshstart.cli.display import (
    print_clone_summary,
    print_git_config_summary,
    print_install_summary,
    print_repository_list,
)
from freshstart.cli.options import ConfigDirOption, WorkspaceOption, load_run_context
from freshstart.core.cloner import clone_repositories, load_repositories, resolve_workspace
from freshstart.core.context import RunContext
from freshstart.core.git_config import apply_git_settings
from freshstart.core.installer import install_applications, make_winget_operator
from freshstart.operators.git import GitOperator
from freshstart.utils.formatting import print_header, print_info, print_success, print_warning

app = typer.Typer(
    help="Install applications, configure Git and clone repositories.",
    invoke_without_command=True,
)


def _install(context: RunContext, import_file: Path | None) -> None:
    print_header("Installing applications")
    summary = install_applications(context, make_winget_operator(context), import_file)
    print_install_summary(summary)


def _configure_git(context: RunContext) -> None:
    print_header("Configuring Git")
    summary = apply_git_settings(context, GitOperator(dry_run=context.dry_run))
    print_git_config_summary(summary)


def _clone(context: RunContext, workspace: str | None) -> None:
    print_header("Cloning repositories")
    path, rejected = resolve_workspace(context, workspace)
    if rejected:
        print_warning(f"{rejected}; using {path}")
    print_info(f"Workspace: {path}")

    records, invalid = load_repositories(context)
    if not records:
        print_info("No repositories to clone.")
        return
    print_repository_list(records)

    try:
        summary = clone_repositories(context, GitOperator(dry_run=context.dry_run), records, path)
    except RuntimeError as e:
        print_warning(f"{e}, skipping repository cloning.")
        return
    summary.workspace_warning = rejected
    summary.invalid_entries = invalid
    print_clone_summary(summary)


@app.callback(invoke_without_command=True)
def setup(
    ctx: typer.Context,
    import_file: Annotated[
        Path | None,
        typer.Option(
            "--import-file",
            "-i",
            help="Replay a package export instead of apps.txt (relative paths use the config dir).",
            dir_okay=False,
        ),
    ] = None,
    workspace: WorkspaceOption = None,
    skip_apps: Annotated[
        bool,
        typer.Option("--skip-apps", help="Do not install applications."),
    ] = False,
    skip_git: Annotated[
        bool,
        typer.Option("--skip-git", help="Do not apply Git settings."),
    ] = False,
    skip_repos: Annotated[
        bool,
        typer.Option("--skip-repos", help="Do not clone repositories."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be done without running installs, config or clones.",
        ),
    ] = False,
    config_dir: ConfigDirOption = None,
) -> None:
    """Provision a fresh machine from the configuration files.

    Each step is independent: a failure is tallied and the run carries
    on to the next entry and the next step.

    Examples:
        freshstart setup                                # Everything
        freshstart setup --import-file winget-export.json
        freshstart setup --skip-apps --workspace D:/src
        freshstart setup --dry-run                      # Preview only
    """
    if ctx.invoked_subcommand is not None:
        return

    context = load_run_context(config_dir, dry_run=dry_run)
    if dry_run:
        print_info("Dry run: no changes will be made.")

    if not skip_apps:
        _install(context, import_file)
    if not skip_git:
        _configure_git(context)
    if not skip_repos:
        _clone(context, workspace)

    print_success("\nSetup finished.")
