"""Prepare command implementation.

Run before reinstalling: reports repositories with uncommitted work and
exports the installed package list.
"""

from pathlib import Path
from typing import Annotated

import typer

from freshstart.cli.display import print_export_summary, print_scan_results
from freshstart.cli.options import ConfigDirOption, WorkspaceOption, load_run_context
from freshstart.core.cloner import resolve_workspace
from freshstart.core.context import RunContext
from freshstart.core.exporter import export_packages
from freshstart.core.installer import make_winget_operator
from freshstart.core.paths import get_default_export_path, resolve_relative_to
from freshstart.operators.git import GitOperator
from freshstart.scanners.workspace import WorkspaceScanner
from freshstart.utils.formatting import print_header, print_info, print_success, print_warning

app = typer.Typer(
    help="Check repositories and export installed packages before a reinstall.",
    invoke_without_command=True,
)


def _scan_workspace(context: RunContext, workspace: str | None) -> None:
    path, rejected = resolve_workspace(context, workspace)
    if rejected:
        print_warning(f"{rejected}; using {path}")

    print_header(f"Checking repositories in {path}")
    if not path.is_dir():
        print_warning(f"Workspace {path} does not exist, nothing to check.")
        return

    scanner = WorkspaceScanner(path, GitOperator())
    try:
        repos = list(scanner.scan())
    except RuntimeError as e:
        print_warning(f"{e}, skipping repository check.")
        return

    if not repos:
        print_info("No Git repositories found.")
        return
    print_scan_results(repos)


def _export(context: RunContext, export_path: Path | None) -> None:
    print_header("Exporting installed packages")
    operator = make_winget_operator(context)
    if not operator.is_available():
        print_warning("winget is not available, skipping package export.")
        return

    if export_path is not None:
        target = export_path.expanduser().absolute()
    elif context.settings.export_path is not None:
        target = resolve_relative_to(context.settings.export_path, context.config_dir)
    else:
        target = get_default_export_path(context.config_dir)

    try:
        summary = export_packages(operator, target)
    except RuntimeError as e:
        print_warning(f"{e}, skipping package export.")
        return
    print_export_summary(summary)


@app.callback(invoke_without_command=True)
def prepare(
    ctx: typer.Context,
    workspace: WorkspaceOption = None,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export-path",
            "-o",
            help="Where to write the package export (default: config dir).",
            dir_okay=False,
        ),
    ] = None,
    skip_scan: Annotated[
        bool,
        typer.Option("--skip-scan", help="Do not check repositories for uncommitted work."),
    ] = False,
    skip_export: Annotated[
        bool,
        typer.Option("--skip-export", help="Do not export the installed package list."),
    ] = False,
    config_dir: ConfigDirOption = None,
) -> None:
    """Check local repositories and export installed packages.

    Nothing here is fatal: problems are reported and the next step runs.

    Examples:
        freshstart prepare                          # Check ~/Projects, export packages
        freshstart prepare -w D:/src                # Check another workspace
        freshstart prepare -o ~/backup/apps.json    # Export somewhere else
        freshstart prepare --skip-export            # Only check repositories
    """
    if ctx.invoked_subcommand is not None:
        return

    context = load_run_context(config_dir)

    if not skip_scan:
        _scan_workspace(context, workspace)
    if not skip_export:
        _export(context, export_path)

    print_success("\nPreparation finished.")
