"""Rich display helpers for phase results.

Each ``print_*`` function renders one phase summary; all of them end
with a tally line so a run always finishes with a readable summary.
"""

from rich.markup import escape

from freshstart.models.entries import RepoRecord
from freshstart.models.results import (
    CloneOutcome,
    CloneSummary,
    ExportSummary,
    GitConfigSummary,
    InstallOutcome,
    InstallSummary,
    RepoStatus,
    ScannedRepo,
)
from freshstart.utils.formatting import (
    console,
    create_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)

_INSTALL_LABELS: dict[InstallOutcome, str] = {
    InstallOutcome.SUCCESS: "[success]installed[/]",
    InstallOutcome.ALREADY_INSTALLED: "[skipped]already installed[/]",
    InstallOutcome.NOT_FOUND: "[error]not found[/]",
    InstallOutcome.WARNING: "[warning]warning[/]",
}

_CLONE_LABELS: dict[CloneOutcome, str] = {
    CloneOutcome.CLONED: "[success]cloned[/]",
    CloneOutcome.CLONED_NO_UPSTREAM: "[warning]cloned, no upstream[/]",
    CloneOutcome.INVALID_URL: "[error]invalid URL[/]",
    CloneOutcome.FAILED: "[error]failed[/]",
}


def print_scan_results(repos: list[ScannedRepo]) -> None:
    """Print each repository's state, its changed paths, and the tally."""
    for repo in repos:
        if repo.status == RepoStatus.CLEAN:
            console.print(f"  [repo.clean]CLEAN[/]    {escape(repo.name)}")
        elif repo.status == RepoStatus.CHANGED:
            console.print(f"  [repo.changed]CHANGED[/]  {escape(repo.name)}")
            for change in repo.changes:
                console.print(f"             [muted]{escape(change)}[/]", highlight=False)
        else:
            name, error = escape(repo.name), escape(repo.error or "")
            console.print(f"  [error]ERROR[/]    {name} [muted]{error}[/]")

    clean = sum(1 for r in repos if r.status == RepoStatus.CLEAN)
    changed = sum(1 for r in repos if r.status == RepoStatus.CHANGED)
    console.print(f"\nClean: [repo.clean]{clean}[/], Changed: [repo.changed]{changed}[/]")
    if changed:
        print_warning(
            f"{changed} repository(ies) have uncommitted changes. "
            "Commit and push them before reinstalling."
        )


def print_export_summary(summary: ExportSummary) -> None:
    """Print the outcome of the package export."""
    if not summary.success:
        print_error(f"Package export failed: {summary.error}")
        return
    print_success(f"Exported packages to {summary.path}")
    if summary.package_count is None:
        print_info("Package summary unavailable.")
    else:
        print_info(f"{summary.package_count} package(s) exported.")


def print_install_summary(summary: InstallSummary) -> None:
    """Print per-application outcomes and the install tally."""
    if summary.skipped:
        return

    if summary.import_file is not None:
        if summary.import_succeeded:
            print_success(f"Imported packages from {summary.import_file}")
        else:
            print_error(f"Import from {summary.import_file} reported problems.")
            if summary.import_error:
                console.print(f"[muted]{escape(summary.import_error)}[/]", highlight=False)
    elif summary.results:
        table = create_table("Applications", "Status", "Name", "Package ID", "Details")
        for result in summary.results:
            label = _INSTALL_LABELS[result.outcome]
            if result.dry_run:
                label = "[info]dry-run[/]"
            table.add_row(
                label,
                escape(result.entry.name),
                escape(result.entry.package_id),
                escape(result.error or ""),
            )
        console.print(table)
        console.print(
            f"Installed: [success]{summary.count(InstallOutcome.SUCCESS)}[/], "
            f"already installed: {summary.count(InstallOutcome.ALREADY_INSTALLED)}, "
            f"not found: [error]{summary.count(InstallOutcome.NOT_FOUND)}[/], "
            f"warnings: [warning]{summary.count(InstallOutcome.WARNING)}[/]"
        )

    for directory in summary.path_additions:
        print_info(f"Added {directory} to PATH for this session.")


def print_git_config_summary(summary: GitConfigSummary) -> None:
    """Print each applied Git setting and the tally."""
    if summary.skipped:
        return
    for result in summary.results:
        key = escape(result.setting.key)
        if result.success:
            console.print(f"  [success]set[/]  {key} = {escape(result.setting.value)}")
        else:
            console.print(f"  [error]fail[/] {key}: [muted]{escape(result.error or '')}[/]")
    console.print(
        f"Git settings applied: [success]{summary.applied}[/], failed: [error]{summary.failed}[/]"
    )


def print_repository_list(records: list[RepoRecord]) -> None:
    """Print the repositories about to be cloned."""
    table = create_table("Repositories", "Repository", "Upstream")
    for record in records:
        upstream = escape(record.upstream) if record.upstream else "[muted]-[/]"
        table.add_row(escape(record.url), upstream)
    console.print(table)


def print_clone_summary(summary: CloneSummary) -> None:
    """Print per-repository outcomes and the clone tally."""
    if summary.skipped:
        return
    for result in summary.results:
        url = escape(result.record.url)
        detail = escape(result.error or result.warning or "")
        console.print(
            f"  {_CLONE_LABELS[result.outcome]} {url} [muted]{detail}[/]",
            highlight=False,
        )
    console.print(
        f"Cloned: [success]{summary.succeeded}[/], failed: [error]{summary.failed}[/]"
    )
