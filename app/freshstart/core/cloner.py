"""Repository clone phase.

Clones every repository in ``repos.txt`` into the workspace and wires
up an ``upstream`` remote for forks.
"""

import logging
from pathlib import Path

from freshstart.core.config_reader import parse_repo_list, read_config_file
from freshstart.core.context import RunContext
from freshstart.core.paths import get_default_workspace, get_repos_path
from freshstart.core.repos import derive_repo_name, is_valid_repo_url
from freshstart.core.workspace import ensure_workspace, validate_workspace
from freshstart.models.entries import RepoRecord
from freshstart.models.results import CloneOutcome, CloneResult, CloneSummary
from freshstart.operators.git import GitOperator
from freshstart.utils.formatting import print_warning

logger = logging.getLogger(__name__)


def resolve_workspace(context: RunContext, requested: str | Path | None) -> tuple[Path, str | None]:
    """Pick the workspace to clone into.

    Precedence: ``requested`` (command line), then the ``workspace``
    setting, then ``~/Projects``. A rejected request falls back to the
    default.

    Returns:
        ``(workspace, rejection_reason)``.
    """
    default = context.settings.workspace or get_default_workspace()
    check = validate_workspace(
        requested, default.expanduser(), system_prefixes=context.settings.system_prefixes
    )
    return check.path, check.reason


def load_repositories(context: RunContext) -> tuple[list[RepoRecord], int]:
    """Read ``repos.txt``.

    Returns:
        ``(records, invalid_line_count)``.
    """
    parsed = read_config_file(
        get_repos_path(context.config_dir), parse_repo_list, label="repository list"
    )
    return parsed.records, len(parsed.diagnostics)


def clone_repository(git: GitOperator, record: RepoRecord, workspace: Path) -> CloneResult:
    """Clone one repository and add its upstream remote.

    Args:
        git: Git operator.
        record: Repository to clone.
        workspace: Directory to clone into (the current directory).

    Returns:
        CloneResult for this repository.
    """
    if not is_valid_repo_url(record.url):
        print_warning(f"Invalid repository URL, skipping: {record.url}")
        return CloneResult(record, CloneOutcome.INVALID_URL, error="invalid repository URL")

    try:
        result = git.clone(record.url, workspace)
    except OSError as e:
        return CloneResult(record, CloneOutcome.FAILED, error=str(e))

    if not result.success:
        error = result.diagnostic or f"exit code {result.returncode}"
        logger.warning("Clone of %s failed: %s", record.url, error)
        return CloneResult(record, CloneOutcome.FAILED, error=error)

    upstream = record.upstream
    if not upstream:
        return CloneResult(record, CloneOutcome.CLONED)

    repo_dir = workspace / derive_repo_name(record.url)
    if not repo_dir.is_dir() and not git.dry_run:
        warning = f"Cloned directory {repo_dir} not found, upstream not added"
        print_warning(warning)
        return CloneResult(record, CloneOutcome.CLONED_NO_UPSTREAM, warning=warning)

    try:
        remote = git.add_upstream(repo_dir, upstream)
    except OSError as e:
        remote_error = str(e)
    else:
        if remote.success:
            return CloneResult(record, CloneOutcome.CLONED)
        remote_error = remote.diagnostic or f"exit code {remote.returncode}"

    warning = f"Failed to add upstream for {repo_dir.name}: {remote_error}"
    print_warning(warning)
    return CloneResult(record, CloneOutcome.CLONED_NO_UPSTREAM, warning=warning)


def clone_repositories(
    context: RunContext,
    git: GitOperator,
    records: list[RepoRecord],
    workspace: Path,
) -> CloneSummary:
    """Clone ``records`` into ``workspace``.

    The process working directory is switched to the workspace for the
    duration of the loop and always restored afterwards.

    Args:
        context: Run context owning the working directory.
        git: Git operator.
        records: Repositories to clone, in order.
        workspace: Validated workspace directory.

    Returns:
        CloneSummary with one result per record.
    """
    summary = CloneSummary(workspace=workspace)

    if not git.is_available():
        print_warning("git is not available, skipping repository cloning.")
        summary.skipped_reason = "git not available"
        return summary

    if context.dry_run and not workspace.is_dir():
        logger.info("Dry-run: Would create workspace %s", workspace)
        summary.results = [clone_repository(git, r, workspace) for r in records]
        return summary

    ensure_workspace(workspace)

    with context.working_directory(workspace):
        for record in records:
            summary.results.append(clone_repository(git, record, workspace))

    return summary
