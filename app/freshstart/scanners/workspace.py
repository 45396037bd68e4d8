"""Workspace repository scanner.

Finds Git repositories directly under a workspace directory and
reports whether each has uncommitted work.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from freshstart.models.results import RepoStatus, ScannedRepo
from freshstart.operators.git import GitOperator

logger = logging.getLogger(__name__)

GIT_MARKER = ".git"


class WorkspaceScanner:
    """Scanner for repositories in a workspace.

    Only immediate subdirectories are considered. A ``.git`` directory
    or file (worktrees, submodules) marks a repository.

    Example:
        >>> scanner = WorkspaceScanner(Path.home() / "Projects")
        >>> for repo in scanner.scan():
        ...     print(repo.name, repo.status.value)
    """

    def __init__(self, workspace: Path, git: GitOperator | None = None) -> None:
        self.workspace = workspace
        self.git = git or GitOperator()

    def find_repositories(self) -> list[Path]:
        """Return repository directories sorted by name.

        Returns:
            Empty list if the workspace does not exist.
        """
        if not self.workspace.is_dir():
            logger.debug("Workspace %s does not exist", self.workspace)
            return []
        return sorted(
            (child for child in self.workspace.iterdir() if (child / GIT_MARKER).exists()),
            key=lambda p: p.name.casefold(),
        )

    def scan(self) -> Iterator[ScannedRepo]:
        """Yield the working tree state of each repository.

        Yields:
            ScannedRepo classified as CLEAN, CHANGED or ERROR.

        Raises:
            RuntimeError: If git is not available.
        """
        self.git.require_available()
        for repo_dir in self.find_repositories():
            yield self._scan_one(repo_dir)

    def _scan_one(self, repo_dir: Path) -> ScannedRepo:
        try:
            result = self.git.status(repo_dir)
        except OSError as e:
            return ScannedRepo(repo_dir.name, repo_dir, RepoStatus.ERROR, error=str(e))

        if not result.success:
            return ScannedRepo(
                repo_dir.name,
                repo_dir,
                RepoStatus.ERROR,
                error=result.diagnostic or f"git status exited with {result.returncode}",
            )

        changes = tuple(line for line in result.stdout.splitlines() if line.strip())
        if not changes:
            return ScannedRepo(repo_dir.name, repo_dir, RepoStatus.CLEAN)
        return ScannedRepo(repo_dir.name, repo_dir, RepoStatus.CHANGED, changes=changes)
