"""Git operator.

Wraps the handful of ``git`` subcommands used while preparing and
provisioning a machine.
"""

import logging
import subprocess
from pathlib import Path

from freshstart.operators.base import Operator
from freshstart.utils.shell import CommandResult, run_command

logger = logging.getLogger(__name__)

_DRY_RUN_RESULT = CommandResult(stdout="", stderr="", returncode=0)


class GitOperator(Operator):
    """Operator for the ``git`` binary."""

    @property
    def executable(self) -> str:
        return "git"

    def is_available(self) -> bool:
        """Probe ``git --version``."""
        try:
            return run_command(["git", "--version"], timeout=30.0).success
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("git probe failed: %s", e)
            return False

    def status(self, repo_dir: Path) -> CommandResult:
        """Return ``git status --porcelain`` for a repository.

        Read-only, so it also runs in dry-run mode.
        """
        return run_command(["git", "status", "--porcelain"], cwd=str(repo_dir))

    def clone(self, url: str, workspace: Path) -> CommandResult:
        """Clone ``url`` into ``workspace``."""
        if self.dry_run:
            logger.info("Dry-run: Would clone %s into %s", url, workspace)
            return _DRY_RUN_RESULT
        logger.info("Cloning %s", url)
        return run_command(["git", "clone", url], cwd=str(workspace))

    def add_upstream(self, repo_dir: Path, url: str) -> CommandResult:
        """Add a remote named ``upstream`` to the repository in ``repo_dir``."""
        if self.dry_run:
            logger.info("Dry-run: Would add upstream %s in %s", url, repo_dir)
            return _DRY_RUN_RESULT
        return run_command(["git", "remote", "add", "upstream", url], cwd=str(repo_dir))

    def set_global_config(self, key: str, value: str) -> CommandResult:
        """Set a global configuration value."""
        if self.dry_run:
            logger.info("Dry-run: Would set git config %s=%s", key, value)
            return _DRY_RUN_RESULT
        logger.info("Setting git config %s", key)
        return run_command(["git", "config", "--global", key, value])
