"""Windows Package Manager (winget) operator.

Runs ``winget export``, ``winget install`` and ``winget import`` and
classifies install exit statuses.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from freshstart.core.settings import WINGET_ALREADY_INSTALLED, WINGET_NO_PACKAGE_FOUND
from freshstart.models.entries import AppEntry
from freshstart.models.results import InstallOutcome, InstallResult
from freshstart.operators.base import Operator
from freshstart.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)

# Non-interactive flags shared by install and import
_AGREEMENT_FLAGS = ["--accept-package-agreements", "--accept-source-agreements"]


def build_outcome_table(
    already_installed: Iterable[int] = (WINGET_ALREADY_INSTALLED,),
    not_found: Iterable[int] = (WINGET_NO_PACKAGE_FOUND,),
) -> dict[int, InstallOutcome]:
    """Build the exit code to outcome mapping.

    Codes not in the table classify as :attr:`InstallOutcome.WARNING`.
    """
    table = {0: InstallOutcome.SUCCESS}
    table.update({code: InstallOutcome.ALREADY_INSTALLED for code in already_installed})
    table.update({code: InstallOutcome.NOT_FOUND for code in not_found})
    return table


def _run_or_fail(args: list[str]) -> CommandResult:
    """Run ``args``, turning a launch failure into a failed result."""
    try:
        return run_command(args)
    except OSError as e:
        logger.warning("Could not run %s: %s", args[0], e)
        return CommandResult(stdout="", stderr=str(e), returncode=-1)


class WingetOperator(Operator):
    """Operator for the Windows Package Manager.

    Attributes:
        dry_run: If True, install and import are only logged.
        outcome_table: Exit code to InstallOutcome mapping.
    """

    def __init__(
        self,
        dry_run: bool = False,
        outcome_table: dict[int, InstallOutcome] | None = None,
    ) -> None:
        super().__init__(dry_run=dry_run)
        self.outcome_table = outcome_table or build_outcome_table()

    @property
    def executable(self) -> str:
        return "winget"

    def is_available(self) -> bool:
        """Check if the winget CLI is on PATH."""
        return command_exists("winget")

    def classify(self, exit_code: int) -> InstallOutcome:
        """Map an install exit status to its outcome."""
        return self.outcome_table.get(exit_code, InstallOutcome.WARNING)

    def export(self, output_path: Path) -> CommandResult:
        """Export the installed package list to a JSON document.

        Args:
            output_path: Destination file.

        Returns:
            CommandResult of ``winget export``.

        Raises:
            RuntimeError: If winget is not available.
        """
        self.require_available()
        args = ["winget", "export", "-o", str(output_path), "--accept-source-agreements"]
        logger.info("Exporting packages to %s", output_path)
        return _run_or_fail(args)

    def install(self, entry: AppEntry) -> InstallResult:
        """Install a single application by exact identifier.

        Args:
            entry: Application to install.

        Returns:
            InstallResult classified from the exit status.

        Raises:
            RuntimeError: If winget is not available.
        """
        self.require_available()

        if self.dry_run:
            logger.info("Dry-run: Would install %s (%s)", entry.name, entry.package_id)
            return InstallResult(
                entry=entry, outcome=InstallOutcome.SUCCESS, exit_code=0, dry_run=True
            )

        args = [
            "winget",
            "install",
            "--id",
            entry.package_id,
            "--exact",
            "--silent",
            *_AGREEMENT_FLAGS,
        ]
        logger.info("Installing %s (%s)", entry.name, entry.package_id)
        try:
            result = run_command(args)
        except OSError as e:
            return InstallResult(
                entry=entry, outcome=InstallOutcome.WARNING, exit_code=-1, error=str(e)
            )

        outcome = self.classify(result.returncode)
        error = None
        if outcome == InstallOutcome.WARNING:
            error = result.diagnostic or f"exit code {result.returncode}"
        logger.debug("%s exited with %d (%s)", entry.package_id, result.returncode, outcome.value)
        return InstallResult(
            entry=entry, outcome=outcome, exit_code=result.returncode, error=error
        )

    def import_packages(self, import_file: Path) -> CommandResult:
        """Install every package listed in an export document.

        Args:
            import_file: Export document to replay.

        Returns:
            CommandResult of ``winget import``; a synthetic success in dry-run mode.

        Raises:
            RuntimeError: If winget is not available.
        """
        self.require_available()

        if self.dry_run:
            logger.info("Dry-run: Would import %s", import_file)
            return CommandResult(stdout="", stderr="", returncode=0)

        args = ["winget", "import", "-i", str(import_file), *_AGREEMENT_FLAGS]
        logger.info("Importing packages from %s", import_file)
        return _run_or_fail(args)
