"""Outcome models for the prepare and setup phases.

Each external call site has its own enumerated outcome so callers can
tally and display results without re-inspecting exit codes.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from freshstart.models.entries import AppEntry, GitSetting, RepoRecord


class InstallOutcome(str, Enum):
    """Classification of a package install exit status.

    Attributes:
        SUCCESS: The package was installed.
        ALREADY_INSTALLED: The package manager reported it as already present.
        NOT_FOUND: No package matched the identifier.
        WARNING: Any other non-zero exit; diagnostic text is attached.
    """

    SUCCESS = "success"
    ALREADY_INSTALLED = "already_installed"
    NOT_FOUND = "not_found"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class InstallResult:
    """Result of installing one application."""

    entry: AppEntry
    outcome: InstallOutcome
    exit_code: int
    error: str | None = None
    dry_run: bool = False


@dataclass(slots=True)
class InstallSummary:
    """Aggregated result of the install phase."""

    results: list[InstallResult] = field(default_factory=list)
    import_file: Path | None = None
    import_succeeded: bool | None = None
    import_error: str | None = None
    skipped_reason: str | None = None
    invalid_entries: int = 0
    path_additions: list[str] = field(default_factory=list)

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None

    def count(self, outcome: InstallOutcome) -> int:
        """Count results with the given outcome."""
        return sum(1 for r in self.results if r.outcome == outcome)


@dataclass(frozen=True, slots=True)
class GitSettingResult:
    """Result of applying one global Git setting."""

    setting: GitSetting
    success: bool
    error: str | None = None


@dataclass(slots=True)
class GitConfigSummary:
    """Aggregated result of the Git configuration phase."""

    results: list[GitSettingResult] = field(default_factory=list)
    skipped_reason: str | None = None
    invalid_entries: int = 0

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None

    @property
    def applied(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success)


class CloneOutcome(str, Enum):
    """Classification of a repository clone attempt.

    Attributes:
        CLONED: Clone succeeded (upstream remote, if any, added).
        CLONED_NO_UPSTREAM: Clone succeeded but adding the upstream remote failed.
        INVALID_URL: URL did not match an accepted shape; nothing was run.
        FAILED: The clone command failed.
    """

    CLONED = "cloned"
    CLONED_NO_UPSTREAM = "cloned_no_upstream"
    INVALID_URL = "invalid_url"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class CloneResult:
    """Result of cloning one repository."""

    record: RepoRecord
    outcome: CloneOutcome
    error: str | None = None
    warning: str | None = None

    @property
    def success(self) -> bool:
        """Check if the repository is present after the attempt."""
        return self.outcome in (CloneOutcome.CLONED, CloneOutcome.CLONED_NO_UPSTREAM)


@dataclass(slots=True)
class CloneSummary:
    """Aggregated result of the clone phase."""

    workspace: Path | None = None
    workspace_warning: str | None = None
    results: list[CloneResult] = field(default_factory=list)
    skipped_reason: str | None = None
    invalid_entries: int = 0

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success)


class RepoStatus(str, Enum):
    """Working tree state of a scanned repository.

    Attributes:
        CLEAN: No uncommitted changes.
        CHANGED: Uncommitted or untracked changes present.
        ERROR: The status query failed.
    """

    CLEAN = "clean"
    CHANGED = "changed"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ScannedRepo:
    """A repository found in the workspace and its working tree state."""

    name: str
    path: Path
    status: RepoStatus
    changes: tuple[str, ...] = ()
    error: str | None = None


@dataclass(frozen=True, slots=True)
class ExportSummary:
    """Result of exporting the installed package list.

    Attributes:
        path: Where the export document was written.
        success: Whether the export command succeeded.
        package_count: Packages in the document; None if the summary is unavailable.
        error: Diagnostic text when the export failed.
    """

    path: Path
    success: bool
    package_count: int | None = None
    error: str | None = None
