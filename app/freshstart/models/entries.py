"""Records read from the line-oriented configuration files."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class AppEntry:
    """An application to install.

    Attributes:
        name: Human-readable display name (e.g., 'Visual Studio Code').
        package_id: Package manager identifier (e.g., 'Microsoft.VisualStudioCode').
    """

    name: str
    package_id: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.package_id:
            msg = "Package identifier cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class GitSetting:
    """A global Git configuration key and its value."""

    key: str
    value: str

    def __post_init__(self) -> None:
        """Validate setting data after initialization."""
        if not self.key:
            msg = "Git config key cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RepoRecord:
    """A repository to clone, optionally forked from ``upstream``."""

    url: str
    upstream: str | None = None


@dataclass(frozen=True, slots=True)
class ParseDiagnostic:
    """A configuration line that could not be turned into a record.

    Attributes:
        line_number: 1-based line number in the source text.
        line: The offending line, stripped.
        message: Why the line was rejected.
    """

    line_number: int
    line: str
    message: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}: {self.line!r}"


@dataclass(slots=True)
class ParseResult(Generic[T]):
    """Records parsed from a configuration file plus rejected lines."""

    records: list[T] = field(default_factory=list)
    diagnostics: list[ParseDiagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Check if every non-comment line produced a record."""
        return not self.diagnostics
