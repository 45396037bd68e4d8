"""Abstract base class for external tool operators.

An operator wraps one command-line tool (the package manager or Git)
and turns its exit statuses into typed results.
"""

from abc import ABC, abstractmethod


class Operator(ABC):
    """Abstract base class for all external tool operators.

    Attributes:
        dry_run: If True, state-changing commands are logged but not run.

    Example:
        >>> operator = GitOperator(dry_run=True)
        >>> if operator.is_available():
        ...     operator.set_global_config("user.name", "Ada")
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the operator.

        Args:
            dry_run: If True, only simulate state-changing commands.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if operator is in dry-run mode."""
        return self._dry_run

    @property
    @abstractmethod
    def executable(self) -> str:
        """Return the name of the wrapped command-line tool."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the tool can be used on this system.

        Returns:
            True if the tool is usable, False otherwise.
        """

    def require_available(self) -> None:
        """Raise if the tool cannot be used.

        Raises:
            RuntimeError: If the tool is not available.
        """
        if not self.is_available():
            msg = f"{self.executable} is not available on this system"
            raise RuntimeError(msg)
