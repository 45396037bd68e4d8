"""Shell execution utilities.

Provides subprocess execution with captured output.
"""

import shutil
import subprocess
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command, normalised to a signed 32-bit value.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0

    @property
    def diagnostic(self) -> str:
        """Return the most useful captured output for error reporting."""
        return self.stderr.strip() or self.stdout.strip()


def to_signed_exit_code(code: int) -> int:
    """Convert an unsigned 32-bit exit status to its signed value.

    Windows reports HRESULT-style exit codes (e.g. ``0x8A150014``) as
    unsigned integers, while package managers document them as negative
    numbers.

    Args:
        code: Raw exit code as returned by the operating system.

    Returns:
        Signed exit code.
    """
    if 0x80000000 <= code <= 0xFFFFFFFF:
        return code - 0x100000000
    return code


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = None,
    cwd: str | None = None,
) -> CommandResult:
    """Execute a command and return the result.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait for command. None waits forever.
        cwd: Working directory for the command. If None, uses current directory.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=check,
        timeout=timeout,
        cwd=cwd,
    )
    return CommandResult(
        stdout=result.stdout or "",
        stderr=result.stderr or "",
        returncode=to_signed_exit_code(result.returncode),
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None
