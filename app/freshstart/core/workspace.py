"""Workspace path validation.

The workspace is the directory repositories are cloned into. A path is
refused when it contains characters no common filesystem accepts, is a
bare drive root, or lies inside a system directory. Refused paths fall
back to the default workspace.

Checks work on strings so that Windows paths are recognised on any
host.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from freshstart.core.paths import ensure_dir
from freshstart.core.settings import DEFAULT_SYSTEM_PREFIXES

logger = logging.getLogger(__name__)

_INVALID_CHARS = frozenset('<>"|?*')
_DRIVE_ABSOLUTE = re.compile(r"^[A-Za-z]:[\\/]")
_DRIVE_ROOT = re.compile(r"^[A-Za-z]:[\\/]?$")


@dataclass(frozen=True, slots=True)
class WorkspaceCheck:
    """Outcome of validating a requested workspace.

    Attributes:
        path: Workspace to use (the default if the request was rejected).
        accepted: Whether the requested path was used.
        reason: Why the request was rejected.
    """

    path: Path
    accepted: bool
    reason: str | None = None


def _normalise(path: str) -> str:
    """Return a case-folded, forward-slash form without a trailing slash."""
    text = path.replace("\\", "/").casefold()
    return text.rstrip("/") or "/"


def make_absolute(raw: str) -> str:
    """Convert a user-supplied path to absolute form.

    Windows drive paths are kept as given; anything else is expanded
    (``~``) and anchored to the current directory.
    """
    if _DRIVE_ABSOLUTE.match(raw) or _DRIVE_ROOT.match(raw):
        return raw
    return str(Path(raw).expanduser().absolute())


def has_invalid_chars(path: str) -> bool:
    """Check for characters that are invalid in file names.

    A colon is only valid as the drive separator at index 1.
    """
    for index, char in enumerate(path):
        if char in _INVALID_CHARS or ord(char) < 32:
            return True
        if char == ":" and not (index == 1 and path[0].isalpha()):
            return True
    return False


def is_drive_root(path: str) -> bool:
    """Check if a path is a bare drive root such as ``C:\\`` or ``/``."""
    return bool(_DRIVE_ROOT.match(path)) or _normalise(path) == "/"


def system_prefix_for(path: str, prefixes: Iterable[str]) -> str | None:
    """Return the system directory containing ``path``, if any.

    Comparison is case-insensitive and respects path boundaries, so
    ``C:/Windows`` matches ``C:/windows/temp`` but not ``C:/WindowsApps``.
    """
    candidate = _normalise(path)
    for prefix in prefixes:
        normalised = _normalise(prefix)
        if candidate == normalised or candidate.startswith(normalised + "/"):
            return prefix
    return None


def validate_workspace(
    requested: str | Path | None,
    default: Path,
    *,
    system_prefixes: Iterable[str] = DEFAULT_SYSTEM_PREFIXES,
) -> WorkspaceCheck:
    """Validate a requested workspace, falling back to ``default``.

    Args:
        requested: User-supplied workspace. None means use the default.
        default: Workspace used when the request is missing or rejected.
        system_prefixes: Directories the workspace may not be placed under.

    Returns:
        WorkspaceCheck describing the workspace to use.
    """
    if requested is None or not str(requested).strip():
        return WorkspaceCheck(path=default, accepted=True)

    raw = str(requested).strip()
    absolute = make_absolute(raw)

    reason: str | None = None
    if has_invalid_chars(absolute):
        reason = f"'{raw}' contains characters that are not valid in a path"
    elif is_drive_root(absolute):
        reason = f"'{raw}' is a drive root"
    else:
        prefix = system_prefix_for(absolute, system_prefixes)
        if prefix is not None:
            reason = f"'{raw}' is inside system directory {prefix}"

    if reason is not None:
        logger.info("Rejected workspace %s: %s", raw, reason)
        return WorkspaceCheck(path=default, accepted=False, reason=reason)

    return WorkspaceCheck(path=Path(absolute), accepted=True)


def ensure_workspace(path: Path) -> Path:
    """Create the workspace directory if it is missing.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return ensure_dir(path, "workspace")
