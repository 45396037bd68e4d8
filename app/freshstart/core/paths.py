"""Path management for freshstart.

Configuration follows the XDG Base Directory Specification:

- Config: ``$XDG_CONFIG_HOME/freshstart/`` (default ``~/.config/freshstart/``)

``FRESHSTART_CONFIG_DIR`` overrides the whole directory, which is handy
when the config files live next to a dotfiles checkout.
"""

import os
from pathlib import Path

APP_NAME = "freshstart"

CONFIG_DIR_ENV = "FRESHSTART_CONFIG_DIR"

APPS_FILENAME = "apps.txt"
GIT_CONFIG_FILENAME = "git-config.txt"
REPOS_FILENAME = "repos.txt"
SETTINGS_FILENAME = "config.toml"
EXPORT_FILENAME = "winget-export.json"

# Subfolder of the home directory used as the default clone workspace
DEFAULT_WORKSPACE_NAME = "Projects"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        ``$FRESHSTART_CONFIG_DIR`` if set, else ``$XDG_CONFIG_HOME/freshstart``,
        else ``~/.config/freshstart``.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_apps_path(config_dir: Path | None = None) -> Path:
    """Get the application list path (``apps.txt``)."""
    return (config_dir or get_config_dir()) / APPS_FILENAME


def get_git_config_path(config_dir: Path | None = None) -> Path:
    """Get the Git settings path (``git-config.txt``)."""
    return (config_dir or get_config_dir()) / GIT_CONFIG_FILENAME


def get_repos_path(config_dir: Path | None = None) -> Path:
    """Get the repository list path (``repos.txt``)."""
    return (config_dir or get_config_dir()) / REPOS_FILENAME


def get_settings_path(config_dir: Path | None = None) -> Path:
    """Get the optional settings file path (``config.toml``)."""
    return (config_dir or get_config_dir()) / SETTINGS_FILENAME


def get_default_export_path(config_dir: Path | None = None) -> Path:
    """Get the default package export path."""
    return (config_dir or get_config_dir()) / EXPORT_FILENAME


def get_default_workspace() -> Path:
    """Get the default clone workspace.

    Returns:
        Path to ``~/Projects``.
    """
    return Path.home() / DEFAULT_WORKSPACE_NAME


def resolve_relative_to(path: Path, base_dir: Path) -> Path:
    """Resolve ``path`` against ``base_dir`` unless it is already absolute.

    Args:
        path: User-supplied path, possibly relative and possibly using ``~``.
        base_dir: Directory relative paths are anchored to.

    Returns:
        Absolute path.
    """
    path = path.expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
