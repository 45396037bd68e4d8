"""Optional user settings.

Settings are read from ``config.toml`` in the config directory. Every
key is optional; a missing file means all defaults apply.

Example::

    workspace = "D:/src"
    already_installed_codes = [-1978335189]
    system_prefixes = ["C:/Windows", "C:/Program Files"]
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from freshstart.core.errors import SettingsError, SettingsParseError
from freshstart.core.paths import get_settings_path

logger = logging.getLogger(__name__)

# winget 1.x: APPINSTALLER_CLI_ERROR_UPDATE_NOT_APPLICABLE (0x8A15002B)
WINGET_ALREADY_INSTALLED = -1978335189
# winget 1.x: APPINSTALLER_CLI_ERROR_NO_APPLICATIONS_FOUND (0x8A150014)
WINGET_NO_PACKAGE_FOUND = -1978335212

DEFAULT_SYSTEM_PREFIXES: tuple[str, ...] = (
    "C:\\Windows",
    "C:\\Program Files",
    "C:\\Program Files (x86)",
    "C:\\ProgramData",
    "C:\\System Volume Information",
    "C:\\$Recycle.Bin",
    "C:\\Recovery",
    "/bin",
    "/boot",
    "/dev",
    "/etc",
    "/lib",
    "/proc",
    "/sbin",
    "/sys",
    "/usr",
    "/var",
)

DEFAULT_GIT_SEARCH_DIRS: tuple[str, ...] = (
    "C:\\Program Files\\Git\\cmd",
    "C:\\Program Files (x86)\\Git\\cmd",
    "~\\AppData\\Local\\Programs\\Git\\cmd",
)


class Settings(BaseModel):
    """Tunable behaviour of the prepare and setup commands.

    Attributes:
        workspace: Default clone workspace (None = ``~/Projects``).
        export_path: Default export file (None = ``winget-export.json`` in the config dir).
        already_installed_codes: Package manager exit codes meaning "already installed".
        not_found_codes: Package manager exit codes meaning "no matching package".
        system_prefixes: Directories a workspace may never be placed under.
        git_search_dirs: Git install locations added to PATH after installing apps.
    """

    model_config = ConfigDict(extra="forbid")

    workspace: Annotated[
        Path | None,
        Field(description="Default clone workspace"),
    ] = None
    export_path: Annotated[
        Path | None,
        Field(description="Default export document path"),
    ] = None
    already_installed_codes: Annotated[
        list[int],
        Field(description="Exit codes classified as already installed"),
    ] = [WINGET_ALREADY_INSTALLED]
    not_found_codes: Annotated[
        list[int],
        Field(description="Exit codes classified as no matching package"),
    ] = [WINGET_NO_PACKAGE_FOUND]
    system_prefixes: Annotated[
        list[str],
        Field(description="Directories rejected as workspace locations"),
    ] = list(DEFAULT_SYSTEM_PREFIXES)
    git_search_dirs: Annotated[
        list[str],
        Field(description="Candidate Git installation directories"),
    ] = list(DEFAULT_GIT_SEARCH_DIRS)


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default location.

    Returns:
        Validated Settings. Defaults if the file does not exist.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings {settings_path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e
