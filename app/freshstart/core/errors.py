"""Exception hierarchy for freshstart."""


class FreshstartError(Exception):
    """Base exception for freshstart errors."""


class SettingsError(FreshstartError):
    """Raised when the settings file content is invalid."""


class SettingsParseError(SettingsError):
    """Raised when the settings file is not valid TOML."""
