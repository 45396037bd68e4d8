"""Unit tests for user settings."""

from pathlib import Path

import pytest
from freshstart.core.errors import SettingsError, SettingsParseError
from freshstart.core.settings import (
    DEFAULT_SYSTEM_PREFIXES,
    WINGET_ALREADY_INSTALLED,
    WINGET_NO_PACKAGE_FOUND,
    Settings,
    load_settings,
)
from pydantic import ValidationError


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.workspace is None
        assert settings.export_path is None
        assert settings.already_installed_codes == [WINGET_ALREADY_INSTALLED]
        assert settings.not_found_codes == [WINGET_NO_PACKAGE_FOUND]
        assert settings.system_prefixes == list(DEFAULT_SYSTEM_PREFIXES)

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValidationError):
            Settings.model_validate({"workspce": "D:/src"})

    def test_defaults_are_not_shared(self) -> None:
        first = Settings()
        first.system_prefixes.append("/opt")

        assert "/opt" not in Settings().system_prefixes


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        assert load_settings(tmp_path / "config.toml") == Settings()

    def test_loads_values(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text(
            'workspace = "/home/me/src"\nalready_installed_codes = [-1978335189, -1978335135]\n',
            encoding="utf-8",
        )

        settings = load_settings(path)

        assert settings.workspace == Path("/home/me/src")
        assert settings.already_installed_codes == [-1978335189, -1978335135]

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("workspace = \n", encoding="utf-8")

        with pytest.raises(SettingsParseError, match="Invalid TOML"):
            load_settings(path)

    def test_invalid_schema(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('not_found_codes = "many"\n', encoding="utf-8")

        with pytest.raises(SettingsError, match="Invalid settings"):
            load_settings(path)
