"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from freshstart.core.paths import (
    APP_NAME,
    CONFIG_DIR_ENV,
    ensure_dir,
    get_apps_path,
    get_config_dir,
    get_default_export_path,
    get_default_workspace,
    get_git_config_path,
    get_repos_path,
    get_settings_path,
    resolve_relative_to,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when nothing is set."""
        with patch.dict(os.environ, {}, clear=True):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}, clear=True):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_override_wins_over_xdg(self, tmp_path: Path) -> None:
        env = {"XDG_CONFIG_HOME": str(tmp_path / "xdg"), CONFIG_DIR_ENV: str(tmp_path / "dots")}
        with patch.dict(os.environ, env, clear=True):
            result = get_config_dir()

        assert result == tmp_path / "dots"


class TestConfigFilePaths:
    """Tests for the per-file path helpers."""

    @pytest.mark.parametrize(
        ("getter", "filename"),
        [
            (get_apps_path, "apps.txt"),
            (get_git_config_path, "git-config.txt"),
            (get_repos_path, "repos.txt"),
            (get_settings_path, "config.toml"),
            (get_default_export_path, "winget-export.json"),
        ],
    )
    def test_file_in_given_dir(self, getter, filename: str, tmp_path: Path) -> None:
        assert getter(tmp_path) == tmp_path / filename

    def test_defaults_to_config_dir(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {CONFIG_DIR_ENV: str(tmp_path)}, clear=True):
            assert get_apps_path() == tmp_path / "apps.txt"

    def test_default_workspace(self) -> None:
        assert get_default_workspace() == Path.home() / "Projects"


class TestResolveRelativeTo:
    """Tests for resolve_relative_to."""

    def test_relative_path_anchored(self, tmp_path: Path) -> None:
        assert resolve_relative_to(Path("export.json"), tmp_path) == tmp_path / "export.json"

    def test_absolute_path_unchanged(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "export.json"

        assert resolve_relative_to(target, Path("/unused")) == target


class TestEnsureDir:
    """Tests for ensure_dir."""

    def test_creates_nested_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b"

        assert ensure_dir(target, "test") == target
        assert target.is_dir()

    def test_existing_directory_ok(self, tmp_path: Path) -> None:
        assert ensure_dir(tmp_path, "test") == tmp_path

    def test_permission_error_raises_runtime_error(self, tmp_path: Path) -> None:
        with (
            patch.object(Path, "mkdir", side_effect=PermissionError("denied")),
            pytest.raises(RuntimeError, match="Permission denied"),
        ):
            ensure_dir(tmp_path / "x", "config")
