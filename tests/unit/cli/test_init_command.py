"""Unit tests for the init command and global options."""

from pathlib import Path

from freshstart import __version__
from freshstart.cli.main import app
from freshstart.core.config_reader import parse_app_list, parse_git_settings, parse_repo_list
from typer.testing import CliRunner

runner = CliRunner()


class TestInitCommand:
    """Tests for freshstart init."""

    def test_writes_templates(self, tmp_path: Path) -> None:
        target = tmp_path / "cfg"

        result = runner.invoke(app, ["init", "--config-dir", str(target)])

        assert result.exit_code == 0, result.output
        for name in ("apps.txt", "git-config.txt", "repos.txt"):
            assert (target / name).is_file()

    def test_templates_parse_cleanly(self, tmp_path: Path) -> None:
        runner.invoke(app, ["init", "--config-dir", str(tmp_path)])

        apps = parse_app_list((tmp_path / "apps.txt").read_text(encoding="utf-8"))
        git = parse_git_settings((tmp_path / "git-config.txt").read_text(encoding="utf-8"))
        repos = parse_repo_list((tmp_path / "repos.txt").read_text(encoding="utf-8"))

        assert apps.ok and git.ok and repos.ok
        assert len(apps.records) == 2
        assert repos.records == []

    def test_keeps_existing_files(self, tmp_path: Path) -> None:
        (tmp_path / "apps.txt").write_text("Mine | My.App\n", encoding="utf-8")

        runner.invoke(app, ["init", "--config-dir", str(tmp_path)])

        assert (tmp_path / "apps.txt").read_text(encoding="utf-8") == "Mine | My.App\n"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        (tmp_path / "apps.txt").write_text("Mine | My.App\n", encoding="utf-8")

        result = runner.invoke(app, ["init", "--force", "--config-dir", str(tmp_path)])

        assert result.exit_code == 0
        assert "Git.Git" in (tmp_path / "apps.txt").read_text(encoding="utf-8")


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])

        assert "prepare" in result.output
        assert "setup" in result.output
