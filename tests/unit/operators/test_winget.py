"""Unit tests for WingetOperator."""

from pathlib import Path
from unittest.mock import patch

import pytest
from freshstart.models.entries import AppEntry
from freshstart.models.results import InstallOutcome
from freshstart.operators.winget import WingetOperator, build_outcome_table
from freshstart.utils.shell import CommandResult

GIT = AppEntry(name="Git", package_id="Git.Git")


class TestBuildOutcomeTable:
    """Tests for build_outcome_table function."""

    def test_default_table(self) -> None:
        table = build_outcome_table()

        assert table == {
            0: InstallOutcome.SUCCESS,
            -1978335189: InstallOutcome.ALREADY_INSTALLED,
            -1978335212: InstallOutcome.NOT_FOUND,
        }


class TestWingetOperator:
    """Tests for WingetOperator class."""

    @pytest.fixture
    def operator(self) -> WingetOperator:
        return WingetOperator()

    def test_is_available(self, operator: WingetOperator) -> None:
        with patch("freshstart.operators.winget.command_exists", return_value=True):
            assert operator.is_available() is True
        with patch("freshstart.operators.winget.command_exists", return_value=False):
            assert operator.is_available() is False

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (0, InstallOutcome.SUCCESS),
            (-1978335189, InstallOutcome.ALREADY_INSTALLED),
            (-1978335212, InstallOutcome.NOT_FOUND),
            (1, InstallOutcome.WARNING),
            (-1978335215, InstallOutcome.WARNING),
        ],
    )
    def test_classify(self, operator: WingetOperator, code: int, expected: InstallOutcome) -> None:
        assert operator.classify(code) == expected

    def test_install_warning_keeps_diagnostic(self, operator: WingetOperator) -> None:
        with (
            patch("freshstart.operators.winget.command_exists", return_value=True),
            patch("freshstart.operators.winget.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout="", stderr="", returncode=5)
            result = operator.install(GIT)

        assert result.outcome == InstallOutcome.WARNING
        assert result.exit_code == 5
        assert result.error == "exit code 5"

    def test_install_success_has_no_error(self, operator: WingetOperator) -> None:
        with (
            patch("freshstart.operators.winget.command_exists", return_value=True),
            patch("freshstart.operators.winget.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(
                stdout="Successfully installed", stderr="", returncode=0
            )
            result = operator.install(GIT)

        assert result.outcome == InstallOutcome.SUCCESS
        assert result.error is None

    def test_install_command_line(self, operator: WingetOperator) -> None:
        with (
            patch("freshstart.operators.winget.command_exists", return_value=True),
            patch("freshstart.operators.winget.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout="", stderr="", returncode=0)
            operator.install(GIT)

        assert mock_run.call_args[0][0] == [
            "winget",
            "install",
            "--id",
            "Git.Git",
            "--exact",
            "--silent",
            "--accept-package-agreements",
            "--accept-source-agreements",
        ]

    def test_install_os_error_is_warning(self, operator: WingetOperator) -> None:
        with (
            patch("freshstart.operators.winget.command_exists", return_value=True),
            patch("freshstart.operators.winget.run_command", side_effect=OSError("access denied")),
        ):
            result = operator.install(GIT)

        assert result.outcome == InstallOutcome.WARNING
        assert result.error == "access denied"

    def test_install_dry_run(self) -> None:
        operator = WingetOperator(dry_run=True)

        with (
            patch("freshstart.operators.winget.command_exists", return_value=True),
            patch("freshstart.operators.winget.run_command") as mock_run,
        ):
            result = operator.install(GIT)

        mock_run.assert_not_called()
        assert result.dry_run is True
        assert result.outcome == InstallOutcome.SUCCESS

    def test_install_raises_when_unavailable(self, operator: WingetOperator) -> None:
        with (
            patch("freshstart.operators.winget.command_exists", return_value=False),
            pytest.raises(RuntimeError, match="winget is not available"),
        ):
            operator.install(GIT)

    def test_import_dry_run(self, tmp_path: Path) -> None:
        operator = WingetOperator(dry_run=True)

        with (
            patch("freshstart.operators.winget.command_exists", return_value=True),
            patch("freshstart.operators.winget.run_command") as mock_run,
        ):
            result = operator.import_packages(tmp_path / "export.json")

        mock_run.assert_not_called()
        assert result.success is True

    def test_export_runs_even_in_dry_run(self, tmp_path: Path) -> None:
        """Exporting only writes our own file, so dry-run does not suppress it."""
        operator = WingetOperator(dry_run=True)

        with (
            patch("freshstart.operators.winget.command_exists", return_value=True),
            patch("freshstart.operators.winget.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout="", stderr="", returncode=0)
            operator.export(tmp_path / "export.json")

        mock_run.assert_called_once()

    @pytest.mark.parametrize("method", ["export", "import_packages"])
    def test_launch_failure_is_failed_result(
        self, operator: WingetOperator, method: str, tmp_path: Path
    ) -> None:
        with (
            patch("freshstart.operators.winget.command_exists", return_value=True),
            patch("freshstart.operators.winget.run_command", side_effect=OSError("access denied")),
        ):
            result = getattr(operator, method)(tmp_path / "export.json")

        assert result.success is False
        assert result.diagnostic == "access denied"
