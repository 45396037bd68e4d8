"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
from pathlib import Path

import pytest
from freshstart.core.context import RunContext
from freshstart.utils.shell import CommandResult


@pytest.fixture
def ok_result() -> CommandResult:
    """Successful command result with no output."""
    return CommandResult(stdout="", stderr="", returncode=0)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Empty configuration directory."""
    directory = tmp_path / "config"
    directory.mkdir()
    return directory


@pytest.fixture
def run_context(config_dir: Path) -> RunContext:
    """Run context with an isolated PATH mapping."""
    return RunContext(config_dir=config_dir, environ={"PATH": ""})


@pytest.fixture
def sample_apps_text() -> str:
    """apps.txt content with two valid lines and one malformed line."""
    return """# Development tools
Git | Git.Git

Visual Studio Code | Microsoft.VisualStudioCode
this line has no separator
"""


@pytest.fixture
def sample_export_document() -> dict[str, object]:
    """Export document with two sources and three packages."""
    return {
        "$schema": "https://aka.ms/winget-packages.schema.2.0.json",
        "CreationDate": "2026-10-01T09:00:00.000-00:00",
        "Sources": [
            {
                "SourceDetails": {
                    "Name": "winget",
                    "Identifier": "Microsoft.Winget.Source_8wekyb3d8bbwe",
                    "Argument": "https://cdn.winget.microsoft.com/cache",
                    "Type": "Microsoft.PreIndexed.Package",
                },
                "Packages": [
                    {"PackageIdentifier": "Git.Git"},
                    {"PackageIdentifier": "Microsoft.VisualStudioCode"},
                ],
            },
            {
                "SourceDetails": {"Name": "msstore"},
                "Packages": [{"PackageIdentifier": "9NBLGGH4NNS1"}],
            },
        ],
        "WinGetVersion": "1.9.25200",
    }


@pytest.fixture
def export_file(tmp_path: Path, sample_export_document: dict[str, object]) -> Path:
    """Export document written to disk."""
    path = tmp_path / "winget-export.json"
    path.write_text(json.dumps(sample_export_document), encoding="utf-8")
    return path
