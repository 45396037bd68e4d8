"""Data models for freshstart.

This module exports the core data structures used throughout the application.
"""

from freshstart.models.entries import (
    AppEntry,
    GitSetting,
    ParseDiagnostic,
    ParseResult,
    RepoRecord,
)
from freshstart.models.export import ExportDocument, ExportPackage, ExportSource
from freshstart.models.results import (
    CloneOutcome,
    CloneResult,
    CloneSummary,
    ExportSummary,
    GitConfigSummary,
    GitSettingResult,
    InstallOutcome,
    InstallResult,
    InstallSummary,
    RepoStatus,
    ScannedRepo,
)

__all__ = [
    "AppEntry",
    "CloneOutcome",
    "CloneResult",
    "CloneSummary",
    "ExportDocument",
    "ExportPackage",
    "ExportSource",
    "ExportSummary",
    "GitConfigSummary",
    "GitSetting",
    "GitSettingResult",
    "InstallOutcome",
    "InstallResult",
    "InstallSummary",
    "ParseDiagnostic",
    "ParseResult",
    "RepoRecord",
    "RepoStatus",
    "ScannedRepo",
]
