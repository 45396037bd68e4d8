"""Scanners for local development state."""

from freshstart.scanners.workspace import WorkspaceScanner

__all__ = ["WorkspaceScanner"]
