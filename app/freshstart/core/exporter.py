"""Package export.

Writes the package manager's snapshot of installed packages so it can
be replayed with ``freshstart setup --import-file`` after a reinstall.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from freshstart.core.paths import ensure_dir
from freshstart.models.export import ExportDocument
from freshstart.models.results import ExportSummary
from freshstart.operators.winget import WingetOperator

logger = logging.getLogger(__name__)


def load_export_document(path: Path) -> ExportDocument:
    """Parse an export document.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not a valid export document.
    """
    text = path.read_text(encoding="utf-8-sig")
    try:
        return ExportDocument.model_validate(json.loads(text))
    except ValidationError as e:
        raise ValueError(f"Not a package export document: {path}") from e


def count_exported_packages(path: Path) -> int | None:
    """Return the number of packages in an export document.

    Returns:
        Package count, or None when the document cannot be read or parsed.
    """
    try:
        return load_export_document(path).package_count
    except (OSError, ValueError) as e:
        logger.debug("Export summary unavailable for %s: %s", path, e)
        return None


def export_packages(operator: WingetOperator, output_path: Path) -> ExportSummary:
    """Export installed packages to ``output_path`` and count them.

    The export succeeding is independent of the count: a document that
    cannot be parsed afterwards still yields a successful summary with
    ``package_count`` set to None.

    Raises:
        RuntimeError: If the package manager or output directory is unavailable.
    """
    ensure_dir(output_path.parent, "export")

    result = operator.export(output_path)
    if not result.success:
        return ExportSummary(
            path=output_path,
            success=False,
            error=result.diagnostic or f"exit code {result.returncode}",
        )

    return ExportSummary(
        path=output_path,
        success=True,
        package_count=count_exported_packages(output_path),
    )
