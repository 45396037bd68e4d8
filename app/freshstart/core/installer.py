"""Application installation phase.

Runs in exactly one of two modes:

- **import**: replay an export document with a single import command.
- **list**: install each entry of ``apps.txt`` one at a time.
"""

import logging
from pathlib import Path

from freshstart.core.config_reader import parse_app_list, read_config_file
from freshstart.core.context import RunContext
from freshstart.core.exporter import load_export_document
from freshstart.core.paths import get_apps_path, resolve_relative_to
from freshstart.models.results import InstallOutcome, InstallResult, InstallSummary
from freshstart.operators.winget import WingetOperator, build_outcome_table
from freshstart.utils.formatting import print_error, print_info, print_warning

logger = logging.getLogger(__name__)


def make_winget_operator(context: RunContext) -> WingetOperator:
    """Create a winget operator using the configured exit code table."""
    table = build_outcome_table(
        already_installed=context.settings.already_installed_codes,
        not_found=context.settings.not_found_codes,
    )
    return WingetOperator(dry_run=context.dry_run, outcome_table=table)


def install_applications(
    context: RunContext,
    operator: WingetOperator,
    import_file: Path | None = None,
) -> InstallSummary:
    """Install applications from an import file or the application list.

    Args:
        context: Run context (config directory, settings, PATH).
        operator: Package manager operator.
        import_file: Export document to replay. Selects import mode when given.

    Returns:
        InstallSummary; ``skipped_reason`` is set when nothing was attempted.
    """
    if not operator.is_available():
        print_warning("winget is not available, skipping application install.")
        return InstallSummary(skipped_reason="winget not available")

    if import_file is not None:
        summary = _import_mode(context, operator, import_file)
    else:
        summary = _list_mode(context, operator)

    if not summary.skipped and not context.dry_run:
        summary.path_additions = context.prepend_to_path(context.settings.git_search_dirs)
    return summary


def _import_mode(
    context: RunContext, operator: WingetOperator, import_file: Path
) -> InstallSummary:
    path = resolve_relative_to(import_file, context.config_dir)
    if not path.is_file():
        print_error(f"Import file not found: {path}")
        return InstallSummary(import_file=path, skipped_reason="import file not found")

    try:
        package_ids = load_export_document(path).package_ids()
    except (OSError, ValueError) as e:
        logger.debug("Could not list packages in %s: %s", path, e)
    else:
        print_info(f"Importing {len(package_ids)} package(s) from {path}")

    result = operator.import_packages(path)
    if result.success:
        return InstallSummary(import_file=path, import_succeeded=True)
    return InstallSummary(
        import_file=path,
        import_succeeded=False,
        import_error=result.diagnostic or f"exit code {result.returncode}",
    )


def _list_mode(context: RunContext, operator: WingetOperator) -> InstallSummary:
    apps_path = get_apps_path(context.config_dir)
    if not apps_path.is_file():
        print_warning(f"Application list not found: {apps_path}, skipping.")
        return InstallSummary(skipped_reason="application list not found")

    parsed = read_config_file(apps_path, parse_app_list, label="application list")
    summary = InstallSummary(invalid_entries=len(parsed.diagnostics))

    for entry in parsed.records:
        result: InstallResult = operator.install(entry)
        summary.results.append(result)
        if result.outcome == InstallOutcome.WARNING:
            logger.warning("Install of %s failed: %s", entry.package_id, result.error)

    return summary
