"""Global Git configuration phase."""

import logging

from freshstart.core.config_reader import parse_git_settings, read_config_file
from freshstart.core.context import RunContext
from freshstart.core.paths import get_git_config_path
from freshstart.models.results import GitConfigSummary, GitSettingResult
from freshstart.operators.git import GitOperator
from freshstart.utils.formatting import print_warning

logger = logging.getLogger(__name__)


def apply_git_settings(context: RunContext, git: GitOperator) -> GitConfigSummary:
    """Apply every setting in ``git-config.txt`` as global configuration.

    A failing key is recorded and the remaining keys are still applied.

    Args:
        context: Run context (config directory).
        git: Git operator.

    Returns:
        GitConfigSummary; ``skipped_reason`` is set when git is missing.
    """
    if not git.is_available():
        print_warning("git is not available, skipping Git configuration.")
        return GitConfigSummary(skipped_reason="git not available")

    parsed = read_config_file(
        get_git_config_path(context.config_dir), parse_git_settings, label="Git settings file"
    )
    summary = GitConfigSummary(invalid_entries=len(parsed.diagnostics))

    for setting in parsed.records:
        try:
            result = git.set_global_config(setting.key, setting.value)
        except OSError as e:
            summary.results.append(GitSettingResult(setting, success=False, error=str(e)))
            continue

        if result.success:
            summary.results.append(GitSettingResult(setting, success=True))
        else:
            error = result.diagnostic or f"exit code {result.returncode}"
            logger.warning("Failed to set %s: %s", setting.key, error)
            summary.results.append(GitSettingResult(setting, success=False, error=error))

    return summary
