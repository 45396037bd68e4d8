"""Line-oriented configuration file parsing.

All three configuration files share one layout: UTF-8 text, one record
per line, blank lines and ``#`` comments ignored, two fields separated
by a file-specific delimiter::

    # apps.txt
    Visual Studio Code | Microsoft.VisualStudioCode

    # git-config.txt
    user.name = Ada Lovelace

    # repos.txt
    https://github.com/me/fork.git|https://github.com/them/project.git

Parsing is pure (text in, records and diagnostics out); only
:func:`read_config_file` touches the filesystem.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TypeVar

from freshstart.models.entries import (
    AppEntry,
    GitSetting,
    ParseDiagnostic,
    ParseResult,
    RepoRecord,
)
from freshstart.utils.formatting import print_warning

logger = logging.getLogger(__name__)

T = TypeVar("T")

APP_DELIMITER = "|"
GIT_DELIMITER = "="
REPO_DELIMITER = "|"

COMMENT_PREFIX = "#"


def iter_content_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, stripped_line)`` for non-blank, non-comment lines."""
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        yield number, line


def split_fields(line: str, delimiter: str) -> tuple[str, str | None]:
    """Split a line on the first delimiter into at most two stripped fields.

    Returns:
        ``(first, second)``; ``second`` is None when the delimiter is absent.
    """
    first, sep, second = line.partition(delimiter)
    if not sep:
        return first.strip(), None
    return first.strip(), second.strip()


def parse_records(
    text: str,
    delimiter: str,
    factory: Callable[[str, str], T],
    *,
    second_optional: bool = False,
) -> ParseResult[T]:
    """Parse delimited records from configuration text.

    Args:
        text: Raw file content.
        delimiter: Field separator.
        factory: Builds a record from the two fields.
        second_optional: Accept lines without a second field, passing ``""``.

    Returns:
        ParseResult with records in file order and one diagnostic per rejected line.
    """
    result: ParseResult[T] = ParseResult()
    for number, line in iter_content_lines(text):
        first, second = split_fields(line, delimiter)
        if second is None and not second_optional:
            result.diagnostics.append(
                ParseDiagnostic(number, line, f"missing '{delimiter}' separator")
            )
            continue
        if not first or (not second and not second_optional):
            result.diagnostics.append(ParseDiagnostic(number, line, "empty field"))
            continue
        result.records.append(factory(first, second or ""))
    return result


def parse_app_list(text: str) -> ParseResult[AppEntry]:
    """Parse ``Display Name | package-id`` lines."""
    return parse_records(text, APP_DELIMITER, AppEntry)


def parse_git_settings(text: str) -> ParseResult[GitSetting]:
    """Parse ``key = value`` lines.

    Only the first ``=`` separates, so values may contain ``=``.
    """
    return parse_records(text, GIT_DELIMITER, GitSetting)


def parse_repo_list(text: str) -> ParseResult[RepoRecord]:
    """Parse ``repo_url[|upstream_url]`` lines."""
    return parse_records(
        text,
        REPO_DELIMITER,
        lambda url, upstream: RepoRecord(url=url, upstream=upstream or None),
        second_optional=True,
    )


def read_config_file(
    path: Path,
    parser: Callable[[str], ParseResult[T]],
    *,
    label: str = "config file",
) -> ParseResult[T]:
    """Read and parse a configuration file, reporting problems as warnings.

    A missing or unreadable file is not an error: a warning is printed and
    an empty result returned. Each rejected line is reported as an invalid
    entry.

    Args:
        path: File to read.
        parser: One of the ``parse_*`` functions.
        label: Human-readable file description for messages.

    Returns:
        ParseResult from ``parser``.
    """
    if not path.is_file():
        print_warning(f"{label.capitalize()} not found: {path}")
        return ParseResult()

    # utf-8-sig tolerates the BOM some Windows editors write
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        print_warning(f"Cannot read {label} {path}: {e}")
        return ParseResult()
    result = parser(text)

    for diagnostic in result.diagnostics:
        print_warning(f"Invalid entry in {path.name}, {diagnostic}")

    logger.debug(
        "Read %d record(s) and %d invalid line(s) from %s",
        len(result.records),
        len(result.diagnostics),
        path,
    )
    return result
