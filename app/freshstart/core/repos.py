"""Repository URL checks and naming."""

import re

# Accepted clone URL shapes
REPO_URL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^https://[^\s/]+/\S+\.git$"),
    re.compile(r"^git@[^\s:]+:\S+\.git$"),
    re.compile(r"^https://github\.com/[^\s/]+/[^\s/]+/?$"),
)


def is_valid_repo_url(url: str) -> bool:
    """Check if a URL has one of the accepted clone URL shapes.

    Accepts ``https://host/path.git``, ``git@host:path.git`` and bare
    ``https://github.com/owner/repo`` URLs.
    """
    return any(pattern.match(url) for pattern in REPO_URL_PATTERNS)


def derive_repo_name(url: str) -> str:
    """Return the directory name ``git clone`` creates for ``url``.

    Example:
        >>> derive_repo_name("https://example.com/org/my-repo.git")
        'my-repo'
        >>> derive_repo_name("git@github.com:org/tool.git")
        'tool'
    """
    last = re.split(r"[/:]", url.rstrip("/"))[-1]
    if last.endswith(".git"):
        last = last[: -len(".git")]
    return last
