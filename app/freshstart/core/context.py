"""Process-wide state owned by a single run.

The current working directory and the session ``PATH`` are the only
mutable process state the setup phases touch. :class:`RunContext`
keeps both behind explicit methods so every change is scoped and
reversible.
"""

import logging
import os
from collections.abc import Iterable, Iterator, MutableMapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from freshstart.core.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """Configuration and process state shared by the phases of one command.

    Attributes:
        config_dir: Directory holding the configuration files.
        settings: Loaded user settings.
        dry_run: If True, external commands that change state are not run.
        environ: Environment mapping whose ``PATH`` is augmented.
    """

    config_dir: Path
    settings: Settings = field(default_factory=Settings)
    dry_run: bool = False
    environ: MutableMapping[str, str] = field(default_factory=lambda: os.environ)

    @contextmanager
    def working_directory(self, path: Path) -> Iterator[Path]:
        """Change into ``path`` for the duration of the block.

        The previous directory is restored on exit, including when the
        block raises.
        """
        original = Path.cwd()
        os.chdir(path)
        logger.debug("Changed directory to %s", path)
        try:
            yield path
        finally:
            os.chdir(original)
            logger.debug("Restored directory to %s", original)

    def prepend_to_path(self, directories: Iterable[str]) -> list[str]:
        """Prepend existing directories to the session ``PATH``.

        Directories that don't exist or are already present are skipped.
        The change lives only in :attr:`environ` and is never persisted.

        Args:
            directories: Candidate directories; ``~`` and environment
                variables are expanded.

        Returns:
            Directories actually added, in order.
        """
        current = self.environ.get("PATH", "")
        entries = [e for e in current.split(os.pathsep) if e]
        known = {os.path.normcase(e) for e in entries}

        added: list[str] = []
        for raw in directories:
            candidate = os.path.expandvars(os.path.expanduser(raw))
            if os.path.normcase(candidate) in known or not os.path.isdir(candidate):
                continue
            added.append(candidate)
            known.add(os.path.normcase(candidate))

        if added:
            self.environ["PATH"] = os.pathsep.join([*added, *entries])
            logger.info("Added to session PATH: %s", ", ".join(added))
        return added
