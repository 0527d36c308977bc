"""Shell history scanner implementation.

Finds packages the user already looked up with ``brew info`` (or the
common ``bi`` alias).
"""

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)


class HistoryScanner:
    """Scanner for ``brew info`` lookups in a shell history file.

    Works for plain and zsh extended history formats
    (``: 1700000000:0;brew info wget``).
    """

    _LOOKUP_PATTERN = re.compile(r"(?:\bbi|brew info) ([^ \n;|&]+)")

    def __init__(self, history_file: Path) -> None:
        self.history_file = history_file

    def inspected_packages(self) -> set[str]:
        """Get the names of all looked-up packages.

        A missing or unreadable history file yields an empty set.

        Returns:
            Set of package names.
        """
        try:
            content = self.history_file.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            logger.debug("No shell history at %s", self.history_file)
            return set()
        except OSError as e:
            logger.warning("Failed to read shell history %s: %s", self.history_file, e)
            return set()

        names = {
            match.group(1)
            for match in self._LOOKUP_PATTERN.finditer(content)
            if not match.group(1).startswith("-")
        }
        logger.debug("Cached %d looked-up packages", len(names))
        return names
