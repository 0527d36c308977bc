"""Homebrew scanner implementation.

Resolves tap repositories and lists installed packages using the brew CLI.
"""

import logging
import subprocess
from pathlib import Path

from brewrecents.core.errors import RetrievalError
from brewrecents.scanners.base import Scanner
from brewrecents.utils.shell import run_command

logger = logging.getLogger(__name__)


class BrewScanner(Scanner):
    """Scanner for the local Homebrew installation."""

    @property
    def tool(self) -> str:
        """Return brew as the required executable."""
        return "brew"

    def repo_path(self, tap: str) -> Path:
        """Get the local git repository of a tap.

        Args:
            tap: Tap name, e.g. "homebrew/core".

        Returns:
            Path of the tap repository.

        Raises:
            RetrievalError: If brew fails or reports no path.
        """
        try:
            result = run_command(["brew", "--repo", tap], timeout=self.timeout)
        except (OSError, subprocess.SubprocessError) as e:
            msg = f"brew --repo {tap} failed: {e}"
            raise RetrievalError(msg) from e

        path = result.stdout.strip()
        if not result.success or not path:
            msg = f"brew --repo {tap} failed: {result.stderr.strip() or 'unknown error'}"
            raise RetrievalError(msg)

        logger.debug("Repository of %s: %s", tap, path)
        return Path(path)

    def installed_packages(self) -> set[str]:
        """Get the names of all installed formulae and casks.

        Failures are logged and yield an empty set, so the report still
        works without highlighting.

        Returns:
            Set of installed package names.
        """
        try:
            result = run_command(["brew", "list", "-1"], timeout=self.timeout)
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("brew list failed: %s", e)
            return set()

        if not result.success:
            logger.warning("brew list failed: %s", result.stderr.strip() or "unknown error")
            return set()

        installed = {line.strip() for line in result.stdout.splitlines() if line.strip()}
        logger.debug("Cached %d installed packages", len(installed))
        return installed
