"""Git history scanner implementation.

Lists package definition files added or modified in a tap repository
during the last N days.
"""

import logging
import re
import subprocess
from pathlib import Path

from brewrecents.core.errors import RetrievalError
from brewrecents.scanners.base import Scanner
from brewrecents.utils.shell import run_command

logger = logging.getLogger(__name__)


class GitChangeScanner(Scanner):
    """Scanner for changed package definitions in a git repository."""

    @property
    def tool(self) -> str:
        """Return git as the required executable."""
        return "git"

    def get_raw_changes(
        self,
        repo_dir: Path,
        days: int,
        change_filter: str,
        path_prefix: str,
    ) -> list[str]:
        """List changed package definition files.

        Args:
            repo_dir: Local repository of the tap.
            days: Change window in days.
            change_filter: git diff filter, "A" (added) or "M" (modified).
            path_prefix: Directory of the definitions, e.g. "Formula/".

        Returns:
            Repository-relative paths of matching ``.rb`` files, in log
            order, duplicates included.

        Raises:
            RetrievalError: If git cannot be run or fails.
        """
        args = [
            "git",
            "-C",
            str(repo_dir),
            "log",
            f"--diff-filter={change_filter}",
            f"--since={days} days ago",
            "--name-only",
            "--pretty=format:",
            "--",
            path_prefix,
        ]
        logger.debug("Running: %s", " ".join(args))

        try:
            result = run_command(args, timeout=self.timeout)
        except (OSError, subprocess.SubprocessError) as e:
            msg = f"git log failed in {repo_dir}: {e}"
            raise RetrievalError(msg) from e

        if not result.success:
            msg = f"git log failed in {repo_dir}: {result.stderr.strip() or 'unknown error'}"
            raise RetrievalError(msg)

        pattern = re.compile(rf"^{re.escape(path_prefix)}.*\.rb$")
        return [line for line in result.stdout.splitlines() if pattern.match(line)]
