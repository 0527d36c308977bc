"""Unit tests for BrewScanner.

Tests for tap repository lookup and installed package listing.
"""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest
from brewrecents.core.errors import PrerequisiteMissingError, RetrievalError
from brewrecents.scanners.brew import BrewScanner
from brewrecents.utils.shell import CommandResult


class TestBrewScanner:
    """Tests for BrewScanner class."""

    @pytest.fixture
    def scanner(self) -> BrewScanner:
        """Create BrewScanner instance."""
        return BrewScanner()

    def test_tool_is_brew(self, scanner: BrewScanner) -> None:
        """Scanner depends on brew."""
        assert scanner.tool == "brew"

    def test_is_available(self, scanner: BrewScanner) -> None:
        """is_available reflects whether brew is on the PATH."""
        with patch("brewrecents.scanners.base.command_exists", return_value=True):
            assert scanner.is_available() is True
        with patch("brewrecents.scanners.base.command_exists", return_value=False):
            assert scanner.is_available() is False

    def test_require_raises_when_missing(self, scanner: BrewScanner) -> None:
        """require raises PrerequisiteMissingError naming the tool."""
        with (
            patch("brewrecents.scanners.base.command_exists", return_value=False),
            pytest.raises(PrerequisiteMissingError, match="brew"),
        ):
            scanner.require()

    def test_repo_path(self, scanner: BrewScanner) -> None:
        """repo_path returns the stripped path reported by brew."""
        with patch("brewrecents.scanners.brew.run_command") as mock_run:
            mock_run.return_value = CommandResult(
                stdout="/opt/homebrew/Library/Taps/homebrew/homebrew-core\n",
                stderr="",
                returncode=0,
            )
            path = scanner.repo_path("homebrew/core")

        assert path == Path("/opt/homebrew/Library/Taps/homebrew/homebrew-core")
        assert mock_run.call_args[0][0] == ["brew", "--repo", "homebrew/core"]

    def test_repo_path_failure(self, scanner: BrewScanner) -> None:
        """repo_path raises RetrievalError when brew fails."""
        with patch("brewrecents.scanners.brew.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout="", stderr="Error: boom", returncode=1)
            with pytest.raises(RetrievalError, match="boom"):
                scanner.repo_path("homebrew/cask")

    def test_repo_path_empty_output(self, scanner: BrewScanner) -> None:
        """repo_path raises RetrievalError when brew prints nothing."""
        with patch("brewrecents.scanners.brew.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout="\n", stderr="", returncode=0)
            with pytest.raises(RetrievalError):
                scanner.repo_path("homebrew/core")

    def test_repo_path_timeout(self, scanner: BrewScanner) -> None:
        """repo_path wraps subprocess errors in RetrievalError."""
        with patch("brewrecents.scanners.brew.run_command") as mock_run:
            mock_run.side_effect = subprocess.TimeoutExpired(cmd="brew", timeout=60)
            with pytest.raises(RetrievalError):
                scanner.repo_path("homebrew/core")

    def test_installed_packages(self, scanner: BrewScanner, mock_brew_list_output: str) -> None:
        """installed_packages parses one name per line."""
        with patch("brewrecents.scanners.brew.run_command") as mock_run:
            mock_run.return_value = CommandResult(
                stdout=mock_brew_list_output, stderr="", returncode=0
            )
            installed = scanner.installed_packages()

        assert installed == {"abc", "git", "firefox"}

    def test_installed_packages_failure_is_empty(self, scanner: BrewScanner) -> None:
        """A failing brew list yields an empty set."""
        with patch("brewrecents.scanners.brew.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout="", stderr="err", returncode=1)
            assert scanner.installed_packages() == set()

    def test_installed_packages_missing_binary(self, scanner: BrewScanner) -> None:
        """A missing brew binary yields an empty set."""
        with patch("brewrecents.scanners.brew.run_command") as mock_run:
            mock_run.side_effect = FileNotFoundError("brew")
            assert scanner.installed_packages() == set()
