"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def mock_git_new_formulae_output() -> str:
    """Sample ``git log --name-only`` output for added formulae."""
    return """Formula/x/xyz.rb

Formula/a/abc.rb
Formula/a/abc.rb

Formula/l/libfoo.rb
README.md
"""


@pytest.fixture
def mock_git_cask_output() -> str:
    """Sample ``git log --name-only`` output for modified casks."""
    return """Casks/f/firefox.rb
Casks/v/visual-studio-code.rb
Casks/f/firefox.rb
.github/workflows/ci.yml
"""


@pytest.fixture
def mock_brew_list_output() -> str:
    """Sample ``brew list -1`` output (formulae and casks)."""
    return """abc
git
firefox
"""


@pytest.fixture
def history_file(tmp_path: Path) -> Path:
    """zsh extended history with a few brew info lookups."""
    path = tmp_path / ".zsh_history"
    path.write_text(
        ": 1700000000:0;brew info libfoo\n"
        ": 1700000100:0;bi firefox\n"
        ": 1700000200:0;brew install wget\n"
        ": 1700000300:0;ls -la\n"
    )
    return path
