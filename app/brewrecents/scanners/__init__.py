"""Scanners querying Homebrew, git and the shell history.

This module exports the scanner classes used to gather report input.
"""

from brewrecents.scanners.base import Scanner
from brewrecents.scanners.brew import BrewScanner
from brewrecents.scanners.git import GitChangeScanner
from brewrecents.scanners.history import HistoryScanner

__all__ = ["BrewScanner", "GitChangeScanner", "HistoryScanner", "Scanner"]
