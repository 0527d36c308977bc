"""brew-recents - recently added and updated Homebrew packages.

Lists formulae and casks that were added or modified in the Homebrew
repositories during the last N days, highlighting packages that are
already installed or were looked up before.
"""

__version__ = "0.1.0"
