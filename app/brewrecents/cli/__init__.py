"""CLI package for brew-recents.

This package contains the Typer application and all subcommands.
"""

from brewrecents.cli.main import app

__all__ = ["app"]
