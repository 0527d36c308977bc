"""Utility modules for brew-recents.

This module exports commonly used utility functions.
"""

from brewrecents.utils.ansi import strip_ansi, visible_length
from brewrecents.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from brewrecents.utils.shell import CommandResult, command_exists, run_command
from brewrecents.utils.terminal import get_output_width

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "get_output_width",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "strip_ansi",
    "visible_length",
]
