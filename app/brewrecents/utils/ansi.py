"""ANSI escape sequence helpers.

Styled entries carry SGR sequences (``ESC [ ... m``) that occupy no
columns on screen, so column alignment works on the stripped text.
"""

import re

# SGR sequences only: ESC [ <params> m
ANSI_SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove all SGR escape sequences from a string.

    Args:
        text: String that may contain escape sequences.

    Returns:
        The string with every escape sequence removed.
    """
    return ANSI_SGR_PATTERN.sub("", text)


def visible_length(text: str) -> int:
    """Return the printable length of a styled string.

    Args:
        text: String that may contain escape sequences.

    Returns:
        Number of characters left after stripping escape sequences.
    """
    return len(strip_ansi(text))
