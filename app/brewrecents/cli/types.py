"""Shared helpers for resolving CLI selections.

Turns the catalog and category flags into independent booleans.
"""


def resolve_pair(
    first: bool,
    second: bool,
    only_first: bool,
    only_second: bool,
) -> tuple[bool, bool]:
    """Resolve a pair of show flags and their ``--only-*`` overrides.

    ``--only-*`` flags replace the plain flags of their pair. Passing both
    ``--only-*`` flags of a pair enables both, regardless of order.

    Args:
        first: Plain flag of the first member (e.g. ``--formula``).
        second: Plain flag of the second member (e.g. ``--cask``).
        only_first: ``--only-*`` flag of the first member.
        only_second: ``--only-*`` flag of the second member.

    Returns:
        Tuple of (show_first, show_second).
    """
    if only_first or only_second:
        return only_first, only_second
    return first, second
