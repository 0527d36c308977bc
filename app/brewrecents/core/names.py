"""Package name normalization.

Turns raw change identifiers such as ``Formula/f/foo.rb`` into bare
package names.
"""

import posixpath
from collections.abc import Iterable

DEFINITION_EXTENSION = ".rb"


def normalize_name(raw: str, prefix: str = "", extension: str = DEFINITION_EXTENSION) -> str:
    """Strip the path prefix and file extension from a raw identifier.

    Args:
        raw: Raw identifier, usually a repository-relative path.
        prefix: Leading path to strip (the basename is taken anyway).
        extension: File extension to strip.

    Returns:
        The bare package name.
    """
    name = raw.strip()
    if prefix and name.startswith(prefix):
        name = name[len(prefix) :]
    name = posixpath.basename(name)
    if extension and name.endswith(extension) and name != extension:
        name = name[: -len(extension)]
    return name


def normalize_names(
    raws: Iterable[str],
    prefix: str = "",
    extension: str = DEFINITION_EXTENSION,
) -> list[str]:
    """Normalize raw identifiers into a sorted list of unique names.

    Empty and whitespace-only lines are skipped.

    Args:
        raws: Raw identifiers in any order, duplicates allowed.
        prefix: Leading path to strip from each identifier.
        extension: File extension to strip from each identifier.

    Returns:
        Sorted, de-duplicated package names.
    """
    names = {normalize_name(raw, prefix, extension) for raw in raws if raw.strip()}
    names.discard("")
    return sorted(names)
