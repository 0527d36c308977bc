"""Column layout of styled entries.

Entries are laid out row-major in a grid of uniform columns. Column width
comes from the longest visible entry of the whole report, so every section
of one run lines up.
"""

from collections.abc import Sequence

from brewrecents.models.report import StyledEntry

# Minimum number of spaces between two columns
COLUMN_GUTTER = 4


def column_width(max_visible_length: int) -> int:
    """Width of one column including the gutter."""
    return max_visible_length + COLUMN_GUTTER


def column_count(max_visible_length: int, output_width: int) -> int:
    """Number of columns that fit into the output width, at least one.

    Args:
        max_visible_length: Longest visible entry.
        output_width: Available width in columns.

    Returns:
        Column count, never less than 1.
    """
    return max(1, output_width // column_width(max_visible_length))


def layout_columns(
    entries: Sequence[StyledEntry],
    max_visible_length: int,
    output_width: int,
) -> list[str]:
    """Lay out entries into rows of uniform columns.

    Every entry except the last of its row is padded with spaces to the
    column width; the last one is not padded.

    Args:
        entries: Visible entries in display order.
        max_visible_length: Longest visible entry across the report.
        output_width: Available width in columns.

    Returns:
        One string per row, without trailing newline.
    """
    width = column_width(max_visible_length)
    cols = column_count(max_visible_length, output_width)

    rows: list[str] = []
    for start in range(0, len(entries), cols):
        row = entries[start : start + cols]
        parts: list[str] = []
        for index, entry in enumerate(row):
            parts.append(entry.display_text)
            if index < len(row) - 1:
                parts.append(" " * max(0, width - entry.visible_length))
        rows.append("".join(parts))
    return rows


def render_columns(
    entries: Sequence[StyledEntry],
    max_visible_length: int,
    output_width: int,
) -> str:
    """Render entries as column text, each row terminated by a newline.

    Returns:
        The rendered rows, or an empty string for no entries.
    """
    return "".join(
        f"{row}\n" for row in layout_columns(entries, max_visible_length, output_width)
    )
