"""Terminal size detection."""

import shutil

DEFAULT_OUTPUT_WIDTH = 80


def get_output_width() -> int:
    """Get the width available for the report.

    Honours the ``COLUMNS`` environment variable, then the size of the
    attached terminal.

    Returns:
        Output width in columns, 80 when it cannot be determined.
    """
    columns = shutil.get_terminal_size(fallback=(DEFAULT_OUTPUT_WIDTH, 24)).columns
    # get_terminal_size reports 0 for some pseudo terminals
    return columns if columns > 0 else DEFAULT_OUTPUT_WIDTH
