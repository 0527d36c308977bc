"""Display helpers for the recents report.

Prints the report title, section failures, and the closing summary.
"""

import typer

from brewrecents.core.collector import CollectionResult
from brewrecents.core.report import render_report
from brewrecents.models.report import Report
from brewrecents.utils.formatting import console, print_info, print_warning


def print_title(days: int) -> None:
    """Print the report title line."""
    console.print(f"[bold_header]Recent Homebrew packages (last {days} days):[/]")


def print_failures(collection: CollectionResult) -> None:
    """Print a warning for every section whose retrieval failed."""
    for (catalog, category), message in collection.failures.items():
        print_warning(f"Could not list {category.value} {catalog.plural}: {message}")


def format_summary(report: Report) -> str:
    """Build the summary line of a report.

    Args:
        report: Assembled report.

    Returns:
        Summary text, e.g. "Showing 5 packages (new formulae: 2, new casks: 3)".
    """
    total = report.total_entries
    noun = "package" if total == 1 else "packages"
    parts = [
        f"{section.category.value} {section.catalog.plural}: {len(section)}"
        for section in report.sections
    ]
    return f"Showing {total} {noun} ({', '.join(parts)})"


def print_report(report: Report, *, decorated: bool = True) -> None:
    """Print a report.

    Rows carry pre-rendered escape sequences and are written with
    ``typer.echo``, which strips them when stdout is not a terminal.

    Args:
        report: Assembled report.
        decorated: Print the empty-report notice and the summary line.
    """
    if report.is_empty:
        if decorated:
            print_info("No recent packages found.")
        return

    typer.echo(render_report(report), nl=False)

    if decorated:
        console.print(f"\n[dim]{format_summary(report)}[/]")
