"""Recents report implementation.

Gathers the changes of the last N days and prints the column report.
"""

import logging

import typer

from brewrecents.cli.display import print_failures, print_report, print_title
from brewrecents.core.collector import ChangeCollector
from brewrecents.core.config import RecentsConfig
from brewrecents.core.errors import PrerequisiteMissingError
from brewrecents.core.report import build_report
from brewrecents.core.style import build_style_options
from brewrecents.core.theme import get_theme_colors
from brewrecents.models.options import ReportOptions
from brewrecents.models.package import MembershipSets
from brewrecents.scanners.brew import BrewScanner
from brewrecents.scanners.git import GitChangeScanner
from brewrecents.scanners.history import HistoryScanner
from brewrecents.utils.formatting import entry_color_system, print_error
from brewrecents.utils.terminal import get_output_width

logger = logging.getLogger(__name__)


def load_memberships(
    brew: BrewScanner,
    history: HistoryScanner,
    *,
    plain: bool,
    hide_inspected: bool,
) -> MembershipSets:
    """Build the installed and looked-up sets for this run.

    Plain output never highlights, so installed packages are only listed
    when styling is on. Looked-up packages are still needed for hiding.

    Args:
        brew: Scanner listing installed packages.
        history: Scanner reading the shell history.
        plain: Plain output requested.
        hide_inspected: Hiding of looked-up packages requested.

    Returns:
        Frozen MembershipSets.
    """
    installed = set() if plain else brew.installed_packages()
    inspected = history.inspected_packages() if (hide_inspected or not plain) else set()
    return MembershipSets.create(installed, inspected)


def show_recents(
    config: RecentsConfig,
    report_options: ReportOptions,
    *,
    truncate_at: int,
    dim_inspected: bool,
    hide_inspected: bool,
    color: bool,
    plain: bool,
    width: int | None,
    quiet: bool = False,
) -> None:
    """Print the recents report.

    Args:
        config: Effective configuration.
        report_options: Sections to show and the time window.
        truncate_at: Maximum displayed length of a name.
        dim_inspected: Dim looked-up packages.
        hide_inspected: Hide looked-up packages.
        color: Emit escape sequences.
        plain: No styling, no indicator, no title or summary.
        width: Output width, None to detect it.
        quiet: Suppress the title and summary lines.

    Raises:
        typer.Exit: With code 1 if brew or git is missing.
    """
    brew = BrewScanner(timeout=config.git_timeout)
    git = GitChangeScanner(timeout=config.git_timeout)

    try:
        brew.require()
        git.require()
    except PrerequisiteMissingError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    output_width = width if width is not None else get_output_width()
    logger.debug("Output width: %d", output_width)

    memberships = load_memberships(
        brew,
        HistoryScanner(config.history_file),
        plain=plain,
        hide_inspected=hide_inspected,
    )

    collection = ChangeCollector(brew, git).collect(report_options)

    style_options = build_style_options(
        get_theme_colors(),
        truncate_at=truncate_at,
        dim_inspected=dim_inspected,
        hide_inspected=hide_inspected,
        plain=plain,
        color=color,
        indicator=config.installed_indicator,
        color_system=entry_color_system(),
    )
    report = build_report(
        collection.changes,
        memberships,
        report_options,
        style_options,
        output_width,
    )

    decorated = not (plain or quiet)
    if decorated:
        print_title(report_options.days)
    if not collection.success:
        print_failures(collection)
    print_report(report, decorated=decorated)
