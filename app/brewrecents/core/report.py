"""Report assembly.

Runs the per-section pipeline (normalize, classify, style) for every
enabled (catalog, category) pair, computes the shared column width, and
renders the sections in their fixed order.
"""

import logging
from collections.abc import Mapping, Sequence

from brewrecents.core.layout import render_columns
from brewrecents.core.names import normalize_names
from brewrecents.core.style import style_names
from brewrecents.models.options import ReportOptions, StyleOptions
from brewrecents.models.package import Catalog, ChangeCategory, MembershipSets
from brewrecents.models.report import LayoutConfiguration, Report, ReportSection

logger = logging.getLogger(__name__)

# Raw change identifiers per section
RawChanges = Mapping[tuple[Catalog, ChangeCategory], Sequence[str]]


def build_section(
    catalog: Catalog,
    category: ChangeCategory,
    raw_changes: Sequence[str],
    memberships: MembershipSets,
    style_options: StyleOptions,
) -> ReportSection:
    """Build one section from its raw change identifiers.

    Args:
        catalog: Catalog the changes come from.
        category: Kind of change.
        raw_changes: Raw identifiers, possibly unsorted with duplicates.
        memberships: Installed and looked-up package names.
        style_options: Styling options.

    Returns:
        ReportSection with the visible entries in name order.
    """
    names = normalize_names(raw_changes, prefix=catalog.path_prefix)
    entries = style_names(names, memberships, style_options)
    logger.debug(
        "%s %s: %d raw, %d unique, %d shown",
        category.value,
        catalog.plural,
        len(raw_changes),
        len(names),
        len(entries),
    )
    return ReportSection(catalog=catalog, category=category, entries=tuple(entries))


def build_report(
    changes: RawChanges,
    memberships: MembershipSets,
    report_options: ReportOptions,
    style_options: StyleOptions,
    output_width: int,
) -> Report:
    """Assemble the report for all enabled sections.

    The longest visible entry is taken over every section before any
    layout happens, so all sections share one column width.

    Args:
        changes: Raw change identifiers per (catalog, category). Missing
            keys are treated as no changes.
        memberships: Installed and looked-up package names.
        report_options: Which sections to include.
        style_options: Styling options.
        output_width: Available output width in columns.

    Returns:
        Report holding the non-empty sections in display order.
    """
    sections: list[ReportSection] = []
    for catalog, category in report_options.enabled_sections():
        section = build_section(
            catalog,
            category,
            changes.get((catalog, category), ()),
            memberships,
            style_options,
        )
        if section.entries:
            sections.append(section)

    global_max = max((section.max_visible_length for section in sections), default=0)
    logger.debug("Global max visible length: %d", global_max)

    layout = LayoutConfiguration(
        output_width=output_width,
        truncate_at=style_options.truncate_at,
        global_max_visible_length=global_max,
    )
    return Report(days=report_options.days, sections=tuple(sections), layout=layout)


def render_section(section: ReportSection, layout: LayoutConfiguration) -> str:
    """Render a section: blank line, header, then the column rows."""
    rows = render_columns(
        section.entries,
        layout.global_max_visible_length,
        layout.output_width,
    )
    return f"\n{section.title}\n{rows}"


def render_report(report: Report) -> str:
    """Render all sections of a report.

    Args:
        report: Assembled report.

    Returns:
        Rendered text, empty if the report has no sections.
    """
    return "".join(render_section(section, report.layout) for section in report.sections)
