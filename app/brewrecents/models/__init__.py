"""Data models for brew-recents.

This module exports the core data structures used throughout the application.
"""

from brewrecents.models.options import ReportOptions, StyleOptions
from brewrecents.models.package import (
    Catalog,
    ChangeCategory,
    Classification,
    MembershipSets,
)
from brewrecents.models.report import LayoutConfiguration, Report, ReportSection, StyledEntry

__all__ = [
    "Catalog",
    "ChangeCategory",
    "Classification",
    "LayoutConfiguration",
    "MembershipSets",
    "Report",
    "ReportOptions",
    "ReportSection",
    "StyleOptions",
    "StyledEntry",
]
