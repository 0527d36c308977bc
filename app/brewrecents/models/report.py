"""Report models produced by the listing pipeline."""

from dataclasses import dataclass, field

from brewrecents.models.package import Catalog, ChangeCategory


@dataclass(frozen=True, slots=True)
class StyledEntry:
    """A package name ready for column layout.

    Attributes:
        name: Bare package name the entry was built from.
        display_text: Text to print, possibly with escape sequences.
        visible_length: Printable length of display_text.
        suppressed: True if the entry must not be shown at all.
    """

    name: str
    display_text: str = ""
    visible_length: int = 0
    suppressed: bool = False


@dataclass(frozen=True, slots=True)
class ReportSection:
    """Entries of one (catalog, category) group.

    Attributes:
        catalog: Catalog the packages come from.
        category: Kind of change the packages went through.
        entries: Visible entries in sorted name order.
    """

    catalog: Catalog
    category: ChangeCategory
    entries: tuple[StyledEntry, ...] = field(default_factory=tuple)

    @property
    def title(self) -> str:
        """Section header, e.g. "🆕 New formulae:"."""
        return f"{self.category.marker} {self.category.label} {self.catalog.plural}:"

    @property
    def max_visible_length(self) -> int:
        return max((entry.visible_length for entry in self.entries), default=0)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class LayoutConfiguration:
    """Layout parameters shared by every section of a report.

    Attributes:
        output_width: Width of the output in columns.
        truncate_at: Maximum displayed length of a package name.
        global_max_visible_length: Longest visible entry across all sections.
    """

    output_width: int
    truncate_at: int
    global_max_visible_length: int = 0


@dataclass(frozen=True, slots=True)
class Report:
    """Assembled report ready for rendering.

    Attributes:
        days: Change window the report covers.
        sections: Non-empty sections in display order.
        layout: Layout parameters shared by all sections.
    """

    days: int
    sections: tuple[ReportSection, ...]
    layout: LayoutConfiguration

    @property
    def is_empty(self) -> bool:
        return not self.sections

    @property
    def total_entries(self) -> int:
        return sum(len(section) for section in self.sections)
