"""Options controlling which sections are built and how entries look."""

from dataclasses import dataclass, field

from rich.color import ColorSystem
from rich.style import Style

from brewrecents.models.package import Catalog, ChangeCategory


@dataclass(frozen=True, slots=True)
class ReportOptions:
    """Section selection for a report.

    Each section is shown when both its catalog flag and its category flag
    are enabled.

    Attributes:
        days: Change window in days.
        show_formulae: Include the formulae catalog.
        show_casks: Include the casks catalog.
        show_new: Include newly added packages.
        show_updated: Include updated packages.
    """

    days: int = 7
    show_formulae: bool = True
    show_casks: bool = True
    show_new: bool = True
    show_updated: bool = True

    def catalog_enabled(self, catalog: Catalog) -> bool:
        return self.show_formulae if catalog is Catalog.FORMULA else self.show_casks

    def category_enabled(self, category: ChangeCategory) -> bool:
        return self.show_new if category is ChangeCategory.NEW else self.show_updated

    def section_enabled(self, catalog: Catalog, category: ChangeCategory) -> bool:
        """Check whether the (catalog, category) section is requested."""
        return self.catalog_enabled(catalog) and self.category_enabled(category)

    def enabled_sections(self) -> list[tuple[Catalog, ChangeCategory]]:
        """List the requested sections in display order.

        Returns:
            (catalog, category) pairs: formulae before casks, new before updated.
        """
        return [
            (catalog, category)
            for catalog in Catalog
            for category in ChangeCategory
            if self.section_enabled(catalog, category)
        ]


@dataclass(frozen=True, slots=True)
class StyleOptions:
    """Styling options for report entries.

    Attributes:
        truncate_at: Maximum displayed length of a name (at least 1).
        dim_inspected: Dim looked-up packages that are not installed.
        hide_inspected: Drop looked-up packages entirely.
        plain: No styling and no installed indicator.
        indicator: Glyph prefixed to installed packages.
        installed_style: Style of installed entries.
        inspected_style: Style of dimmed looked-up entries.
        color_system: Color system entries are rendered for, None for no
            escape sequences at all.
    """

    truncate_at: int = 25
    dim_inspected: bool = True
    hide_inspected: bool = False
    plain: bool = False
    indicator: str = "•"
    installed_style: Style = field(
        default_factory=lambda: Style(bold=True, italic=True, color="green")
    )
    inspected_style: Style = field(default_factory=lambda: Style(dim=True))
    color_system: ColorSystem | None = ColorSystem.STANDARD
