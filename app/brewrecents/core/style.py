"""Entry styling for the recents report.

Decides per package name whether it is shown, how it is truncated, and
which escape sequences wrap it.
"""

from rich.color import ColorSystem
from rich.style import Style

from brewrecents.core.theme import ThemeColors
from brewrecents.models.options import StyleOptions
from brewrecents.models.package import Classification, MembershipSets
from brewrecents.models.report import StyledEntry
from brewrecents.utils.ansi import visible_length

ELLIPSIS = "…"


def truncate_name(name: str, limit: int) -> str:
    """Shorten a name to at most ``limit`` characters.

    The last kept character is replaced by an ellipsis when the name is cut.

    Args:
        name: Name to shorten.
        limit: Maximum length, at least 1.

    Returns:
        The name, or its truncated form.
    """
    limit = max(1, limit)
    if len(name) <= limit:
        return name
    return name[: limit - 1] + ELLIPSIS


def style_entry(
    name: str,
    classification: Classification,
    options: StyleOptions,
    *,
    inspected: bool | None = None,
) -> StyledEntry:
    """Build the styled entry for one package name.

    The hide check runs before anything else and looks at looked-up
    membership only, so an installed package that was also looked up is
    hidden when hiding is requested.

    Args:
        name: Bare package name.
        classification: Classification of the name.
        options: Styling options.
        inspected: Raw looked-up membership. Defaults to
            ``classification is Classification.INSPECTED``.

    Returns:
        StyledEntry with display text and visible length, or a suppressed
        entry.
    """
    if inspected is None:
        inspected = classification is Classification.INSPECTED

    if inspected and options.hide_inspected:
        return StyledEntry(name=name, suppressed=True)

    shown = truncate_name(name, options.truncate_at)

    if options.plain:
        text = shown
    elif classification is Classification.INSTALLED:
        text = options.installed_style.render(
            f"{options.indicator}{shown}", color_system=options.color_system
        )
    elif classification is Classification.INSPECTED and options.dim_inspected:
        text = options.inspected_style.render(shown, color_system=options.color_system)
    else:
        text = shown

    return StyledEntry(name=name, display_text=text, visible_length=visible_length(text))


def style_names(
    names: list[str],
    memberships: MembershipSets,
    options: StyleOptions,
) -> list[StyledEntry]:
    """Classify and style names, dropping suppressed entries.

    Args:
        names: Sorted, unique package names.
        memberships: Installed and looked-up package names.
        options: Styling options.

    Returns:
        Visible styled entries in input order.
    """
    entries: list[StyledEntry] = []
    for name in names:
        entry = style_entry(
            name,
            memberships.classify(name),
            options,
            inspected=memberships.is_inspected(name),
        )
        if not entry.suppressed:
            entries.append(entry)
    return entries


def build_style_options(
    colors: ThemeColors,
    *,
    truncate_at: int,
    dim_inspected: bool,
    hide_inspected: bool,
    plain: bool,
    color: bool,
    indicator: str,
    color_system: ColorSystem = ColorSystem.STANDARD,
) -> StyleOptions:
    """Create style options from theme colors and user choices.

    Args:
        colors: Theme colors for installed and looked-up entries.
        truncate_at: Maximum displayed length of a name.
        dim_inspected: Dim looked-up packages.
        hide_inspected: Hide looked-up packages.
        plain: Disable styling and the installed indicator.
        color: Emit escape sequences. Without color the indicator is kept.
        indicator: Glyph prefixed to installed packages.
        color_system: Color system to render escape sequences for.

    Returns:
        StyleOptions ready for style_entry.
    """
    return StyleOptions(
        truncate_at=truncate_at,
        dim_inspected=dim_inspected,
        hide_inspected=hide_inspected,
        plain=plain,
        indicator=indicator,
        installed_style=Style(bold=True, italic=True, color=colors.installed),
        inspected_style=Style(dim=True, color=colors.looked_up),
        color_system=color_system if color and not plain else None,
    )
