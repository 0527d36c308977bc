"""Unit tests for entry styling."""

import pytest
from brewrecents.core.style import (
    ELLIPSIS,
    build_style_options,
    style_entry,
    style_names,
    truncate_name,
)
from brewrecents.core.theme import ThemeColors
from brewrecents.models.options import StyleOptions
from brewrecents.models.package import Classification, MembershipSets
from brewrecents.utils.ansi import strip_ansi
from rich.color import ColorSystem


class TestTruncateName:
    """Tests for truncate_name function."""

    def test_short_name_unchanged(self) -> None:
        """Names within the limit are returned as is."""
        assert truncate_name("wget", 25) == "wget"

    def test_name_at_limit_unchanged(self) -> None:
        """A name exactly at the limit is not truncated."""
        assert truncate_name("a" * 25, 25) == "a" * 25

    def test_long_name_truncated(self) -> None:
        """A 30 character name is cut to 25 ending in an ellipsis."""
        name = "abcdefghijklmnopqrstuvwxyz0123"
        result = truncate_name(name, 25)

        assert len(result) == 25
        assert result.endswith(ELLIPSIS)
        assert result[:24] == name[:24]

    def test_limit_of_one(self) -> None:
        """A limit of one leaves only the ellipsis."""
        assert truncate_name("wget", 1) == ELLIPSIS


class TestStyleEntry:
    """Tests for style_entry function."""

    @pytest.fixture
    def options(self) -> StyleOptions:
        """Default colored style options."""
        return StyleOptions()

    def test_plain_classification_unstyled(self, options: StyleOptions) -> None:
        """Packages that are neither installed nor looked up are unstyled."""
        entry = style_entry("xyz", Classification.PLAIN, options)

        assert entry.display_text == "xyz"
        assert entry.visible_length == 3
        assert entry.suppressed is False

    def test_installed_highlighted(self, options: StyleOptions) -> None:
        """Installed packages are bold, italic, green and marked."""
        entry = style_entry("abc", Classification.INSTALLED, options)

        assert entry.display_text == "\x1b[1;3;32m•abc\x1b[0m"
        assert entry.visible_length == 4

    def test_inspected_dimmed(self, options: StyleOptions) -> None:
        """Looked-up packages are dimmed."""
        entry = style_entry("foo", Classification.INSPECTED, options)

        assert entry.display_text == "\x1b[2mfoo\x1b[0m"
        assert entry.visible_length == 3

    def test_inspected_not_dimmed_when_disabled(self) -> None:
        """Without dimming looked-up packages are unstyled."""
        options = StyleOptions(dim_inspected=False)

        entry = style_entry("foo", Classification.INSPECTED, options)

        assert entry.display_text == "foo"

    def test_inspected_hidden(self) -> None:
        """Looked-up packages are suppressed when hiding."""
        options = StyleOptions(hide_inspected=True)

        entry = style_entry("foo", Classification.INSPECTED, options)

        assert entry.suppressed is True
        assert entry.display_text == ""

    def test_hide_checked_before_installed_highlight(self) -> None:
        """An installed package that was looked up is still hidden."""
        options = StyleOptions(hide_inspected=True)

        entry = style_entry("abc", Classification.INSTALLED, options, inspected=True)

        assert entry.suppressed is True

    def test_installed_overrides_dim(self, options: StyleOptions) -> None:
        """Installed styling applies even if the package was looked up."""
        entry = style_entry("abc", Classification.INSTALLED, options, inspected=True)

        assert strip_ansi(entry.display_text) == "•abc"
        assert "\x1b[2m" not in entry.display_text

    def test_plain_output(self) -> None:
        """Plain output has no styling and no indicator."""
        options = StyleOptions(plain=True)

        entry = style_entry("abc", Classification.INSTALLED, options)

        assert entry.display_text == "abc"
        assert entry.visible_length == 3

    def test_plain_output_still_hides(self) -> None:
        """Hiding applies in plain output too."""
        options = StyleOptions(plain=True, hide_inspected=True)

        entry = style_entry("foo", Classification.INSPECTED, options)

        assert entry.suppressed is True

    def test_no_color_keeps_indicator(self) -> None:
        """Without color the installed indicator is still shown."""
        options = StyleOptions(color_system=None)

        entry = style_entry("abc", Classification.INSTALLED, options)

        assert entry.display_text == "•abc"

    def test_truncates_before_styling(self, options: StyleOptions) -> None:
        """Truncation applies to the name, not to the styled text."""
        name = "a" * 30

        entry = style_entry(name, Classification.INSTALLED, options)

        assert strip_ansi(entry.display_text) == "•" + "a" * 24 + ELLIPSIS
        assert entry.visible_length == 26

    def test_custom_indicator(self) -> None:
        """The indicator glyph is configurable."""
        options = StyleOptions(indicator="* ", color_system=None)

        entry = style_entry("abc", Classification.INSTALLED, options)

        assert entry.display_text == "* abc"


class TestStyleNames:
    """Tests for style_names function."""

    def test_drops_suppressed_entries(self) -> None:
        """Hidden packages are removed from the result."""
        memberships = MembershipSets.create(installed={"abc"}, inspected={"abc", "foo"})
        options = StyleOptions(hide_inspected=True)

        entries = style_names(["abc", "bar", "foo"], memberships, options)

        assert [e.name for e in entries] == ["bar"]

    def test_keeps_input_order(self) -> None:
        """Entries come out in the order of the names."""
        entries = style_names(["b", "a", "c"], MembershipSets(), StyleOptions())

        assert [e.name for e in entries] == ["b", "a", "c"]

    def test_classifies_against_memberships(self) -> None:
        """Installed and looked-up names are styled accordingly."""
        memberships = MembershipSets.create(installed={"abc"}, inspected={"foo"})

        entries = style_names(["abc", "foo", "xyz"], memberships, StyleOptions())

        assert entries[0].display_text.startswith("\x1b[1;3;")
        assert entries[1].display_text == "\x1b[2mfoo\x1b[0m"
        assert entries[2].display_text == "xyz"


class TestBuildStyleOptions:
    """Tests for build_style_options function."""

    def _build(self, **overrides: object) -> StyleOptions:
        kwargs: dict[str, object] = {
            "truncate_at": 25,
            "dim_inspected": True,
            "hide_inspected": False,
            "plain": False,
            "color": True,
            "indicator": "•",
        }
        kwargs.update(overrides)
        return build_style_options(ThemeColors(), **kwargs)  # type: ignore[arg-type]

    def test_uses_theme_colors(self) -> None:
        """Installed entries use the theme's installed color."""
        options = self._build(color_system=ColorSystem.TRUECOLOR)

        entry = style_entry("abc", Classification.INSTALLED, options)

        # #03b971 -> 3;185;113
        assert "38;2;3;185;113" in entry.display_text

    def test_no_color_disables_sequences(self) -> None:
        """color=False renders no escape sequences."""
        options = self._build(color=False)

        assert options.color_system is None

    def test_plain_disables_sequences(self) -> None:
        """Plain output renders no escape sequences."""
        options = self._build(plain=True)

        assert options.color_system is None
        assert options.plain is True

    def test_passes_flags(self) -> None:
        """Flags are carried over unchanged."""
        options = self._build(truncate_at=10, dim_inspected=False, hide_inspected=True)

        assert options.truncate_at == 10
        assert options.dim_inspected is False
        assert options.hide_inspected is True
