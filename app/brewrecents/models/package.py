"""Package models for change tracking and classification.

This module defines the catalogs and change categories that make up the
report, and the membership data used to classify package names.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class Catalog(Enum):
    """Homebrew repositories that packages are listed from."""

    FORMULA = "formula"
    CASK = "cask"

    @property
    def plural(self) -> str:
        """Human-readable plural used in section titles."""
        return "formulae" if self is Catalog.FORMULA else "casks"

    @property
    def tap(self) -> str:
        """Tap name passed to ``brew --repo``."""
        return "homebrew/core" if self is Catalog.FORMULA else "homebrew/cask"

    @property
    def path_prefix(self) -> str:
        """Directory holding the package definitions inside the repository."""
        return "Formula/" if self is Catalog.FORMULA else "Casks/"


class ChangeCategory(Enum):
    """Kind of change a package went through in the time window."""

    NEW = "new"
    UPDATED = "updated"

    @property
    def diff_filter(self) -> str:
        """git ``--diff-filter`` letter selecting this kind of change."""
        return "A" if self is ChangeCategory.NEW else "M"

    @property
    def marker(self) -> str:
        """Glyph shown in front of the section title."""
        return "\U0001f195" if self is ChangeCategory.NEW else "✏️"

    @property
    def label(self) -> str:
        return "New" if self is ChangeCategory.NEW else "Updated"


class Classification(Enum):
    """Status of a package name relative to the user's system.

    INSTALLED takes precedence over INSPECTED when both apply.
    """

    INSTALLED = "installed"
    INSPECTED = "inspected"
    PLAIN = "plain"


@dataclass(frozen=True, slots=True)
class MembershipSets:
    """Installed and looked-up package names, built once per run.

    Attributes:
        installed: Names reported by ``brew list``.
        inspected: Names found in ``brew info`` lookups of the shell history.
    """

    installed: frozenset[str] = field(default_factory=frozenset)
    inspected: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def create(cls, installed: Iterable[str], inspected: Iterable[str]) -> "MembershipSets":
        """Create membership sets from arbitrary iterables of names."""
        return cls(installed=frozenset(installed), inspected=frozenset(inspected))

    def is_installed(self, name: str) -> bool:
        return name in self.installed

    def is_inspected(self, name: str) -> bool:
        return name in self.inspected

    def classify(self, name: str) -> Classification:
        """Classify a package name, installed status first.

        Args:
            name: Bare package name.

        Returns:
            The Classification of the name.
        """
        if name in self.installed:
            return Classification.INSTALLED
        if name in self.inspected:
            return Classification.INSPECTED
        return Classification.PLAIN
