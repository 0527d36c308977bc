"""Concurrent retrieval of raw change lists.

The git queries for the enabled sections are independent of each other,
so they run in a small thread pool. Every task returns its change list or
an empty list on failure; one failing section never aborts the others.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from brewrecents.core.errors import RetrievalError
from brewrecents.models.options import ReportOptions
from brewrecents.models.package import Catalog, ChangeCategory
from brewrecents.scanners.brew import BrewScanner
from brewrecents.scanners.git import GitChangeScanner

logger = logging.getLogger(__name__)

Section = tuple[Catalog, ChangeCategory]


@dataclass(slots=True)
class CollectionResult:
    """Raw change lists gathered for a report.

    Attributes:
        changes: Raw identifiers per section. Failed sections map to [].
        failures: Error message per failed section.
    """

    changes: dict[Section, list[str]] = field(default_factory=dict)
    failures: dict[Section, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        """True if every requested section was retrieved."""
        return not self.failures


class ChangeCollector:
    """Gathers raw change lists for the enabled sections of a report.

    Args:
        brew: Scanner resolving tap repositories.
        git: Scanner listing changed definition files.
        max_workers: Size of the thread pool.
    """

    def __init__(
        self,
        brew: BrewScanner,
        git: GitChangeScanner,
        max_workers: int = 4,
    ) -> None:
        self.brew = brew
        self.git = git
        self.max_workers = max_workers

    def _resolve_repos(
        self,
        catalogs: list[Catalog],
        result: CollectionResult,
        sections: list[Section],
    ) -> dict[Catalog, Path]:
        """Resolve the repository of every catalog in use.

        A catalog that cannot be resolved marks all of its sections failed.
        """
        repos: dict[Catalog, Path] = {}
        for catalog in catalogs:
            try:
                repos[catalog] = self.brew.repo_path(catalog.tap)
            except RetrievalError as e:
                logger.info("Cannot locate %s repository: %s", catalog.plural, e)
                for section in sections:
                    if section[0] is catalog:
                        result.changes[section] = []
                        result.failures[section] = str(e)
        return repos

    def _fetch(self, repo: Path, days: int, section: Section) -> list[str]:
        catalog, category = section
        return self.git.get_raw_changes(
            repo,
            days,
            change_filter=category.diff_filter,
            path_prefix=catalog.path_prefix,
        )

    def collect(self, options: ReportOptions) -> CollectionResult:
        """Retrieve raw change lists for all enabled sections.

        All retrieval tasks are joined before this method returns.

        Args:
            options: Report options selecting sections and the time window.

        Returns:
            CollectionResult with one change list per enabled section.
        """
        sections = options.enabled_sections()
        result = CollectionResult()
        if not sections:
            return result

        catalogs = [catalog for catalog in Catalog if options.catalog_enabled(catalog)]
        repos = self._resolve_repos(catalogs, result, sections)
        pending = [section for section in sections if section[0] in repos]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_section = {
                executor.submit(self._fetch, repos[section[0]], options.days, section): section
                for section in pending
            }
            for future, section in future_to_section.items():
                catalog, category = section
                try:
                    result.changes[section] = future.result()
                except RetrievalError as e:
                    logger.info("Failed to list %s %s: %s", category.value, catalog.plural, e)
                    result.changes[section] = []
                    result.failures[section] = str(e)
                except Exception as e:
                    logger.exception(
                        "Unexpected error listing %s %s", category.value, catalog.plural
                    )
                    result.changes[section] = []
                    result.failures[section] = f"{type(e).__name__}: {e}"
                else:
                    logger.debug(
                        "Retrieved %d raw %s %s",
                        len(result.changes[section]),
                        category.value,
                        catalog.plural,
                    )

        return result
