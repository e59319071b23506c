"""Skill directory facade with memoized derivations per snapshot."""

import logging
from collections import OrderedDict
from typing import Any, Callable, Optional, Sequence, Union
from config.settings import Settings
from schemas.directory import Employee, SkillEndorsement
from schemas.search import SearchResult
from schemas.taxonomy import RootNode, SkillNode, SkillStats
from search.engine import SearchEngine
from search.navigation import QuickSearchSession
from taxonomy.aggregator import TaxonomyAggregator
from taxonomy.classifier import SkillClassifier
from taxonomy.stats import employees_with_skill, find_skill, skill_stats

logger = logging.getLogger(__name__)

EmployeeInput = Union[Employee, dict[str, Any]]
EndorsementInput = Union[SkillEndorsement, dict[str, Any]]


class SkillDirectory:
    """
    Entry point for callers holding a directory snapshot.

    The skill tree and stats are derived lazily and cached until the snapshot
    changes. Search results are cached per query string in a bounded LRU.
    """

    def __init__(
        self,
        employees: Sequence[EmployeeInput] = (),
        endorsements: Sequence[EndorsementInput] = (),
        settings: Optional[Settings] = None,
    ):
        """
        Initialize directory.

        Args:
            employees: Employee models or plain dicts
            endorsements: Endorsement models or plain dicts
            settings: Application settings
        """
        self.settings = settings or Settings()

        classifier = SkillClassifier.from_path(
            self.settings.categories_path,
            normalize=self.settings.normalize_skill_labels,
        )
        self.aggregator = TaxonomyAggregator(classifier)
        self.engine = SearchEngine.from_settings(self.settings)

        self.employees: list[Employee] = []
        self.endorsements: list[SkillEndorsement] = []
        self._tree: Optional[RootNode] = None
        self._stats: Optional[SkillStats] = None
        self._search_cache: OrderedDict[str, list[SearchResult]] = OrderedDict()

        self.update(employees=employees, endorsements=endorsements)

    def update(
        self,
        employees: Optional[Sequence[EmployeeInput]] = None,
        endorsements: Optional[Sequence[EndorsementInput]] = None,
    ):
        """Replace part or all of the snapshot and drop cached derivations."""
        if employees is not None:
            self.employees = [Employee.model_validate(e) for e in employees]
        if endorsements is not None:
            self.endorsements = [SkillEndorsement.model_validate(e) for e in endorsements]

        self._tree = None
        self._stats = None
        self._search_cache.clear()
        logger.debug(
            f"Snapshot updated: {len(self.employees)} employees, "
            f"{len(self.endorsements)} endorsements"
        )

    def taxonomy(self) -> RootNode:
        """Skill tree for the current snapshot."""
        if self._tree is None:
            self._tree = self.aggregator.build(self.employees, self.endorsements)
        return self._tree

    def stats(self) -> SkillStats:
        """Headline skill statistics for the current snapshot."""
        if self._stats is None:
            self._stats = skill_stats(self.employees, top_n=self.settings.top_skills)
        return self._stats

    def search(self, query: str) -> list[SearchResult]:
        """Ranked quick search results for a query."""
        cached = self._search_cache.get(query)
        if cached is not None:
            self._search_cache.move_to_end(query)
            return list(cached)

        results = self.engine.search(self.employees, query)

        if self.settings.search_cache_size > 0:
            self._search_cache[query] = results
            if len(self._search_cache) > self.settings.search_cache_size:
                self._search_cache.popitem(last=False)

        return list(results)

    def employees_with_skill(self, skill: str) -> list[Employee]:
        """Employees listing the exact skill label."""
        return employees_with_skill(self.employees, skill)

    def find_skill(self, skill: str) -> Optional[SkillNode]:
        """Skill node for an exact label in the current tree."""
        return find_skill(self.taxonomy(), skill)

    def session(
        self,
        on_employee_select: Optional[Callable[[Employee], None]] = None,
        on_skill_select: Optional[Callable[[str], None]] = None,
    ) -> QuickSearchSession:
        """Create a keyboard-navigable quick search session over this snapshot."""
        return QuickSearchSession(
            self.employees,
            engine=self.engine,
            on_employee_select=on_employee_select,
            on_skill_select=on_skill_select,
        )
