"""Ranked quick search over employees and skill labels."""

import logging
from typing import Callable, Optional, Sequence
from schemas.directory import Employee, EmployeeId
from schemas.search import EmployeeMatch, SearchResult, SkillMatch
from search.fuzzy import fuzzy_score

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Merge employee and skill matches into one ranked result list.

    Names and titles are scored per employee (name first), skill labels once
    across the whole snapshot. Candidates above the threshold are de-duplicated
    first-write-wins per employee id and per skill label, sorted by descending
    score (stable) and truncated.
    """

    def __init__(
        self,
        threshold: float = 0.3,
        name_boost: float = 0.5,
        title_boost: float = 0.3,
        max_results: int = 8,
        scorer: Callable[[str, str], float] = fuzzy_score,
    ):
        """
        Initialize search engine.

        Args:
            threshold: Minimum fuzzy score (exclusive) for a candidate to qualify
            name_boost: Added to qualifying name matches
            title_boost: Added to qualifying title matches
            max_results: Maximum number of results returned
            scorer: Fuzzy scoring function (candidate, query) -> [0, 1]
        """
        self.threshold = threshold
        self.name_boost = name_boost
        self.title_boost = title_boost
        self.max_results = max_results
        self.scorer = scorer

    @classmethod
    def from_settings(cls, settings) -> "SearchEngine":
        """Create an engine from application settings."""
        return cls(
            threshold=settings.match_threshold,
            name_boost=settings.name_boost,
            title_boost=settings.title_boost,
            max_results=settings.max_results,
        )

    def search(self, employees: Sequence[Employee], query: str) -> list[SearchResult]:
        """
        Search employees and their skills.

        Args:
            employees: Employee snapshot
            query: Raw query text

        Returns:
            At most max_results results, best first; empty for a blank query
        """
        if not query.strip():
            return []

        candidates = self._score_employees(employees, query)
        candidates.extend(self._score_skills(employees, query))

        results = self._dedupe(candidates)
        results.sort(key=lambda r: -r.score)
        results = results[:self.max_results]

        logger.debug(
            f"Quick search {query!r}: {len(candidates)} candidates, {len(results)} results"
        )
        return results

    def _score_employees(self, employees: Sequence[Employee], query: str) -> list[SearchResult]:
        """Score names and titles; each employee may yield two candidates."""
        candidates: list[SearchResult] = []

        for employee in employees:
            name_score = self.scorer(employee.name, query)
            if name_score > self.threshold:
                candidates.append(EmployeeMatch(
                    employee=employee,
                    score=name_score + self.name_boost
                ))

            title_score = self.scorer(employee.title, query)
            if title_score > self.threshold:
                candidates.append(EmployeeMatch(
                    employee=employee,
                    score=title_score + self.title_boost
                ))

        return candidates

    def _score_skills(self, employees: Sequence[Employee], query: str) -> list[SearchResult]:
        """Score every distinct skill label in the snapshot at its raw score."""
        all_skills: dict[str, None] = {}
        for employee in employees:
            for skill in employee.skills:
                all_skills.setdefault(skill, None)

        candidates: list[SearchResult] = []
        for skill in all_skills:
            score = self.scorer(skill, query)
            if score > self.threshold:
                candidates.append(SkillMatch(skill=skill, score=score))

        return candidates

    @staticmethod
    def _dedupe(candidates: list[SearchResult]) -> list[SearchResult]:
        """Keep the first candidate per employee id and per skill label."""
        seen_employees: set[EmployeeId] = set()
        seen_skills: set[str] = set()
        unique: list[SearchResult] = []

        for result in candidates:
            if isinstance(result, EmployeeMatch):
                if result.employee.id in seen_employees:
                    continue
                seen_employees.add(result.employee.id)
            else:
                if result.skill in seen_skills:
                    continue
                seen_skills.add(result.skill)
            unique.append(result)

        return unique


def quick_search(
    employees: Sequence[Employee],
    query: str,
    engine: Optional[SearchEngine] = None,
) -> list[SearchResult]:
    """Run a quick search with default engine settings."""
    return (engine or SearchEngine()).search(employees, query)
