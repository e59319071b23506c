"""Pydantic schemas for the skill directory."""

from .directory import Employee, EmployeeId, SkillEndorsement
from .taxonomy import (
    ROOT_NAME,
    SkillCategory,
    SkillNode,
    CategoryNode,
    RootNode,
    TaxonomyNode,
    SkillCount,
    SkillStats,
)
from .search import ResultKind, EmployeeMatch, SkillMatch, SearchResult

__all__ = [
    "Employee",
    "EmployeeId",
    "SkillEndorsement",
    "ROOT_NAME",
    "SkillCategory",
    "SkillNode",
    "CategoryNode",
    "RootNode",
    "TaxonomyNode",
    "SkillCount",
    "SkillStats",
    "ResultKind",
    "EmployeeMatch",
    "SkillMatch",
    "SearchResult",
]
