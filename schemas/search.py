"""Quick search result schemas."""

from enum import Enum
from typing import Literal, Union
from pydantic import BaseModel, Field

from .directory import Employee


class ResultKind(str, Enum):
    """Kind of quick search result."""
    EMPLOYEE = "employee"
    SKILL = "skill"


class EmployeeMatch(BaseModel):
    """An employee matched on name or title."""
    kind: Literal[ResultKind.EMPLOYEE] = ResultKind.EMPLOYEE
    employee: Employee
    score: float = Field(description="Fuzzy score plus field boost")


class SkillMatch(BaseModel):
    """A skill label matched directly."""
    kind: Literal[ResultKind.SKILL] = ResultKind.SKILL
    skill: str
    score: float = Field(description="Raw fuzzy score")


SearchResult = Union[EmployeeMatch, SkillMatch]
