"""Skill taxonomy tree schemas."""

from enum import Enum
from typing import Literal, Union
from pydantic import BaseModel, Field

from .directory import Employee

ROOT_NAME = "Skills Network"


class SkillCategory(str, Enum):
    """Fixed skill category buckets, in lookup order."""
    TECHNOLOGY = "Technology"
    DESIGN = "Design"
    ANALYTICS = "Analytics"
    MARKETING = "Marketing"
    MANAGEMENT = "Management"
    FINANCE = "Finance"
    OTHER = "Other"


class SkillNode(BaseModel):
    """Leaf node: one exact skill label."""
    level: Literal[2] = 2
    id: str
    name: str
    category: SkillCategory
    employees: list[Employee] = Field(default_factory=list)
    endorsement_count: int = 0


class CategoryNode(BaseModel):
    """Category node grouping skills of one bucket."""
    level: Literal[1] = 1
    id: str
    name: str
    category: SkillCategory
    employees: list[Employee] = Field(
        default_factory=list,
        description="Union of the children's employees, by id"
    )
    endorsement_count: int = 0
    children: list[SkillNode] = Field(default_factory=list)


class RootNode(BaseModel):
    """Root of the skill network."""
    level: Literal[0] = 0
    id: str = ROOT_NAME
    name: str = ROOT_NAME
    category: Literal["root"] = "root"
    employees: list[Employee] = Field(
        default_factory=list,
        description="Every employee in the snapshot, skilled or not"
    )
    endorsement_count: int = Field(0, description="Total endorsement events supplied")
    children: list[CategoryNode] = Field(default_factory=list)


TaxonomyNode = Union[RootNode, CategoryNode, SkillNode]


class SkillCount(BaseModel):
    """Number of employees holding a skill."""
    skill: str
    count: int


class SkillStats(BaseModel):
    """Headline numbers for the skill network page."""
    total_skills: int = 0
    team_members: int = 0
    top_skills: list[SkillCount] = Field(default_factory=list)
    average_skills_per_employee: float = 0.0
