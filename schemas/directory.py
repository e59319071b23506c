"""Employee and endorsement snapshot schemas."""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field

EmployeeId = Union[int, str]


class Employee(BaseModel):
    """Employee record as supplied by the directory snapshot."""
    model_config = ConfigDict(populate_by_name=True)

    id: EmployeeId
    name: str
    title: str
    skills: list[str] = Field(default_factory=list, description="Free-text skill labels")
    department: Optional[str] = None
    profile_image: Optional[str] = Field(None, alias="profileImage")


class SkillEndorsement(BaseModel):
    """A single endorsement event for one employee's skill."""
    model_config = ConfigDict(populate_by_name=True)

    skill: str
    employee_id: EmployeeId = Field(alias="employeeId")
    endorser_id: Optional[EmployeeId] = Field(None, alias="endorserId")
    created_at: Optional[str] = Field(None, alias="createdAt")
