"""Skill lookups and headline statistics over a directory snapshot."""

from typing import Iterator, Optional, Sequence
from schemas.directory import Employee
from schemas.taxonomy import RootNode, SkillCount, SkillNode, SkillStats, TaxonomyNode


def employees_with_skill(employees: Sequence[Employee], skill: str) -> list[Employee]:
    """Employees listing the exact skill label, in snapshot order."""
    return [employee for employee in employees if skill in employee.skills]


def skill_stats(employees: Sequence[Employee], top_n: int = 5) -> SkillStats:
    """
    Compute headline skill statistics.

    Args:
        employees: Employee snapshot
        top_n: Number of most-held skills to report

    Returns:
        SkillStats with distinct skill count, team size, top skills and average
    """
    counts: dict[str, int] = {}
    for employee in employees:
        # A label listed twice by one employee still counts that employee once
        for skill in dict.fromkeys(employee.skills):
            counts[skill] = counts.get(skill, 0) + 1

    ranked = sorted(counts.items(), key=lambda item: -item[1])

    average = 0.0
    if employees:
        average = round(sum(len(e.skills) for e in employees) / len(employees), 1)

    return SkillStats(
        total_skills=len(counts),
        team_members=len(employees),
        top_skills=[SkillCount(skill=s, count=c) for s, c in ranked[:top_n]],
        average_skills_per_employee=average,
    )


def iter_nodes(root: TaxonomyNode) -> Iterator[TaxonomyNode]:
    """Depth-first, pre-order walk over a skill tree."""
    yield root
    for child in getattr(root, "children", []):
        yield from iter_nodes(child)


def find_skill(root: RootNode, skill: str) -> Optional[SkillNode]:
    """Find the skill node for an exact label, if any employee holds it."""
    for category in root.children:
        for node in category.children:
            if node.id == skill:
                return node
    return None
