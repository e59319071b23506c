"""Taxonomy aggregator: builds the category -> skill tree from a directory snapshot."""

import logging
from typing import Iterable, Optional, Sequence
from schemas.directory import Employee, EmployeeId, SkillEndorsement
from schemas.taxonomy import CategoryNode, RootNode, SkillCategory, SkillNode
from taxonomy.classifier import SkillClassifier

logger = logging.getLogger(__name__)


class _SkillAccumulator:
    """Mutable per-label accumulator used while building one tree."""

    __slots__ = ("label", "category", "employees", "endorsements")

    def __init__(self, label: str, category: SkillCategory):
        self.label = label
        self.category = category
        # Keyed by employee id so repeated membership is idempotent
        self.employees: dict[EmployeeId, Employee] = {}
        self.endorsements = 0

    def to_node(self) -> SkillNode:
        return SkillNode(
            id=self.label,
            name=self.label,
            category=self.category,
            employees=list(self.employees.values()),
            endorsement_count=self.endorsements,
        )


def _union_employees(nodes: Iterable[SkillNode]) -> list[Employee]:
    """Set-union of the nodes' employees by id, in first-seen order."""
    seen: dict[EmployeeId, Employee] = {}
    for node in nodes:
        for employee in node.employees:
            seen.setdefault(employee.id, employee)
    return list(seen.values())


def _by_endorsements(node) -> int:
    return -node.endorsement_count


class TaxonomyAggregator:
    """
    Aggregate raw per-employee skill labels into a three-level tree.

    Every call to build() starts from scratch; nothing is carried between
    snapshots. Skills and categories are ordered by descending endorsement
    count with a stable sort, so ties keep first-encountered order.
    """

    def __init__(self, classifier: Optional[SkillClassifier] = None):
        """
        Initialize aggregator.

        Args:
            classifier: Skill classifier (default table if omitted)
        """
        self.classifier = classifier or SkillClassifier()

    def build(
        self,
        employees: Sequence[Employee],
        endorsements: Sequence[SkillEndorsement],
    ) -> RootNode:
        """
        Build the skill tree for one snapshot.

        Args:
            employees: Employee snapshot
            endorsements: Endorsement events

        Returns:
            Root node whose children are the non-empty categories
        """
        skills: dict[str, _SkillAccumulator] = {}

        # Step 1: collect skill labels exactly as written
        for employee in employees:
            for label in employee.skills:
                acc = skills.get(label)
                if acc is None:
                    acc = _SkillAccumulator(label, self.classifier.classify(label))
                    skills[label] = acc
                acc.employees.setdefault(employee.id, employee)

        # Step 2: count endorsements; unknown labels never create nodes
        orphaned = 0
        for endorsement in endorsements:
            acc = skills.get(endorsement.skill)
            if acc is None:
                orphaned += 1
                continue
            acc.endorsements += 1

        # Step 3: group by category in first-encountered order
        grouped: dict[SkillCategory, list[SkillNode]] = {}
        for acc in skills.values():
            grouped.setdefault(acc.category, []).append(acc.to_node())

        # Step 4: category nodes
        categories = []
        for category, nodes in grouped.items():
            nodes.sort(key=_by_endorsements)
            categories.append(CategoryNode(
                id=category.value,
                name=category.value,
                category=category,
                employees=_union_employees(nodes),
                endorsement_count=sum(n.endorsement_count for n in nodes),
                children=nodes,
            ))

        # Step 5: order categories
        categories.sort(key=_by_endorsements)

        if orphaned:
            logger.debug(f"{orphaned} endorsements reference skills no employee lists")

        logger.info(
            f"Built skill tree: {len(employees)} employees, {len(skills)} skills, "
            f"{len(categories)} categories, {len(endorsements)} endorsements"
        )

        # Step 6: root claims every employee and every endorsement event
        return RootNode(
            employees=list(employees),
            endorsement_count=len(endorsements),
            children=categories,
        )


def build_skill_tree(
    employees: Sequence[Employee],
    endorsements: Sequence[SkillEndorsement],
    classifier: Optional[SkillClassifier] = None,
) -> RootNode:
    """Build a skill tree with a one-off aggregator."""
    return TaxonomyAggregator(classifier).build(employees, endorsements)
