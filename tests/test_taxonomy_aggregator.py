"""Tests for the taxonomy aggregator."""

from schemas.directory import Employee, SkillEndorsement
from schemas.taxonomy import ROOT_NAME, SkillCategory
from taxonomy.aggregator import TaxonomyAggregator, build_skill_tree
from taxonomy.classifier import SkillClassifier
from tests.sample_data import sample_employees, sample_endorsements


def ids(employees):
    return [e.id for e in employees]


class TestTaxonomyAggregator:
    """Test building the root -> category -> skill tree."""

    def setup_method(self):
        """Set up test fixtures."""
        self.aggregator = TaxonomyAggregator(SkillClassifier())
        self.sarah = Employee(
            id=1,
            name="Sarah Chen",
            title="Senior Frontend Developer",
            skills=["React", "TypeScript"],
        )

    def test_single_employee_no_endorsements(self):
        """Test a single employee produces one category with two skills."""
        root = self.aggregator.build([self.sarah], [])

        assert root.level == 0
        assert root.name == ROOT_NAME
        assert root.endorsement_count == 0
        assert len(root.children) == 1

        technology = root.children[0]
        assert technology.name == "Technology"
        assert technology.category == SkillCategory.TECHNOLOGY
        assert [s.name for s in technology.children] == ["React", "TypeScript"]
        for skill in technology.children:
            assert skill.level == 2
            assert ids(skill.employees) == [1]
            assert skill.endorsement_count == 0

    def test_single_employee_with_endorsements(self):
        """Test endorsement events add up at skill, category and root."""
        endorsements = [
            SkillEndorsement(skill="React", employee_id=1),
            SkillEndorsement(skill="React", employee_id=1),
        ]

        root = self.aggregator.build([self.sarah], endorsements)

        technology = root.children[0]
        skills = {s.name: s for s in technology.children}
        assert skills["React"].endorsement_count == 2
        assert skills["TypeScript"].endorsement_count == 0
        assert technology.endorsement_count == 2
        assert root.endorsement_count == 2

    def test_empty_snapshot(self):
        """Test empty input yields a valid empty root."""
        root = self.aggregator.build([], [])

        assert root.children == []
        assert root.employees == []
        assert root.endorsement_count == 0

    def test_orphaned_endorsements_count_only_at_root(self):
        """Test endorsements for unlisted skills create no nodes."""
        root = self.aggregator.build([], [SkillEndorsement(skill="Cobol", employee_id=9)])

        assert root.children == []
        assert root.endorsement_count == 1

    def test_root_keeps_employees_without_skills(self):
        """Test the root claims every employee, skilled or not."""
        idle = Employee(id=7, name="New Hire", title="Intern", skills=[])

        root = self.aggregator.build([self.sarah, idle], [])

        assert ids(root.employees) == [1, 7]
        assert all(7 not in ids(c.employees) for c in root.children)

    def test_duplicate_label_counts_employee_once(self):
        """Test repeated labels on one employee are idempotent."""
        employee = Employee(id=1, name="A", title="B", skills=["React", "React"])

        root = self.aggregator.build([employee], [])

        react = root.children[0].children[0]
        assert ids(react.employees) == [1]

    def test_labels_are_not_merged_by_case(self):
        """Test labels differing by case stay separate nodes."""
        employees = [
            Employee(id=1, name="A", title="B", skills=["React"]),
            Employee(id=2, name="C", title="D", skills=["react"]),
        ]

        root = self.aggregator.build(employees, [])

        categories = {c.name: c for c in root.children}
        assert [s.name for s in categories["Technology"].children] == ["React"]
        assert [s.name for s in categories["Other"].children] == ["react"]

    def test_normalizing_classifier_groups_by_category_only(self):
        """Test normalization affects the category, not the node label."""
        aggregator = TaxonomyAggregator(SkillClassifier(normalize=True))
        employees = [
            Employee(id=1, name="A", title="B", skills=["React"]),
            Employee(id=2, name="C", title="D", skills=["react"]),
        ]

        root = aggregator.build(employees, [])

        assert len(root.children) == 1
        assert [s.name for s in root.children[0].children] == ["React", "react"]

    def test_build_skill_tree_helper(self):
        """Test the module-level helper matches the aggregator."""
        root = build_skill_tree([self.sarah], [])

        assert [c.name for c in root.children] == ["Technology"]


class TestTaxonomyOrdering:
    """Test ordering and aggregation over a multi-category snapshot."""

    def setup_method(self):
        """Set up test fixtures."""
        self.employees = sample_employees()
        self.endorsements = sample_endorsements()
        self.root = TaxonomyAggregator().build(self.employees, self.endorsements)
        self.categories = {c.name: c for c in self.root.children}

    def test_category_order(self):
        """Test categories sorted by endorsements, ties in first-seen order."""
        assert [c.name for c in self.root.children] == [
            "Technology", "Design", "Other", "Analytics", "Management", "Finance"
        ]

    def test_first_seen_order_without_endorsements(self):
        """Test ties everywhere keep insertion order."""
        root = TaxonomyAggregator().build(self.employees, [])

        assert [c.name for c in root.children] == [
            "Technology", "Design", "Analytics", "Management", "Finance", "Other"
        ]
        assert [s.name for s in root.children[0].children] == [
            "React", "TypeScript", "Python", "SQL"
        ]

    def test_skill_order_within_category(self):
        """Test skills sorted by descending endorsements, ties stable."""
        technology = self.categories["Technology"]

        assert [s.name for s in technology.children] == ["React", "SQL", "TypeScript", "Python"]
        assert [s.endorsement_count for s in technology.children] == [3, 2, 0, 0]

    def test_non_increasing_counts(self):
        """Test every level is in non-increasing endorsement order."""
        counts = [c.endorsement_count for c in self.root.children]
        assert counts == sorted(counts, reverse=True)

        for category in self.root.children:
            counts = [s.endorsement_count for s in category.children]
            assert counts == sorted(counts, reverse=True)

    def test_category_employees_are_union(self):
        """Test category employees are the de-duplicated union of skill employees."""
        for category in self.root.children:
            category_ids = ids(category.employees)
            expected = set()
            for skill in category.children:
                expected.update(ids(skill.employees))

            assert len(category_ids) == len(set(category_ids))
            assert set(category_ids) == expected

    def test_shared_skill_employee_not_double_counted(self):
        """Test an employee holding two skills in one category appears once."""
        technology = self.categories["Technology"]

        # React is held by 1 and 4, TypeScript by 1, Python and SQL by 3
        assert sorted(ids(technology.employees)) == [1, 3, 4]

    def test_category_counts_are_sums(self):
        """Test category counts are the sum of their skills."""
        for category in self.root.children:
            assert category.endorsement_count == sum(s.endorsement_count for s in category.children)

    def test_root_totals(self):
        """Test root counts every employee and every supplied event."""
        assert len(self.root.employees) == len(self.employees)
        assert self.root.endorsement_count == len(self.endorsements)

        category_total = sum(c.endorsement_count for c in self.root.children)
        orphaned = 1  # Cobol
        assert category_total == self.root.endorsement_count - orphaned

    def test_rebuild_is_fresh(self):
        """Test each build returns new node objects."""
        again = TaxonomyAggregator().build(self.employees, self.endorsements)

        assert again == self.root
        assert again is not self.root
        assert again.children[0] is not self.root.children[0]
