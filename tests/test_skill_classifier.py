"""Tests for the skill classifier."""

import pytest
from schemas.taxonomy import SkillCategory
from taxonomy.classifier import SkillClassifier, load_category_table


class TestSkillClassifier:
    """Test static category lookup."""

    def setup_method(self):
        """Set up test fixtures."""
        self.classifier = SkillClassifier()

    def test_default_table_categories(self):
        """Test labels from each default membership list."""
        assert self.classifier.classify("React") == SkillCategory.TECHNOLOGY
        assert self.classifier.classify("Figma") == SkillCategory.DESIGN
        assert self.classifier.classify("Machine Learning") == SkillCategory.ANALYTICS
        assert self.classifier.classify("SEO") == SkillCategory.MARKETING
        assert self.classifier.classify("Agile") == SkillCategory.MANAGEMENT
        assert self.classifier.classify("Tax Planning") == SkillCategory.FINANCE

    def test_unknown_label_is_other(self):
        """Test unlisted labels fall into Other."""
        assert self.classifier.classify("Blockchain") == SkillCategory.OTHER
        assert self.classifier.classify("") == SkillCategory.OTHER

    def test_exact_match_is_case_sensitive(self):
        """Test case or whitespace differences fall through to Other by default."""
        assert self.classifier.classify("react") == SkillCategory.OTHER
        assert self.classifier.classify(" React") == SkillCategory.OTHER
        assert self.classifier.classify("REACT ") == SkillCategory.OTHER

    def test_normalize_mode(self):
        """Test opt-in normalization folds case and trims both sides."""
        classifier = SkillClassifier(normalize=True)

        assert classifier.classify("react") == SkillCategory.TECHNOLOGY
        assert classifier.classify("  REACT ") == SkillCategory.TECHNOLOGY
        assert classifier.classify("figma") == SkillCategory.DESIGN
        assert classifier.classify("blockchain") == SkillCategory.OTHER

    def test_injected_table(self):
        """Test a custom table replaces the default lists."""
        classifier = SkillClassifier({"Marketing": ["React"]})

        assert classifier.classify("React") == SkillCategory.MARKETING
        assert classifier.classify("Python") == SkillCategory.OTHER

    def test_first_category_in_enum_order_wins(self):
        """Test a label listed twice resolves in enum order, not table order."""
        classifier = SkillClassifier({
            SkillCategory.FINANCE: ["Excel"],
            SkillCategory.ANALYTICS: ["Excel"],
        })

        assert classifier.classify("Excel") == SkillCategory.ANALYTICS

    def test_unknown_category_rejected(self):
        """Test tables naming unknown categories are configuration errors."""
        with pytest.raises(ValueError):
            SkillClassifier({"Cooking": ["Baking"]})

    def test_other_cannot_list_skills(self):
        """Test the fallback bucket cannot be populated."""
        with pytest.raises(ValueError):
            SkillClassifier({"Other": ["Anything"]})


class TestLoadCategoryTable:
    """Test YAML category table loading."""

    def test_default_table(self):
        """Test the bundled table covers every non-fallback category."""
        table = load_category_table()

        assert set(table) == set(SkillCategory) - {SkillCategory.OTHER}
        assert "TypeScript" in table[SkillCategory.TECHNOLOGY]
        assert "Risk Management" in table[SkillCategory.FINANCE]

    def test_custom_table_file(self, tmp_path):
        """Test loading and classifying from a custom YAML file."""
        path = tmp_path / "categories.yaml"
        path.write_text("Design:\n  - Sketch\nTechnology:\n  - Rust\n")

        classifier = SkillClassifier.from_path(path)

        assert classifier.classify("Sketch") == SkillCategory.DESIGN
        assert classifier.classify("Rust") == SkillCategory.TECHNOLOGY
        assert classifier.classify("React") == SkillCategory.OTHER

    def test_empty_file(self, tmp_path):
        """Test an empty table classifies everything as Other."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        classifier = SkillClassifier(load_category_table(path))

        assert classifier.classify("React") == SkillCategory.OTHER

    def test_non_mapping_rejected(self, tmp_path):
        """Test a YAML list is not a valid table."""
        path = tmp_path / "list.yaml"
        path.write_text("- React\n- Python\n")

        with pytest.raises(ValueError):
            load_category_table(path)

    def test_unknown_category_in_file(self, tmp_path):
        """Test unknown category names in the file are rejected."""
        path = tmp_path / "bad.yaml"
        path.write_text("Cooking:\n  - Baking\n")

        with pytest.raises(ValueError):
            load_category_table(path)

    def test_missing_file(self, tmp_path):
        """Test a missing table file surfaces as FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_category_table(tmp_path / "missing.yaml")
