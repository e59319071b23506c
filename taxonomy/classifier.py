"""Skill classifier mapping free-text labels to fixed category buckets."""

import logging
import yaml
from pathlib import Path
from typing import Mapping, Optional, Union
from schemas.taxonomy import SkillCategory

logger = logging.getLogger(__name__)

DEFAULT_TABLE_PATH = Path(__file__).parent.parent / "config" / "skill_categories.yaml"


def load_category_table(path: Union[str, Path, None] = None) -> dict[SkillCategory, list[str]]:
    """
    Load a category membership table from YAML.

    The file maps category names (e.g. "Technology") to lists of skill labels.

    Args:
        path: Path to the YAML table (defaults to config/skill_categories.yaml)

    Returns:
        Mapping of category to member labels, in file order
    """
    if path is None:
        path = DEFAULT_TABLE_PATH

    with open(path, 'r') as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Category table must be a mapping, got {type(raw).__name__}: {path}")

    table = {}
    for name, labels in raw.items():
        try:
            category = SkillCategory(name)
        except ValueError:
            raise ValueError(f"Unknown skill category in {path}: {name!r}") from None
        table[category] = [str(label) for label in (labels or [])]

    logger.info(f"Loaded {sum(len(v) for v in table.values())} categorized skills from {path}")
    return table


class SkillClassifier:
    """
    Classify skill labels with a static membership table.

    Lookup is an exact string match by default. A label that differs only by case
    or surrounding whitespace from a listed entry falls through to Other unless
    normalize is enabled, in which case both sides are case-folded and trimmed.
    """

    def __init__(
        self,
        table: Optional[Mapping[SkillCategory, list[str]]] = None,
        normalize: bool = False,
    ):
        """
        Initialize classifier.

        Args:
            table: Category membership table (loaded from the default YAML if omitted)
            normalize: Match labels case- and whitespace-insensitively
        """
        if table is None:
            table = load_category_table()

        self.normalize = normalize
        self._index: dict[str, SkillCategory] = {}

        members: dict[SkillCategory, list[str]] = {}
        for name, labels in table.items():
            try:
                category = SkillCategory(name)
            except ValueError:
                raise ValueError(f"Unknown skill category: {name!r}") from None
            if category is SkillCategory.OTHER:
                raise ValueError("Other is the fallback bucket and cannot list skills")
            members[category] = list(labels)

        # Checked in enum order, first listing wins
        for category in SkillCategory:
            for label in members.get(category, []):
                self._index.setdefault(self._key(label), category)

    def _key(self, label: str) -> str:
        if self.normalize:
            return label.strip().casefold()
        return label

    def classify(self, label: str) -> SkillCategory:
        """Return the category for a skill label, defaulting to Other."""
        return self._index.get(self._key(label), SkillCategory.OTHER)

    @classmethod
    def from_path(cls, path: Union[str, Path], normalize: bool = False) -> "SkillClassifier":
        """Build a classifier from a YAML category table."""
        return cls(load_category_table(path), normalize=normalize)
