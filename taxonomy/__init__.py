"""Skill taxonomy: classification, aggregation and lookups."""

from .classifier import SkillClassifier, load_category_table
from .aggregator import TaxonomyAggregator, build_skill_tree
from .stats import employees_with_skill, skill_stats, iter_nodes, find_skill

__all__ = [
    "SkillClassifier",
    "load_category_table",
    "TaxonomyAggregator",
    "build_skill_tree",
    "employees_with_skill",
    "skill_stats",
    "iter_nodes",
    "find_skill",
]
