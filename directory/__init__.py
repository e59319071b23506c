"""Directory snapshot loading and the skill directory facade."""

from .loader import SnapshotLoader
from .skill_directory import SkillDirectory

__all__ = ["SnapshotLoader", "SkillDirectory"]
