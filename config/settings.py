"""Application settings."""

import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field

DEFAULT_CATEGORIES_PATH = str(Path(__file__).parent / "skill_categories.yaml")


class Settings(BaseModel):
    """Skill directory configuration settings."""

    # Category membership table
    categories_path: str = DEFAULT_CATEGORIES_PATH
    normalize_skill_labels: bool = False  # Case/whitespace-insensitive classification

    # Quick search tuning
    match_threshold: float = Field(0.3, ge=0.0, le=1.0)
    name_boost: float = 0.5
    title_boost: float = 0.3
    max_results: int = Field(8, ge=0)

    # Stats
    top_skills: int = Field(5, ge=0)

    # Memoized query results kept per directory
    search_cache_size: int = Field(128, ge=0)

    # Snapshot sources (CLI)
    employees_path: Optional[str] = None
    endorsements_path: Optional[str] = None

    # Logging
    verbose: bool = False

    def __init__(self, **data):
        # Allow the category table to be swapped from the environment
        if data.get("categories_path") is None:
            env_path = os.environ.get("SKILL_CATEGORIES_PATH")
            data["categories_path"] = env_path or DEFAULT_CATEGORIES_PATH

        if data.get("normalize_skill_labels") is None:
            data["normalize_skill_labels"] = os.environ.get("NORMALIZE_SKILL_LABELS", "0") == "1"

        super().__init__(**data)
