"""Quick search: fuzzy scoring, ranking and keyboard navigation."""

from .fuzzy import fuzzy_score
from .engine import SearchEngine, quick_search
from .navigation import Key, NavigationState, QuickSearchSession

__all__ = [
    "fuzzy_score",
    "SearchEngine",
    "quick_search",
    "Key",
    "NavigationState",
    "QuickSearchSession",
]
