"""Keyboard navigation over quick search results."""

import logging
from enum import Enum
from typing import Callable, Optional, Sequence
from schemas.directory import Employee
from schemas.search import EmployeeMatch, SearchResult, SkillMatch
from search.engine import SearchEngine

logger = logging.getLogger(__name__)


class Key(str, Enum):
    """Keys the quick search dropdown reacts to."""
    UP = "ArrowUp"
    DOWN = "ArrowDown"
    ENTER = "Enter"
    ESCAPE = "Escape"


class NavigationState(str, Enum):
    """Visible state of the dropdown."""
    CLOSED = "closed"
    OPEN_NO_SELECTION = "open-no-selection"
    OPEN_SELECTION = "open-selection"


class QuickSearchSession:
    """
    Query box state layered over the search engine.

    The session re-runs the search on every query change and tracks which
    result is highlighted. Index -1 means nothing is highlighted. The dropdown
    is open whenever the trimmed query is non-empty and there are results.
    Committing a result, or pressing Escape, closes it and clears the query.
    """

    def __init__(
        self,
        employees: Sequence[Employee],
        engine: Optional[SearchEngine] = None,
        on_employee_select: Optional[Callable[[Employee], None]] = None,
        on_skill_select: Optional[Callable[[str], None]] = None,
    ):
        self.employees = list(employees)
        self.engine = engine or SearchEngine()
        self.on_employee_select = on_employee_select
        self.on_skill_select = on_skill_select

        self.query = ""
        self.results: list[SearchResult] = []
        self.selected_index = -1
        self.is_open = False

    @property
    def state(self) -> NavigationState:
        if not self.is_open:
            return NavigationState.CLOSED
        if self.selected_index < 0:
            return NavigationState.OPEN_NO_SELECTION
        return NavigationState.OPEN_SELECTION

    @property
    def selected(self) -> Optional[SearchResult]:
        """Highlighted result, if any."""
        if 0 <= self.selected_index < len(self.results):
            return self.results[self.selected_index]
        return None

    def set_query(self, query: str):
        """Update the query text and recompute results."""
        self.query = query
        self._refresh()

    def set_employees(self, employees: Sequence[Employee]):
        """Replace the employee snapshot and re-run the current query."""
        self.employees = list(employees)
        self._refresh()

    def _refresh(self):
        self.results = self.engine.search(self.employees, self.query)
        self.selected_index = -1
        self.is_open = bool(self.query.strip()) and len(self.results) > 0

    def press(self, key: Key) -> Optional[SearchResult]:
        """
        Handle a key press.

        Args:
            key: Key pressed in the query box

        Returns:
            The committed result, if Enter committed one
        """
        key = Key(key)

        if key is Key.DOWN:
            if self.is_open:
                self.selected_index = min(self.selected_index + 1, len(self.results) - 1)
        elif key is Key.UP:
            if self.is_open:
                self.selected_index = max(self.selected_index - 1, -1)
        elif key is Key.ENTER:
            return self._enter()
        elif key is Key.ESCAPE:
            self._close()

        return None

    def _enter(self) -> Optional[SearchResult]:
        selected = self.selected
        if selected is not None:
            self.select(selected)
            return selected

        if self.results:
            first = self.results[0]
            self.select(first)
            return first

        text = self.query.strip()
        if text and self.on_skill_select:
            # No matches: treat the raw query as an ad-hoc skill
            logger.debug(f"Committing ad-hoc skill {text!r}")
            self.on_skill_select(text)
            self._close()

        return None

    def select(self, result: SearchResult):
        """Commit a result (keyboard or click) and reset the query box."""
        if isinstance(result, EmployeeMatch) and self.on_employee_select:
            self.on_employee_select(result.employee)
        elif isinstance(result, SkillMatch) and self.on_skill_select:
            self.on_skill_select(result.skill)

        self._close()

    def _close(self):
        self.query = ""
        self.results = []
        self.selected_index = -1
        self.is_open = False
