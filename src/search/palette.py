"""Interaction state for the search palette, independent of any renderer.

A renderer (web client, TUI) forwards key events and query/filter edits and
reads back ``results``, ``grouped()`` and ``selected_index``. Navigation and
input focus happen through injected callbacks.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import structlog

from shared_types import ResultType, SearchFilter

from .aggregator import SearchCollections, SearchResult, search

logger = structlog.get_logger()

GROUP_ORDER = (ResultType.GOAL, ResultType.TASK, ResultType.JOURNAL, ResultType.STASH)

OPEN_SHORTCUT_KEY = "k"


@dataclass(frozen=True)
class KeyEvent:
    key: str
    ctrl: bool = False
    meta: bool = False


def is_open_shortcut(event: KeyEvent) -> bool:
    """Ctrl+K or Cmd/Meta+K."""
    return event.key.lower() == OPEN_SHORTCUT_KEY and (event.ctrl or event.meta)


class SearchPalette:
    """Query, filter, result cursor and open state of the palette."""

    def __init__(
        self,
        collections: Callable[[], SearchCollections],
        navigate: Callable[[str], None],
        focus_input: Optional[Callable[[], None]] = None,
        searcher: Callable[..., list[SearchResult]] = search,
    ):
        self._collections = collections
        self._navigate = navigate
        self._focus_input = focus_input
        self._searcher = searcher

        self.is_open = False
        self.query = ""
        self.filter: str = SearchFilter.ALL
        self.selected_index = 0
        self._results: list[SearchResult] = []
        self._computed_for: Optional[tuple] = None

    # --- Results ---

    @property
    def results(self) -> list[SearchResult]:
        """Current results, recomputed only when query, filter or data change."""
        snapshot = self._collections()
        key = (snapshot, self.query, self.filter)
        if self._computed_for is None or not self._same_inputs(key):
            self._results = self._searcher(snapshot, self.query, self.filter)
            self._computed_for = key
            self.selected_index = 0
        return self._results

    def _same_inputs(self, key: tuple) -> bool:
        # Identity only: changed data arrives as a new snapshot object.
        snapshot, query, filter_ = key
        prev_snapshot, prev_query, prev_filter = self._computed_for
        return snapshot is prev_snapshot and query == prev_query and filter_ == prev_filter

    def grouped(self) -> list[tuple[ResultType, list[SearchResult]]]:
        """Results grouped by type in fixed order; empty groups are left out."""
        groups: dict[ResultType, list[SearchResult]] = {t: [] for t in GROUP_ORDER}
        for result in self.results:
            groups[result.type].append(result)
        return [(t, groups[t]) for t in GROUP_ORDER if groups[t]]

    @property
    def selected(self) -> Optional[SearchResult]:
        results = self.results
        if 0 <= self.selected_index < len(results):
            return results[self.selected_index]
        return None

    # --- Edits ---

    def set_query(self, query: str) -> None:
        self.query = query
        self.selected_index = 0

    def set_filter(self, filter_: str) -> None:
        self.filter = str(filter_)
        self.selected_index = 0

    # --- Open / close ---

    def open(self) -> None:
        """Open the palette; input focus is requested once per open transition."""
        if self.is_open:
            return
        self.is_open = True
        logger.debug("search_palette.opened")
        if self._focus_input:
            self._focus_input()

    def dismiss(self) -> None:
        self.is_open = False

    # --- Cursor ---

    def next(self) -> None:
        last = len(self.results) - 1
        self.selected_index = max(min(self.selected_index + 1, last), 0)

    def previous(self) -> None:
        if self.results:
            self.selected_index = max(self.selected_index - 1, 0)

    def activate(self) -> Optional[SearchResult]:
        """Navigate to the selected result, then clear the query and close."""
        result = self.selected
        if result is None:
            return None
        self._navigate(result.path)
        self.dismiss()
        self.set_query("")
        logger.info("search_palette.activated", result_type=str(result.type), path=result.path)
        return result

    # --- Keyboard ---

    def handle_key(self, event: KeyEvent) -> bool:
        """Dispatch a key press; returns True when the palette consumed it."""
        if is_open_shortcut(event):
            if self.is_open:
                return False
            self.open()
            return True

        if not self.is_open:
            return False

        if event.key == "ArrowDown":
            self.next()
        elif event.key == "ArrowUp":
            self.previous()
        elif event.key == "Enter":
            if self.selected is None:
                return False
            self.activate()
        elif event.key == "Escape":
            self.dismiss()
        else:
            return False
        return True
