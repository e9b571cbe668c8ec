from .aggregator import (
    GoalResult,
    JournalResult,
    SearchCollections,
    SearchResult,
    StashResult,
    TaskResult,
    search,
)
from .palette import KeyEvent, SearchPalette, is_open_shortcut

__all__ = [
    "search",
    "SearchCollections",
    "SearchResult",
    "GoalResult",
    "TaskResult",
    "JournalResult",
    "StashResult",
    "SearchPalette",
    "KeyEvent",
    "is_open_shortcut",
]
