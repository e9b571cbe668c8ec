"""Overview numbers for the dashboard."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from checkmate.models import TodoList
from goals.models import Goal
from journal.models import JournalEntry
from stash.models import StashItem

RECENT_ENTRIES = 3


@dataclass
class GoalProgress:
    id: str
    title: str
    progress: int
    days_left: int


@dataclass
class DashboardStats:
    tasks_completed: int = 0
    tasks_pending: int = 0
    stash_by_type: dict[str, int] = field(default_factory=dict)
    goals: list[GoalProgress] = field(default_factory=list)
    recent_entries: list[JournalEntry] = field(default_factory=list)
    focus_minutes: int = 0

    @property
    def task_total(self) -> int:
        return self.tasks_completed + self.tasks_pending


def task_counts(todo_lists: Iterable[TodoList]) -> tuple[int, int]:
    """(completed, pending) across all lists."""
    completed = pending = 0
    for todo_list in todo_lists:
        for task in todo_list.tasks:
            if task.is_done:
                completed += 1
            else:
                pending += 1
    return completed, pending


def stash_type_counts(items: Iterable[StashItem]) -> dict[str, int]:
    """Item counts keyed by capitalized type label, e.g. {"Link": 2, "Note": 1}."""
    counts = Counter(str(item.type).capitalize() for item in items)
    return dict(sorted(counts.items()))


def recent_journal_entries(entries: Iterable[JournalEntry], limit: int = RECENT_ENTRIES) -> list[JournalEntry]:
    return sorted(entries, key=lambda e: e.date, reverse=True)[:limit]


def build_stats(
    goals: Iterable[Goal],
    todo_lists: Iterable[TodoList],
    journal_entries: Iterable[JournalEntry],
    stash_items: Iterable[StashItem],
    focus_minutes: int = 0,
    now: int | None = None,
) -> DashboardStats:
    completed, pending = task_counts(todo_lists)
    return DashboardStats(
        tasks_completed=completed,
        tasks_pending=pending,
        stash_by_type=stash_type_counts(stash_items),
        goals=[
            GoalProgress(id=g.id, title=g.title, progress=g.progress(), days_left=g.days_left(now))
            for g in goals
        ],
        recent_entries=recent_journal_entries(journal_entries),
        focus_minutes=focus_minutes,
    )
