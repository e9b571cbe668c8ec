"""Cross-feature search over a user's in-memory collections.

``search()`` scans goals, tasks, journal entries and stash items for a
case-insensitive substring and returns typed, ranked results for a
command-palette style UI.

Scoring (first satisfied field wins):

    goal     title 10, description 5
    task     title 10, description 5
    journal  content 8, any win 5        (learnings are not searched)
    stash    title 10, content 7, ai_summary 5

Results are ordered by score, highest first. The sort is stable, so equal
scores keep traversal order: goals, tasks (list by list), journal, stash.

The function is pure. It keeps no cache and never mutates its inputs, so
callers may memoize on (collections, query, filter).
"""

from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Union

from checkmate.models import TodoList
from goals.models import Goal
from journal.models import JournalEntry, format_entry_date
from shared_types import ResultType, SearchFilter, TaskStatus
from stash.models import StashItem

PREVIEW_CHARS = 100

TITLE_SCORE = 10
JOURNAL_CONTENT_SCORE = 8
STASH_CONTENT_SCORE = 7
SECONDARY_SCORE = 5


@dataclass(frozen=True)
class SearchCollections:
    """Snapshot of the four collections a search runs over."""

    goals: tuple[Goal, ...] = ()
    todo_lists: tuple[TodoList, ...] = ()
    journal_entries: tuple[JournalEntry, ...] = ()
    stash_items: tuple[StashItem, ...] = ()

    @classmethod
    def of(cls, goals=(), todo_lists=(), journal_entries=(), stash_items=()) -> "SearchCollections":
        return cls(tuple(goals), tuple(todo_lists), tuple(journal_entries), tuple(stash_items))


@dataclass(frozen=True)
class _Result:
    type: ClassVar[ResultType]
    path: ClassVar[str]

    id: str
    title: str
    preview: str
    match_score: int

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "type": str(self.type),
            "title": self.title,
            "preview": self.preview,
            "path": self.path,
            "match_score": self.match_score,
        }
        description = getattr(self, "description", None)
        if description is not None:
            data["description"] = description
        return data


@dataclass(frozen=True)
class GoalResult(_Result):
    type: ClassVar[ResultType] = ResultType.GOAL
    path: ClassVar[str] = "/goals"

    description: Optional[str] = None


@dataclass(frozen=True)
class TaskResult(_Result):
    type: ClassVar[ResultType] = ResultType.TASK
    path: ClassVar[str] = "/checkmate"

    description: Optional[str] = None


@dataclass(frozen=True)
class JournalResult(_Result):
    type: ClassVar[ResultType] = ResultType.JOURNAL
    path: ClassVar[str] = "/journal"


@dataclass(frozen=True)
class StashResult(_Result):
    type: ClassVar[ResultType] = ResultType.STASH
    path: ClassVar[str] = "/stash"

    description: Optional[str] = None


SearchResult = Union[GoalResult, TaskResult, JournalResult, StashResult]


def _contains(text: Optional[str], needle: str) -> bool:
    return bool(text) and needle in text.lower()


def _search_goals(goals, needle: str) -> Iterator[GoalResult]:
    for goal in goals:
        title_match = _contains(goal.title, needle)
        if not (title_match or _contains(goal.description, needle)):
            continue
        yield GoalResult(
            id=goal.id,
            title=goal.title,
            description=goal.description,
            preview=goal.description or f"{len(goal.milestones)} milestones",
            match_score=TITLE_SCORE if title_match else SECONDARY_SCORE,
        )


def _search_tasks(todo_lists, needle: str) -> Iterator[TaskResult]:
    for todo_list in todo_lists:
        for task in todo_list.tasks:
            title_match = _contains(task.title, needle)
            if not (title_match or _contains(task.description, needle)):
                continue
            state = "Completed" if task.status == TaskStatus.DONE else "Active"
            yield TaskResult(
                id=task.id,
                title=task.title,
                description=task.description,
                preview=f"{todo_list.name} • {state}",
                match_score=TITLE_SCORE if title_match else SECONDARY_SCORE,
            )


def _search_journal(entries, needle: str) -> Iterator[JournalResult]:
    for entry in entries:
        content_match = _contains(entry.content, needle)
        wins_match = any(_contains(win, needle) for win in entry.wins or ())
        if not (content_match or wins_match):
            continue
        yield JournalResult(
            id=entry.id,
            title=format_entry_date(entry.date),
            # Ellipsis is appended even when content is short.
            preview=entry.content[:PREVIEW_CHARS] + "...",
            match_score=JOURNAL_CONTENT_SCORE if content_match else SECONDARY_SCORE,
        )


def _search_stash(items, needle: str) -> Iterator[StashResult]:
    for item in items:
        title_match = _contains(item.title, needle)
        content_match = _contains(item.content, needle)
        if not (title_match or content_match or _contains(item.ai_summary, needle)):
            continue
        if title_match:
            score = TITLE_SCORE
        elif content_match:
            score = STASH_CONTENT_SCORE
        else:
            score = SECONDARY_SCORE
        yield StashResult(
            id=item.id,
            title=item.title,
            description=str(item.type),
            preview=item.ai_summary or item.content[:PREVIEW_CHARS],
            match_score=score,
        )


def search(
    collections: SearchCollections,
    query: str,
    filter: str = SearchFilter.ALL,
) -> list[SearchResult]:
    """Rank matches for ``query`` across the collections selected by ``filter``.

    Args:
        collections: The user's current goals, todo lists, journal and stash
        query: Free text; blank (after trimming) yields no results
        filter: "all" or one of "goals", "tasks", "journal", "stash". Only the
            selected collection is scanned; an unrecognised value scans nothing.

    Returns:
        Results sorted by match_score, highest first
    """
    if not query.strip():
        return []

    # Matching uses the untrimmed query.
    needle = query.lower()
    wanted = str(filter)

    def selected(kind: SearchFilter) -> bool:
        return wanted in (SearchFilter.ALL, kind)

    results: list[SearchResult] = []
    if selected(SearchFilter.GOALS):
        results.extend(_search_goals(collections.goals, needle))
    if selected(SearchFilter.TASKS):
        results.extend(_search_tasks(collections.todo_lists, needle))
    if selected(SearchFilter.JOURNAL):
        results.extend(_search_journal(collections.journal_entries, needle))
    if selected(SearchFilter.STASH):
        results.extend(_search_stash(collections.stash_items, needle))

    return sorted(results, key=lambda r: r.match_score, reverse=True)
