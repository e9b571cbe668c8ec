"""Shared enums, types and time helpers for flowdesk."""

import time
from enum import StrEnum


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class GoalCategory(StrEnum):
    CAREER = "career"
    HEALTH = "health"
    LEARNING = "learning"
    PERSONAL = "personal"


class TaskStatus(StrEnum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class TaskPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Mood(StrEnum):
    GREAT = "great"
    GOOD = "good"
    OKAY = "okay"
    DOWN = "down"
    STRESSED = "stressed"


class StashItemType(StrEnum):
    NOTE = "note"
    LINK = "link"
    CODE = "code"


class SessionType(StrEnum):
    WORK = "work"
    SHORT_BREAK = "short-break"
    LONG_BREAK = "long-break"


class ResultType(StrEnum):
    GOAL = "goal"
    TASK = "task"
    JOURNAL = "journal"
    STASH = "stash"


class SearchFilter(StrEnum):
    ALL = "all"
    GOALS = "goals"
    TASKS = "tasks"
    JOURNAL = "journal"
    STASH = "stash"


# Per-user collection names in the document store
class Collection(StrEnum):
    GOALS = "goals"
    TODO_LISTS = "todoLists"
    JOURNAL = "journal"
    STASH = "stash"
    FOCUS_SESSIONS = "focusSessions"
