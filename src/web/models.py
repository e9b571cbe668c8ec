"""Pydantic request schemas for the web API."""

from typing import Optional

from pydantic import BaseModel, Field

from shared_types import GoalCategory, Mood, SessionType, TaskPriority, TaskStatus

# --- Goals ---


class GoalCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    target_date: int
    category: GoalCategory = GoalCategory.PERSONAL
    description: Optional[str] = Field(None, max_length=5000)


class GoalUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    target_date: Optional[int] = None
    category: Optional[GoalCategory] = None
    description: Optional[str] = Field(None, max_length=5000)
    linked_task_ids: Optional[list[str]] = None


class MilestoneAdd(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)


# --- Todo lists ---


class TodoListCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = Field(None, max_length=5000)
    priority: TaskPriority = TaskPriority.MEDIUM
    tags: list[str] = []


class TaskUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    description: Optional[str] = Field(None, max_length=5000)
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    tags: Optional[list[str]] = None


class TaskPrompt(BaseModel):
    prompt: str = Field(..., min_length=1, max_length=2000)


# --- Journal ---


class JournalSave(BaseModel):
    content: str = Field(..., max_length=100_000)
    mood: Mood = Mood.GOOD
    wins: list[str] = []
    learnings: list[str] = []


# --- Stash ---


class StashCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=20_000)


# --- Focus ---


class FocusSessionCreate(BaseModel):
    session_type: SessionType = SessionType.WORK
    duration: int = Field(..., gt=0)
    started_at: int
    completed_at: Optional[int] = None
    task_id: Optional[str] = None
    task_title: Optional[str] = None
