"""Todo list and task data shapes."""

from dataclasses import dataclass, field
from typing import Optional

from shared_types import TaskPriority, TaskStatus, now_ms


@dataclass
class Task:
    id: str
    title: str
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    description: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    created_at: int = field(default_factory=now_ms)

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.DONE

    def to_dict(self) -> dict:
        data = {
            "title": self.title,
            "status": str(self.status),
            "priority": str(self.priority),
            "tags": list(self.tags),
            "created_at": self.created_at,
        }
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            status=TaskStatus(data.get("status", TaskStatus.TODO)),
            priority=TaskPriority(data.get("priority", TaskPriority.MEDIUM)),
            description=data.get("description"),
            tags=list(data.get("tags", [])),
            created_at=int(data.get("created_at", 0)),
        )


@dataclass
class TodoList:
    id: str
    name: str
    tasks: list[Task] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict, tasks: Optional[list[Task]] = None) -> "TodoList":
        return cls(id=str(data["id"]), name=data.get("name", ""), tasks=tasks or [])
