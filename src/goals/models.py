"""Goal and milestone data shapes."""

import math
from dataclasses import asdict, dataclass, field
from typing import Optional

from shared_types import GoalCategory, now_ms

DAY_MS = 24 * 60 * 60 * 1000


@dataclass
class Milestone:
    id: str
    title: str
    completed: bool = False
    completed_at: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Milestone":
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            completed=bool(data.get("completed", False)),
            completed_at=data.get("completed_at"),
        )


@dataclass
class Goal:
    id: str
    title: str
    category: GoalCategory = GoalCategory.PERSONAL
    target_date: int = 0
    description: Optional[str] = None
    milestones: list[Milestone] = field(default_factory=list)
    # Stored and returned as-is; nothing reconciles it against tasks.
    linked_task_ids: list[str] = field(default_factory=list)
    created_at: int = field(default_factory=now_ms)

    @property
    def completed_count(self) -> int:
        return sum(1 for m in self.milestones if m.completed)

    def progress(self) -> int:
        """Percent of milestones completed, rounded; 0 without milestones."""
        if not self.milestones:
            return 0
        return round(self.completed_count / len(self.milestones) * 100)

    def days_left(self, now: Optional[int] = None) -> int:
        """Whole days until target date, rounded up (negative when overdue)."""
        now = now_ms() if now is None else now
        return math.ceil((self.target_date - now) / DAY_MS)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["category"] = str(self.category)
        data.pop("id")
        if self.description is None:
            data.pop("description")
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Goal":
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            category=GoalCategory(data.get("category", GoalCategory.PERSONAL)),
            target_date=int(data.get("target_date", 0)),
            description=data.get("description"),
            milestones=[Milestone.from_dict(m) for m in data.get("milestones", [])],
            linked_task_ids=list(data.get("linked_task_ids", [])),
            created_at=int(data.get("created_at", 0)),
        )
