"""Goal persistence and milestone operations."""

import uuid
from dataclasses import asdict
from typing import Optional

import structlog

from docstore import DocumentNotFoundError, DocumentStore
from shared_types import Collection, GoalCategory, now_ms

from .models import Goal, Milestone

logger = structlog.get_logger()

_EDITABLE_FIELDS = {"title", "description", "category", "target_date", "linked_task_ids"}


class GoalStore:
    """CRUD for a user's goals on top of the document store."""

    def __init__(self, documents: DocumentStore):
        self.documents = documents

    def list_goals(self, user_id: str) -> list[Goal]:
        return [Goal.from_dict(d) for d in self.documents.list(user_id, Collection.GOALS)]

    def get_goal(self, user_id: str, goal_id: str) -> Optional[Goal]:
        doc = self.documents.get(user_id, Collection.GOALS, goal_id)
        return Goal.from_dict(doc) if doc else None

    def add_goal(
        self,
        user_id: str,
        title: str,
        target_date: int,
        category: str = GoalCategory.PERSONAL,
        description: Optional[str] = None,
    ) -> Goal:
        """Create a goal with no milestones.

        Raises:
            ValueError: If title is blank or category unknown
        """
        if not title.strip():
            raise ValueError("Goal title is required")
        goal = Goal(
            id="",
            title=title,
            category=GoalCategory(category),
            target_date=target_date,
            description=description,
        )
        doc = self.documents.add(user_id, Collection.GOALS, goal.to_dict())
        logger.info("goal.created", user_id=user_id, goal_id=doc["id"])
        return Goal.from_dict(doc)

    def update_goal(self, user_id: str, goal_id: str, **fields) -> Goal:
        """Apply a partial update to the editable goal fields."""
        unknown = set(fields) - _EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update goal fields: {sorted(unknown)}")
        if "category" in fields:
            fields["category"] = str(GoalCategory(fields["category"]))
        if "title" in fields and not str(fields["title"]).strip():
            raise ValueError("Goal title is required")
        doc = self.documents.update(user_id, Collection.GOALS, goal_id, fields)
        return Goal.from_dict(doc)

    def delete_goal(self, user_id: str, goal_id: str) -> bool:
        return self.documents.delete(user_id, Collection.GOALS, goal_id)

    # --- Milestones ---

    def _require(self, user_id: str, goal_id: str) -> Goal:
        goal = self.get_goal(user_id, goal_id)
        if goal is None:
            raise DocumentNotFoundError(Collection.GOALS, goal_id)
        return goal

    def _save_milestones(self, user_id: str, goal: Goal, milestones: list[Milestone]) -> Goal:
        doc = self.documents.update(
            user_id,
            Collection.GOALS,
            goal.id,
            {"milestones": [asdict(m) for m in milestones]},
        )
        return Goal.from_dict(doc)

    def add_milestone(self, user_id: str, goal_id: str, title: str) -> Goal:
        """Append an open milestone to the end of the goal's list."""
        if not title.strip():
            raise ValueError("Milestone title is required")
        goal = self._require(user_id, goal_id)
        milestone = Milestone(id=uuid.uuid4().hex[:8], title=title)
        return self._save_milestones(user_id, goal, [*goal.milestones, milestone])

    def toggle_milestone(self, user_id: str, goal_id: str, milestone_id: str) -> Goal:
        """Flip completion; completing stamps completed_at, reopening clears it."""
        goal = self._require(user_id, goal_id)
        if not any(m.id == milestone_id for m in goal.milestones):
            raise DocumentNotFoundError(f"{Collection.GOALS}/{goal_id}/milestones", milestone_id)

        milestones = []
        for m in goal.milestones:
            if m.id == milestone_id:
                done = not m.completed
                m = Milestone(
                    id=m.id,
                    title=m.title,
                    completed=done,
                    completed_at=now_ms() if done else None,
                )
            milestones.append(m)
        return self._save_milestones(user_id, goal, milestones)

    def delete_milestone(self, user_id: str, goal_id: str, milestone_id: str) -> Goal:
        goal = self._require(user_id, goal_id)
        remaining = [m for m in goal.milestones if m.id != milestone_id]
        return self._save_milestones(user_id, goal, remaining)
