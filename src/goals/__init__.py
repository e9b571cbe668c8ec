from .models import Goal, Milestone
from .store import GoalStore

__all__ = ["Goal", "Milestone", "GoalStore"]
