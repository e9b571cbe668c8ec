from .models import Task, TodoList
from .store import TodoListStore, active_tasks

__all__ = ["Task", "TodoList", "TodoListStore", "active_tasks"]
