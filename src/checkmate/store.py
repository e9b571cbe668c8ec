"""Todo lists with nested task collections."""

from typing import Iterable, Optional

import structlog

from docstore import DocumentNotFoundError, DocumentStore
from shared_types import Collection, TaskPriority, TaskStatus

from .models import Task, TodoList

logger = structlog.get_logger()

_EDITABLE_TASK_FIELDS = {"title", "description", "status", "priority", "tags"}


def tasks_collection(list_id: str) -> str:
    """Document-store path of a list's task sub-collection."""
    return f"{Collection.TODO_LISTS}/{list_id}/tasks"


class TodoListStore:
    """CRUD for todo lists and the tasks nested under each list."""

    def __init__(self, documents: DocumentStore):
        self.documents = documents

    def list_todo_lists(self, user_id: str) -> list[TodoList]:
        """All lists, each with its tasks loaded in insertion order."""
        lists = []
        for doc in self.documents.list(user_id, Collection.TODO_LISTS):
            tasks = [
                Task.from_dict(t) for t in self.documents.list(user_id, tasks_collection(doc["id"]))
            ]
            lists.append(TodoList.from_dict(doc, tasks))
        return lists

    def add_todo_list(self, user_id: str, name: str) -> TodoList:
        if not name.strip():
            raise ValueError("List name is required")
        doc = self.documents.add(user_id, Collection.TODO_LISTS, {"name": name})
        logger.info("todo_list.created", user_id=user_id, list_id=doc["id"])
        return TodoList.from_dict(doc)

    def rename_todo_list(self, user_id: str, list_id: str, name: str) -> None:
        if not name.strip():
            raise ValueError("List name is required")
        self.documents.update(user_id, Collection.TODO_LISTS, list_id, {"name": name})

    def delete_todo_list(self, user_id: str, list_id: str) -> bool:
        """Delete a list together with all of its tasks."""
        return self.documents.delete(user_id, Collection.TODO_LISTS, list_id)

    def require_list(self, user_id: str, list_id: str) -> None:
        """Raise DocumentNotFoundError unless the list exists."""
        if self.documents.get(user_id, Collection.TODO_LISTS, list_id) is None:
            raise DocumentNotFoundError(Collection.TODO_LISTS, list_id)

    def add_task(
        self,
        user_id: str,
        list_id: str,
        title: str,
        description: Optional[str] = None,
        priority: str = TaskPriority.MEDIUM,
        tags: Optional[list[str]] = None,
    ) -> Task:
        if not title.strip():
            raise ValueError("Task title is required")
        self.require_list(user_id, list_id)
        task = Task(
            id="",
            title=title,
            priority=TaskPriority(priority),
            description=description,
            tags=tags or [],
        )
        doc = self.documents.add(user_id, tasks_collection(list_id), task.to_dict())
        return Task.from_dict(doc)

    def add_tasks(self, user_id: str, list_id: str, titles: Iterable[str]) -> list[Task]:
        """Bulk-add plain tasks (todo, medium priority, no tags), skipping blanks."""
        return [self.add_task(user_id, list_id, t) for t in titles if t and t.strip()]

    def get_task(self, user_id: str, list_id: str, task_id: str) -> Optional[Task]:
        doc = self.documents.get(user_id, tasks_collection(list_id), task_id)
        return Task.from_dict(doc) if doc else None

    def update_task(self, user_id: str, list_id: str, task_id: str, **fields) -> Task:
        unknown = set(fields) - _EDITABLE_TASK_FIELDS
        if unknown:
            raise ValueError(f"Cannot update task fields: {sorted(unknown)}")
        if "status" in fields:
            fields["status"] = str(TaskStatus(fields["status"]))
        if "priority" in fields:
            fields["priority"] = str(TaskPriority(fields["priority"]))
        doc = self.documents.update(user_id, tasks_collection(list_id), task_id, fields)
        return Task.from_dict(doc)

    def toggle_task(self, user_id: str, list_id: str, task_id: str) -> Task:
        """Done tasks go back to todo; anything else becomes done."""
        task = self.get_task(user_id, list_id, task_id)
        if task is None:
            raise DocumentNotFoundError(tasks_collection(list_id), task_id)
        status = TaskStatus.TODO if task.is_done else TaskStatus.DONE
        return self.update_task(user_id, list_id, task_id, status=status)

    def delete_task(self, user_id: str, list_id: str, task_id: str) -> bool:
        return self.documents.delete(user_id, tasks_collection(list_id), task_id)


def active_tasks(todo_lists: Iterable[TodoList]) -> list[Task]:
    """Tasks across all lists that are not done, in list order."""
    return [t for lst in todo_lists for t in lst.tasks if not t.is_done]
