"""Todo lists and tasks routes (per-user), including AI task generation."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from checkmate import Task, TodoList, TodoListStore
from enrichment import EnrichmentService
from web.auth import get_current_user
from web.deps import get_enrichment, get_todo_list_store
from web.models import TaskCreate, TaskPrompt, TaskUpdate, TodoListCreate

logger = structlog.get_logger()

router = APIRouter(prefix="/api/lists", tags=["lists"])


def task_out(task: Task) -> dict:
    return {"id": task.id, **task.to_dict()}


def list_out(todo_list: TodoList) -> dict:
    return {
        "id": todo_list.id,
        "name": todo_list.name,
        "tasks": [task_out(t) for t in todo_list.tasks],
    }


@router.get("")
async def list_todo_lists(
    user: dict = Depends(get_current_user),
    store: TodoListStore = Depends(get_todo_list_store),
):
    return [list_out(lst) for lst in store.list_todo_lists(user["id"])]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_todo_list(
    body: TodoListCreate,
    user: dict = Depends(get_current_user),
    store: TodoListStore = Depends(get_todo_list_store),
):
    try:
        todo_list = store.add_todo_list(user["id"], body.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return list_out(todo_list)


@router.put("/{list_id}")
async def rename_todo_list(
    list_id: str,
    body: TodoListCreate,
    user: dict = Depends(get_current_user),
    store: TodoListStore = Depends(get_todo_list_store),
):
    try:
        store.rename_todo_list(user["id"], list_id, body.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"ok": True}


@router.delete("/{list_id}")
async def delete_todo_list(
    list_id: str,
    user: dict = Depends(get_current_user),
    store: TodoListStore = Depends(get_todo_list_store),
):
    if not store.delete_todo_list(user["id"], list_id):
        raise HTTPException(status_code=404, detail="List not found")
    return {"ok": True}


# --- Tasks ---


@router.post("/{list_id}/tasks", status_code=status.HTTP_201_CREATED)
async def create_task(
    list_id: str,
    body: TaskCreate,
    user: dict = Depends(get_current_user),
    store: TodoListStore = Depends(get_todo_list_store),
):
    try:
        task = store.add_task(
            user["id"],
            list_id,
            title=body.title,
            description=body.description,
            priority=body.priority,
            tags=body.tags,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return task_out(task)


@router.post("/{list_id}/tasks/generate", status_code=status.HTTP_201_CREATED)
def generate_tasks(
    list_id: str,
    body: TaskPrompt,
    user: dict = Depends(get_current_user),
    store: TodoListStore = Depends(get_todo_list_store),
    enrichment: EnrichmentService = Depends(get_enrichment),
):
    """Turn a natural-language request into tasks on the list."""
    store.require_list(user["id"], list_id)
    titles = enrichment.tasks_from_prompt(body.prompt)
    tasks = store.add_tasks(user["id"], list_id, titles)
    logger.info("tasks.generated", user_id=user["id"], list_id=list_id, count=len(tasks))
    return [task_out(t) for t in tasks]


@router.put("/{list_id}/tasks/{task_id}")
async def update_task(
    list_id: str,
    task_id: str,
    body: TaskUpdate,
    user: dict = Depends(get_current_user),
    store: TodoListStore = Depends(get_todo_list_store),
):
    fields = body.model_dump(exclude_unset=True)
    if not fields:
        raise HTTPException(status_code=400, detail="No fields to update")
    try:
        task = store.update_task(user["id"], list_id, task_id, **fields)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return task_out(task)


@router.post("/{list_id}/tasks/{task_id}/toggle")
async def toggle_task(
    list_id: str,
    task_id: str,
    user: dict = Depends(get_current_user),
    store: TodoListStore = Depends(get_todo_list_store),
):
    return task_out(store.toggle_task(user["id"], list_id, task_id))


@router.post("/{list_id}/tasks/{task_id}/subtasks")
def suggest_subtasks(
    list_id: str,
    task_id: str,
    user: dict = Depends(get_current_user),
    store: TodoListStore = Depends(get_todo_list_store),
    enrichment: EnrichmentService = Depends(get_enrichment),
):
    """Suggested breakdown of a task; nothing is saved."""
    task = store.get_task(user["id"], list_id, task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return {"task_id": task.id, "subtasks": enrichment.generate_subtasks(task.title)}


@router.delete("/{list_id}/tasks/{task_id}")
async def delete_task(
    list_id: str,
    task_id: str,
    user: dict = Depends(get_current_user),
    store: TodoListStore = Depends(get_todo_list_store),
):
    if not store.delete_task(user["id"], list_id, task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    return {"ok": True}
