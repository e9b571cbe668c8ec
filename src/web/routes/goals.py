"""Goals and milestones CRUD routes (per-user)."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from goals import Goal, GoalStore
from web.auth import get_current_user
from web.deps import get_goal_store
from web.models import GoalCreate, GoalUpdate, MilestoneAdd

logger = structlog.get_logger()

router = APIRouter(prefix="/api/goals", tags=["goals"])


def goal_out(goal: Goal) -> dict:
    return {
        "id": goal.id,
        **goal.to_dict(),
        "progress": goal.progress(),
        "days_left": goal.days_left(),
    }


@router.get("")
async def list_goals(
    user: dict = Depends(get_current_user),
    store: GoalStore = Depends(get_goal_store),
):
    return [goal_out(g) for g in store.list_goals(user["id"])]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_goal(
    body: GoalCreate,
    user: dict = Depends(get_current_user),
    store: GoalStore = Depends(get_goal_store),
):
    try:
        goal = store.add_goal(
            user["id"],
            title=body.title,
            target_date=body.target_date,
            category=body.category,
            description=body.description,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return goal_out(goal)


@router.get("/{goal_id}")
async def get_goal(
    goal_id: str,
    user: dict = Depends(get_current_user),
    store: GoalStore = Depends(get_goal_store),
):
    goal = store.get_goal(user["id"], goal_id)
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return goal_out(goal)


@router.put("/{goal_id}")
async def update_goal(
    goal_id: str,
    body: GoalUpdate,
    user: dict = Depends(get_current_user),
    store: GoalStore = Depends(get_goal_store),
):
    fields = body.model_dump(exclude_unset=True)
    if not fields:
        raise HTTPException(status_code=400, detail="No fields to update")
    try:
        goal = store.update_goal(user["id"], goal_id, **fields)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return goal_out(goal)


@router.delete("/{goal_id}")
async def delete_goal(
    goal_id: str,
    user: dict = Depends(get_current_user),
    store: GoalStore = Depends(get_goal_store),
):
    if not store.delete_goal(user["id"], goal_id):
        raise HTTPException(status_code=404, detail="Goal not found")
    return {"ok": True}


@router.post("/{goal_id}/milestones", status_code=status.HTTP_201_CREATED)
async def add_milestone(
    goal_id: str,
    body: MilestoneAdd,
    user: dict = Depends(get_current_user),
    store: GoalStore = Depends(get_goal_store),
):
    try:
        goal = store.add_milestone(user["id"], goal_id, body.title)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return goal_out(goal)


@router.post("/{goal_id}/milestones/{milestone_id}/toggle")
async def toggle_milestone(
    goal_id: str,
    milestone_id: str,
    user: dict = Depends(get_current_user),
    store: GoalStore = Depends(get_goal_store),
):
    return goal_out(store.toggle_milestone(user["id"], goal_id, milestone_id))


@router.delete("/{goal_id}/milestones/{milestone_id}")
async def delete_milestone(
    goal_id: str,
    milestone_id: str,
    user: dict = Depends(get_current_user),
    store: GoalStore = Depends(get_goal_store),
):
    return goal_out(store.delete_milestone(user["id"], goal_id, milestone_id))
