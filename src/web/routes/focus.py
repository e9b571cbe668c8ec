"""Focus session log routes (per-user)."""

from fastapi import APIRouter, Depends, status

from cli.config_models import FlowdeskConfig
from focus import FocusSession, FocusSessionStore
from shared_types import SessionType
from web.auth import get_current_user
from web.deps import get_config, get_focus_store
from web.models import FocusSessionCreate

router = APIRouter(prefix="/api/focus", tags=["focus"])


def session_out(session: FocusSession) -> dict:
    return {"id": session.id, **session.to_dict()}


def focus_minutes(sessions: list[FocusSession], work_minutes: int) -> int:
    """Completed work sessions times the work length."""
    done = [s for s in sessions if s.completed and s.session_type == SessionType.WORK]
    return len(done) * work_minutes


@router.get("/sessions")
async def list_sessions(
    user: dict = Depends(get_current_user),
    store: FocusSessionStore = Depends(get_focus_store),
    config: FlowdeskConfig = Depends(get_config),
):
    sessions = store.list_sessions(user["id"])
    return {
        "sessions": [session_out(s) for s in sessions],
        "focus_minutes": focus_minutes(sessions, config.focus.work_minutes),
    }


@router.post("/sessions", status_code=status.HTTP_201_CREATED)
async def record_session(
    body: FocusSessionCreate,
    user: dict = Depends(get_current_user),
    store: FocusSessionStore = Depends(get_focus_store),
):
    session = FocusSession(
        session_type=body.session_type,
        duration=body.duration,
        completed=True,
        started_at=body.started_at,
        completed_at=body.completed_at,
        task_id=body.task_id,
        task_title=body.task_title,
    )
    return session_out(store.record(user["id"], session))
