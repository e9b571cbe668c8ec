"""Dashboard overview route (per-user)."""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from cli.config_models import FlowdeskConfig
from dashboard import build_stats
from enrichment import EnrichmentService
from focus import FocusSessionStore
from web.auth import get_current_user
from web.deps import get_config, get_enrichment, get_focus_store, get_stores
from web.routes.focus import focus_minutes
from web.routes.journal import entry_out
from workspace import Stores
from workspace.session import DEFAULT_TIP_CONTEXT, load_collections

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("")
def get_dashboard(
    include_tip: bool = True,
    user: dict = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
    focus_store: FocusSessionStore = Depends(get_focus_store),
    enrichment: EnrichmentService = Depends(get_enrichment),
    config: FlowdeskConfig = Depends(get_config),
):
    data = load_collections(stores, user["id"])
    minutes = focus_minutes(focus_store.list_sessions(user["id"]), config.focus.work_minutes)
    stats = build_stats(
        goals=data.goals,
        todo_lists=data.todo_lists,
        journal_entries=data.journal_entries,
        stash_items=data.stash_items,
        focus_minutes=minutes,
    )
    return {
        "tasks": {
            "completed": stats.tasks_completed,
            "pending": stats.tasks_pending,
            "total": stats.task_total,
        },
        "stash": stats.stash_by_type,
        "goals": [asdict(g) for g in stats.goals],
        "recent_entries": [entry_out(e) for e in stats.recent_entries],
        "focus_minutes": stats.focus_minutes,
        "tip": enrichment.tip(DEFAULT_TIP_CONTEXT) if include_tip else None,
    }
