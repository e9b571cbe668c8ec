"""Cross-feature search route (per-user)."""

import structlog
from fastapi import APIRouter, Depends, Query

from cli.config_models import FlowdeskConfig
from observability import metrics
from search import search
from shared_types import SearchFilter
from web.auth import get_current_user
from web.deps import get_config, get_stores
from workspace import Stores, load_search_collections

logger = structlog.get_logger()

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("")
async def search_everything(
    q: str = Query(default="", max_length=500),
    filter: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1, le=500),
    user: dict = Depends(get_current_user),
    stores: Stores = Depends(get_stores),
    config: FlowdeskConfig = Depends(get_config),
):
    """Ranked matches across goals, tasks, journal and stash.

    ``filter`` is one of all, goals, tasks, journal, stash; other values match nothing.
    """
    active_filter = filter or config.search.default_filter or SearchFilter.ALL
    metrics.counter("search_requests")

    with metrics.timer("search_duration"):
        results = search(load_search_collections(stores, user["id"]), q, active_filter)

    cap = limit or config.search.max_results
    logger.debug("search.completed", filter=active_filter, results=len(results))
    return {
        "query": q,
        "filter": str(active_filter),
        "total": len(results),
        "results": [r.to_dict() for r in results[:cap]],
    }
