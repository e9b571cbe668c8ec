"""Stash routes: saved links and notes with AI-generated metadata (per-user)."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from enrichment import EnrichmentService
from stash import StashItem, StashStore, filter_by_tags, filter_tags, tag_counts
from web.auth import get_current_user
from web.deps import get_enrichment, get_stash_store
from web.models import StashCreate

logger = structlog.get_logger()

router = APIRouter(prefix="/api/stash", tags=["stash"])


def item_out(item: StashItem) -> dict:
    return {"id": item.id, **item.to_dict()}


@router.get("")
async def list_items(
    tags: list[str] = Query(default=[]),
    user: dict = Depends(get_current_user),
    store: StashStore = Depends(get_stash_store),
):
    """Newest first; ``tags`` keeps items carrying any of the given tags."""
    items = filter_by_tags(store.list_items(user["id"]), tags)
    return [item_out(i) for i in items]


@router.get("/tags")
async def list_tags(
    q: str = "",
    user: dict = Depends(get_current_user),
    store: StashStore = Depends(get_stash_store),
):
    counts = tag_counts(store.list_items(user["id"]))
    return {tag: counts[tag] for tag in filter_tags(counts, q)}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_item(
    body: StashCreate,
    user: dict = Depends(get_current_user),
    store: StashStore = Depends(get_stash_store),
    enrichment: EnrichmentService = Depends(get_enrichment),
):
    """Save content after running it through analysis."""
    try:
        item = store.create_from_content(user["id"], body.content, enrichment)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return item_out(item)


@router.delete("/{item_id}")
async def delete_item(
    item_id: str,
    user: dict = Depends(get_current_user),
    store: StashStore = Depends(get_stash_store),
):
    if not store.delete_item(user["id"], item_id):
        raise HTTPException(status_code=404, detail="Item not found")
    return {"ok": True}
