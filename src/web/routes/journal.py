"""Journal routes: one entry per day (per-user)."""

from datetime import date

import structlog
from fastapi import APIRouter, Depends, HTTPException

from journal import JournalEntry, JournalStore, format_entry_date
from web.auth import get_current_user
from web.deps import get_journal_store
from web.error_handlers import FlowdeskError
from web.models import JournalSave

logger = structlog.get_logger()

router = APIRouter(prefix="/api/journal", tags=["journal"])


class InvalidDayError(FlowdeskError):
    code = "INVALID_DAY"


def parse_day(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` path segment."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidDayError(f"Invalid day: {value!r}, expected YYYY-MM-DD")


def entry_out(entry: JournalEntry) -> dict:
    return {
        "id": entry.id,
        "day": entry.day.isoformat(),
        "display_date": format_entry_date(entry.date),
        **entry.to_dict(),
    }


@router.get("")
async def list_entries(
    user: dict = Depends(get_current_user),
    store: JournalStore = Depends(get_journal_store),
):
    entries = sorted(store.list_entries(user["id"]), key=lambda e: e.date, reverse=True)
    return [entry_out(e) for e in entries]


@router.get("/{day}")
async def get_entry(
    day: str,
    user: dict = Depends(get_current_user),
    store: JournalStore = Depends(get_journal_store),
):
    entry = store.find_by_day(user["id"], parse_day(day))
    if not entry:
        raise HTTPException(status_code=404, detail="No entry for this day")
    return entry_out(entry)


@router.put("/{day}")
async def save_entry(
    day: str,
    body: JournalSave,
    user: dict = Depends(get_current_user),
    store: JournalStore = Depends(get_journal_store),
):
    """Create or overwrite the entry for ``day``."""
    try:
        entry = store.save_for_day(
            user["id"],
            parse_day(day),
            content=body.content,
            mood=body.mood,
            wins=body.wins,
            learnings=body.learnings,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return entry_out(entry)


@router.delete("/entries/{entry_id}")
async def delete_entry(
    entry_id: str,
    user: dict = Depends(get_current_user),
    store: JournalStore = Depends(get_journal_store),
):
    if not store.delete_entry(user["id"], entry_id):
        raise HTTPException(status_code=404, detail="Entry not found")
    return {"ok": True}
