"""Daily journal persistence: one entry per calendar day."""

from datetime import date
from typing import Optional

import structlog

from docstore import DocumentStore
from shared_types import Collection, Mood, now_ms

from .models import JournalEntry, day_start_for

logger = structlog.get_logger()

MAX_CONTENT_LENGTH = 100_000  # 100KB


def _clean_items(items: Optional[list[str]]) -> list[str]:
    return [i for i in (items or []) if i and i.strip()]


class JournalStore:
    """Journal CRUD; ``save_for_day`` keeps the one-entry-per-day rule."""

    def __init__(self, documents: DocumentStore):
        self.documents = documents

    def list_entries(self, user_id: str) -> list[JournalEntry]:
        return [JournalEntry.from_dict(d) for d in self.documents.list(user_id, Collection.JOURNAL)]

    def find_by_day(self, user_id: str, day: date) -> Optional[JournalEntry]:
        for entry in self.list_entries(user_id):
            if entry.day == day:
                return entry
        return None

    def save_for_day(
        self,
        user_id: str,
        day: date,
        content: str,
        mood: str = Mood.GOOD,
        wins: Optional[list[str]] = None,
        learnings: Optional[list[str]] = None,
    ) -> JournalEntry:
        """Create the entry for ``day`` or overwrite the existing one.

        The existing entry keeps its id and created_at.

        Raises:
            ValueError: If content is blank, too long, or mood unknown
        """
        if not content.strip():
            raise ValueError("Journal content is required")
        if len(content) > MAX_CONTENT_LENGTH:
            raise ValueError(f"Content exceeds max length ({MAX_CONTENT_LENGTH} chars)")

        existing = self.find_by_day(user_id, day)
        entry = JournalEntry(
            id=existing.id if existing else "",
            date=day_start_for(day),
            content=content,
            mood=Mood(mood),
            wins=_clean_items(wins),
            learnings=_clean_items(learnings),
            ai_summary=existing.ai_summary if existing else None,
            created_at=existing.created_at if existing else now_ms(),
        )

        if existing:
            doc = self.documents.update(user_id, Collection.JOURNAL, existing.id, entry.to_dict())
            logger.info("journal.updated", user_id=user_id, entry_id=existing.id)
        else:
            doc = self.documents.add(user_id, Collection.JOURNAL, entry.to_dict())
            logger.info("journal.created", user_id=user_id, entry_id=doc["id"])
        return JournalEntry.from_dict(doc)

    def delete_entry(self, user_id: str, entry_id: str) -> bool:
        return self.documents.delete(user_id, Collection.JOURNAL, entry_id)
