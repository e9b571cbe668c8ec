"""Stash vault persistence."""

from typing import Optional

import structlog

from docstore import DocumentStore
from shared_types import Collection, StashItemType

from .models import StashItem, detect_item_type

logger = structlog.get_logger()

MAX_CONTENT_LENGTH = 100_000
MAX_TAG_LENGTH = 50
MAX_TAGS = 20


def _sanitize_tags(tags: Optional[list[str]]) -> list[str]:
    cleaned = []
    for tag in (tags or [])[:MAX_TAGS]:
        tag = tag.strip()[:MAX_TAG_LENGTH]
        if tag and tag not in cleaned:
            cleaned.append(tag)
    return cleaned


class StashStore:
    """Notes, links and snippets saved by a user."""

    def __init__(self, documents: DocumentStore):
        self.documents = documents

    def list_items(self, user_id: str, newest_first: bool = True) -> list[StashItem]:
        items = [StashItem.from_dict(d) for d in self.documents.list(user_id, Collection.STASH)]
        return list(reversed(items)) if newest_first else items

    def add_item(
        self,
        user_id: str,
        content: str,
        title: str,
        item_type: Optional[str] = None,
        tags: Optional[list[str]] = None,
        ai_summary: Optional[str] = None,
    ) -> StashItem:
        if not content.strip():
            raise ValueError("Stash content is required")
        if len(content) > MAX_CONTENT_LENGTH:
            raise ValueError(f"Content exceeds max length ({MAX_CONTENT_LENGTH} chars)")
        item = StashItem(
            id="",
            type=StashItemType(item_type) if item_type else detect_item_type(content),
            content=content,
            title=title or "Untitled",
            tags=_sanitize_tags(tags),
            ai_summary=ai_summary,
        )
        doc = self.documents.add(user_id, Collection.STASH, item.to_dict())
        logger.info("stash.created", user_id=user_id, item_id=doc["id"], type=str(item.type))
        return StashItem.from_dict(doc)

    def create_from_content(self, user_id: str, content: str, enrichment) -> StashItem:
        """Analyze raw content, then store it with the generated title, tags and summary."""
        if not content.strip():
            raise ValueError("Stash content is required")
        analysis = enrichment.analyze(content)
        return self.add_item(
            user_id,
            content=content,
            title=analysis.title,
            tags=analysis.tags,
            ai_summary=analysis.summary,
        )

    def delete_item(self, user_id: str, item_id: str) -> bool:
        return self.documents.delete(user_id, Collection.STASH, item_id)
