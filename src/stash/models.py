"""Stash item data shape."""

from dataclasses import dataclass, field
from typing import Optional

from shared_types import StashItemType, now_ms


def detect_item_type(content: str) -> StashItemType:
    """Content that starts with ``http`` is a link; everything else is a note."""
    return StashItemType.LINK if content.startswith("http") else StashItemType.NOTE


@dataclass
class StashItem:
    id: str
    type: StashItemType
    content: str
    title: str
    tags: list[str] = field(default_factory=list)
    ai_summary: Optional[str] = None
    created_at: int = field(default_factory=now_ms)

    def to_dict(self) -> dict:
        data = {
            "type": str(self.type),
            "content": self.content,
            "title": self.title,
            "tags": list(self.tags),
            "created_at": self.created_at,
        }
        if self.ai_summary is not None:
            data["ai_summary"] = self.ai_summary
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "StashItem":
        return cls(
            id=str(data["id"]),
            type=StashItemType(data.get("type", StashItemType.NOTE)),
            content=data.get("content", ""),
            title=data.get("title", ""),
            tags=list(data.get("tags", [])),
            ai_summary=data.get("ai_summary"),
            created_at=int(data.get("created_at", 0)),
        )
