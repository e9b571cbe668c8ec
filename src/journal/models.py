"""Journal entry data shape and day helpers."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from shared_types import Mood, now_ms


def day_start(timestamp_ms: int) -> int:
    """Truncate an epoch-ms timestamp to local midnight of the same day."""
    dt = datetime.fromtimestamp(timestamp_ms / 1000)
    midnight = dt.replace(hour=0, minute=0, second=0, microsecond=0)
    return int(midnight.timestamp() * 1000)


def day_start_for(day: date) -> int:
    """Local midnight of a calendar date as epoch ms."""
    return int(datetime(day.year, day.month, day.day).timestamp() * 1000)


def format_entry_date(timestamp_ms: int) -> str:
    """Short display date, e.g. 'Jan 5, 2025'."""
    dt = datetime.fromtimestamp(timestamp_ms / 1000)
    return f"{dt:%b} {dt.day}, {dt.year}"


@dataclass
class JournalEntry:
    id: str
    date: int
    content: str
    mood: Mood = Mood.GOOD
    wins: list[str] = field(default_factory=list)
    learnings: list[str] = field(default_factory=list)
    ai_summary: Optional[str] = None
    created_at: int = field(default_factory=now_ms)

    @property
    def day(self) -> date:
        return datetime.fromtimestamp(self.date / 1000).date()

    def to_dict(self) -> dict:
        data = {
            "date": self.date,
            "content": self.content,
            "mood": str(self.mood),
            "wins": list(self.wins),
            "learnings": list(self.learnings),
            "created_at": self.created_at,
        }
        if self.ai_summary is not None:
            data["ai_summary"] = self.ai_summary
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "JournalEntry":
        return cls(
            id=str(data["id"]),
            date=int(data.get("date", 0)),
            content=data.get("content", ""),
            mood=Mood(data.get("mood", Mood.GOOD)),
            wins=list(data.get("wins") or []),
            learnings=list(data.get("learnings") or []),
            ai_summary=data.get("ai_summary"),
            created_at=int(data.get("created_at", 0)),
        )
