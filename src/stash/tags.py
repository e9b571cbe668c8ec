"""Tag index helpers for the stash vault."""

from collections import Counter
from typing import Iterable

from .models import StashItem


def all_tags(items: Iterable[StashItem]) -> list[str]:
    """Unique tags across items, sorted."""
    return sorted({tag for item in items for tag in item.tags})


def tag_counts(items: Iterable[StashItem]) -> dict[str, int]:
    """Number of items carrying each tag (a tag repeated on one item counts once)."""
    counts: Counter[str] = Counter()
    for item in items:
        counts.update(set(item.tags))
    return dict(sorted(counts.items()))


def filter_tags(tags: Iterable[str], query: str) -> list[str]:
    """Tags containing ``query``, case-insensitive."""
    q = query.lower()
    return [t for t in tags if q in t.lower()]


def filter_by_tags(items: list[StashItem], selected: Iterable[str]) -> list[StashItem]:
    """Items carrying any selected tag; all items when nothing is selected."""
    wanted = set(selected)
    if not wanted:
        return list(items)
    return [item for item in items if wanted.intersection(item.tags)]
