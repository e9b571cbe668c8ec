from .models import StashItem, detect_item_type
from .store import StashStore
from .tags import all_tags, filter_by_tags, filter_tags, tag_counts

__all__ = [
    "StashItem",
    "StashStore",
    "detect_item_type",
    "all_tags",
    "tag_counts",
    "filter_tags",
    "filter_by_tags",
]
