from .export import JournalExporter
from .models import JournalEntry, day_start, format_entry_date
from .store import JournalStore

__all__ = ["JournalEntry", "JournalStore", "JournalExporter", "day_start", "format_entry_date"]
