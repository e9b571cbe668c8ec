"""Journal export functionality."""

import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

import frontmatter

from .models import JournalEntry, format_entry_date
from .store import JournalStore


class JournalExporter:
    """Export a user's journal entries to various formats."""

    def __init__(self, store: JournalStore, user_id: str):
        self.store = store
        self.user_id = user_id

    def export_json(self, output_path: Path, days: Optional[int] = None) -> int:
        """Export entries to a single JSON document.

        Args:
            output_path: Output file path
            days: Only include entries from last N days

        Returns:
            Number of entries exported
        """
        entries = self._get_entries(days)

        export_data = {
            "exported_at": datetime.now().isoformat(),
            "count": len(entries),
            "entries": [
                {"id": e.id, **e.to_dict(), "day": e.day.isoformat()} for e in entries
            ],
        }

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w") as f:
            json.dump(export_data, f, indent=2, default=str)

        return len(entries)

    def export_markdown(self, output_path: Path, days: Optional[int] = None) -> int:
        """Export entries to one Markdown file, newest day first."""
        entries = self._get_entries(days)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        lines = [
            "# Journal Export",
            "",
            f"Exported: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            f"Entries: {len(entries)}",
            "",
            "---",
            "",
        ]

        for entry in entries:
            lines.append(f"## {format_entry_date(entry.date)}")
            lines.append("")
            lines.append(f"**Mood:** {entry.mood}")
            lines.append("")
            lines.append(entry.content)
            lines.append("")
            if entry.wins:
                lines.append("### Wins")
                lines.extend(f"- {w}" for w in entry.wins)
                lines.append("")
            if entry.learnings:
                lines.append("### Learnings")
                lines.extend(f"- {item}" for item in entry.learnings)
                lines.append("")
            lines.append("---")
            lines.append("")

        with open(output_path, "w") as f:
            f.write("\n".join(lines))

        return len(entries)

    def export_entry_files(self, output_dir: Path, days: Optional[int] = None) -> list[Path]:
        """Write one Markdown file per entry with YAML front matter."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        written = []
        for entry in self._get_entries(days):
            post = frontmatter.Post(entry.content)
            post["date"] = entry.day.isoformat()
            post["mood"] = str(entry.mood)
            post["wins"] = entry.wins
            post["learnings"] = entry.learnings
            if entry.ai_summary:
                post["summary"] = entry.ai_summary

            path = output_dir / f"{entry.day.isoformat()}.md"
            with open(path, "w") as f:
                f.write(frontmatter.dumps(post))
            written.append(path)

        return written

    def _get_entries(self, days: Optional[int] = None) -> list[JournalEntry]:
        entries = self.store.list_entries(self.user_id)

        if days:
            cutoff = (datetime.now() - timedelta(days=days)).date()
            entries = [e for e in entries if e.day >= cutoff]

        return sorted(entries, key=lambda e: e.date, reverse=True)
