"""Tests for CLI commands using Click's CliRunner."""

import json
from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from cli.config_models import FlowdeskConfig
from cli.main import cli
from enrichment import EnrichmentService
from focus import FocusSessionStore
from journal import JournalExporter


@pytest.fixture
def config():
    return FlowdeskConfig.from_dict({"focus": {"work_minutes": 1, "short_break_minutes": 1}})


@pytest.fixture
def components(config, documents, stores, user_id):
    return {
        "config": config,
        "user_id": user_id,
        "documents": documents,
        "stores": stores,
        "focus_store": FocusSessionStore(documents),
        "exporter": JournalExporter(stores.journal, user_id),
        "enrichment": EnrichmentService(),
    }


@pytest.fixture
def run(config, components):
    runner = CliRunner()

    def invoke(*args):
        with (
            patch("cli.main.load_config_model", return_value=config),
            patch("cli.main.setup_logging"),
            patch("cli.main.get_components", return_value=components),
        ):
            return runner.invoke(cli, list(args))

    return invoke


class TestSearchCommand:
    def test_no_results(self, run):
        result = run("search", "anything")
        assert result.exit_code == 0
        assert "No results found." in result.output

    def test_grouped_tables(self, run, stores, user_id):
        stores.goals.add_goal(user_id, "Learn Rust", target_date=0)
        todo = stores.todo_lists.add_todo_list(user_id, "Work")
        stores.todo_lists.add_task(user_id, todo.id, "Rust code review")
        stores.stash.add_item(user_id, content="notes", title="Unrelated")

        result = run("search", "rust")
        assert result.exit_code == 0
        assert "Goals" in result.output
        assert "Tasks" in result.output
        assert "Learn Rust" in result.output
        assert "Stash" not in result.output

    def test_filter(self, run, stores, user_id):
        stores.goals.add_goal(user_id, "Learn Rust", target_date=0)
        result = run("search", "rust", "--filter", "stash")
        assert "No results found." in result.output

    def test_rejects_unknown_filter(self, run):
        result = run("search", "rust", "--filter", "everything")
        assert result.exit_code != 0


class TestTipCommand:
    def test_fallback_tip(self, run):
        result = run("tip")
        assert result.exit_code == 0
        assert "Stay focused and keep moving forward!" in result.output

    def test_context_passed(self, run, components):
        components["enrichment"] = MagicMock()
        components["enrichment"].tip.return_value = "Ship it."
        result = run("tip", "designer")
        assert "Ship it." in result.output
        components["enrichment"].tip.assert_called_once_with("designer")


class TestJournalExportCommand:
    def test_export_json(self, run, stores, user_id, tmp_path):
        stores.journal.save_for_day(user_id, date.today(), "Good day")
        out = tmp_path / "out.json"

        result = run("journal", "export", "-o", str(out), "-f", "json")

        assert result.exit_code == 0
        assert "Exported 1 entries" in result.output
        assert json.loads(out.read_text())["count"] == 1

    def test_export_files(self, run, stores, user_id, tmp_path):
        stores.journal.save_for_day(user_id, date.today(), "Good day")
        out_dir = tmp_path / "entries"
        result = run("journal", "export", "-o", str(out_dir), "-f", "files")
        assert result.exit_code == 0
        assert len(list(out_dir.glob("*.md"))) == 1


class TestFocusCommand:
    def test_runs_and_records_session(self, run, components, user_id):
        with patch("cli.main.time.sleep"):
            result = run("focus", "--task", "Write docs")

        assert result.exit_code == 0, result.output
        assert "1 sessions completed, 1 focus minutes" in result.output
        sessions = components["focus_store"].list_sessions(user_id)
        assert len(sessions) == 1
        assert sessions[0].task_title == "Write docs"

    def test_interrupt(self, run):
        with patch("cli.main.time.sleep", side_effect=KeyboardInterrupt):
            result = run("focus")
        assert result.exit_code == 0
        assert "Stopped" in result.output
        assert "0 sessions completed" in result.output


class TestServeCommand:
    def test_runs_uvicorn(self, run):
        with patch("uvicorn.run") as uv_run:
            result = run("serve", "--port", "9001")
        assert result.exit_code == 0
        uv_run.assert_called_once_with("web.app:app", host="127.0.0.1", port=9001, log_level="info")
