"""Shared test fixtures for Flowdesk."""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from checkmate import TodoListStore  # noqa: E402
from docstore import DocumentStore  # noqa: E402
from goals import GoalStore  # noqa: E402
from journal import JournalStore  # noqa: E402
from stash import StashStore  # noqa: E402
from workspace import Stores  # noqa: E402


@pytest.fixture
def documents(tmp_path):
    """Fresh document store per test."""
    return DocumentStore(tmp_path / "flowdesk.db")


@pytest.fixture
def stores(documents):
    return Stores(
        goals=GoalStore(documents),
        todo_lists=TodoListStore(documents),
        journal=JournalStore(documents),
        stash=StashStore(documents),
    )


@pytest.fixture
def user_id():
    return "user-123"
