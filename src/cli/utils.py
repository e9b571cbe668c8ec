"""Shared CLI utilities."""

import os

import structlog
from rich.console import Console

console = Console()
logger = structlog.get_logger()

DEFAULT_USER = "local"


def current_user_id() -> str:
    """CLI user id; FLOWDESK_USER selects which user's data to read."""
    return os.getenv("FLOWDESK_USER") or DEFAULT_USER


def get_components(skip_enrichment: bool = False):
    """Initialize stores and services from config.

    Args:
        skip_enrichment: If True, skip LLM provider init (for commands that don't need it)
    """
    from checkmate import TodoListStore
    from cli.config import load_config_model
    from docstore import DocumentStore
    from enrichment import EnrichmentService
    from focus import FocusSessionStore
    from goals import GoalStore
    from journal import JournalExporter, JournalStore
    from stash import StashStore
    from web.deps import build_enrichment
    from workspace import Stores

    config = load_config_model()
    db_path = os.getenv("FLOWDESK_DB") or config.paths.data_db
    documents = DocumentStore(db_path)
    user_id = current_user_id()

    stores = Stores(
        goals=GoalStore(documents),
        todo_lists=TodoListStore(documents),
        journal=JournalStore(documents),
        stash=StashStore(documents),
    )
    enrichment = (
        EnrichmentService(retry_config=config.retry)
        if skip_enrichment
        else build_enrichment(config)
    )

    return {
        "config": config,
        "user_id": user_id,
        "documents": documents,
        "stores": stores,
        "focus_store": FocusSessionStore(documents),
        "exporter": JournalExporter(stores.journal, user_id),
        "enrichment": enrichment,
    }
