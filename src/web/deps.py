"""Dependency injection for FastAPI routes."""

import os
from functools import lru_cache
from pathlib import Path

import structlog
from fastapi import Depends

from checkmate import TodoListStore
from cli.config import load_config_model
from cli.config_models import FlowdeskConfig
from docstore import DocumentStore
from enrichment import EnrichmentService
from focus import FocusSessionStore
from goals import GoalStore
from journal import JournalStore
from llm import LLMError, create_llm_provider, resolve_api_key
from stash import StashStore
from workspace import Stores

logger = structlog.get_logger()


@lru_cache
def get_config() -> FlowdeskConfig:
    """Load shared config (config.yaml, ~/.flowdesk/ or ~/flowdesk/)."""
    return load_config_model()


def get_data_db_path() -> Path:
    """FLOWDESK_DB overrides the configured database path."""
    override = os.getenv("FLOWDESK_DB")
    if override:
        return Path(override).expanduser()
    return get_config().paths.data_db


@lru_cache
def get_document_store() -> DocumentStore:
    return DocumentStore(get_data_db_path())


def build_enrichment(config: FlowdeskConfig) -> EnrichmentService:
    """Enrichment service for ``config``; without a usable key it runs on fallbacks."""
    if not config.llm.enabled:
        return EnrichmentService(retry_config=config.retry)

    api_key = config.llm.api_key or resolve_api_key()
    if not api_key:
        logger.info("enrichment.disabled", reason="no_api_key")
        return EnrichmentService(retry_config=config.retry)

    try:
        provider = create_llm_provider(
            provider=config.llm.provider, api_key=api_key, model=config.llm.model
        )
    except LLMError as e:
        logger.warning("enrichment.provider_unavailable", error=str(e))
        return EnrichmentService(retry_config=config.retry)

    return EnrichmentService(provider, retry_config=config.retry, max_tokens=config.llm.max_tokens)


@lru_cache
def get_enrichment() -> EnrichmentService:
    return build_enrichment(get_config())


# --- Per-feature stores ---


def get_goal_store(documents: DocumentStore = Depends(get_document_store)) -> GoalStore:
    return GoalStore(documents)


def get_todo_list_store(documents: DocumentStore = Depends(get_document_store)) -> TodoListStore:
    return TodoListStore(documents)


def get_journal_store(documents: DocumentStore = Depends(get_document_store)) -> JournalStore:
    return JournalStore(documents)


def get_stash_store(documents: DocumentStore = Depends(get_document_store)) -> StashStore:
    return StashStore(documents)


def get_focus_store(documents: DocumentStore = Depends(get_document_store)) -> FocusSessionStore:
    return FocusSessionStore(documents)


def get_stores(documents: DocumentStore = Depends(get_document_store)) -> Stores:
    return Stores(
        goals=GoalStore(documents),
        todo_lists=TodoListStore(documents),
        journal=JournalStore(documents),
        stash=StashStore(documents),
    )
