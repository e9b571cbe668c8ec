"""LLM-backed enrichment for stash items, tasks and the daily tip.

Every public method degrades to a fixed fallback instead of raising, so a
missing key or a flaky provider never breaks the feature calling it.
"""

import json
from dataclasses import dataclass, field

import structlog
from pydantic import BaseModel

from cli.config_models import RetryConfig
from cli.retry import retry_from_config
from llm import LLMProvider
from observability import metrics

from .prompts import (
    ANALYSIS_SCHEMA,
    ANALYZE_MAX_CHARS,
    ANALYZE_PROMPT,
    STRING_LIST_SCHEMA,
    SUBTASKS_PROMPT,
    TASKS_FROM_PROMPT,
    TIP_PROMPT,
)

logger = structlog.get_logger()

NO_PROVIDER_TIP = "Stay focused and keep moving forward!"
EMPTY_TIP = "Keep crushing it!"
FAILED_TIP = "Conquer the day!"


@dataclass
class StashAnalysis:
    title: str
    tags: list[str] = field(default_factory=list)
    summary: str = ""


def failed_analysis() -> StashAnalysis:
    return StashAnalysis(
        title="Analysis Failed", tags=["error"], summary="Could not analyze content."
    )


class _AnalysisPayload(BaseModel):
    title: str
    tags: list[str] = []
    summary: str = ""


class EnrichmentService:
    """Wraps an optional LLM provider with prompt building and fallbacks."""

    def __init__(
        self,
        provider: LLMProvider | None = None,
        retry_config: RetryConfig | None = None,
        max_tokens: int = 1000,
    ):
        self.provider = provider
        self.max_tokens = max_tokens
        retrying = retry_from_config(retry_config or RetryConfig())
        self._generate_json = retrying(self._raw_generate_json)
        self._generate_text = retrying(self._raw_generate_text)

    @property
    def enabled(self) -> bool:
        return self.provider is not None

    def _raw_generate_json(self, prompt: str, schema: dict) -> str:
        return self.provider.generate_json(prompt, schema, max_tokens=self.max_tokens)

    def _raw_generate_text(self, prompt: str) -> str:
        return self.provider.generate([{"role": "user", "content": prompt}], max_tokens=200)

    def _call(self, kind: str, fn, *args) -> str:
        metrics.counter("enrichment_calls")
        with metrics.timer("enrichment_duration"):
            text = fn(*args)
        logger.debug("enrichment.response", kind=kind, chars=len(text or ""))
        return (text or "").strip()

    # --- Stash ---

    def analyze(self, text: str) -> StashAnalysis:
        """Title, tags and summary for a stash item."""
        if not self.enabled:
            logger.debug("enrichment.skipped", kind="analyze", reason="no_provider")
            return StashAnalysis(title="Untitled")

        prompt = ANALYZE_PROMPT.format(content=text[:ANALYZE_MAX_CHARS])
        try:
            raw = self._call("analyze", self._generate_json, prompt, ANALYSIS_SCHEMA)
            if not raw:
                raise ValueError("empty response")
            payload = _AnalysisPayload.model_validate_json(raw)
        except Exception as e:  # provider, JSON or schema failure
            metrics.counter("enrichment_failures")
            logger.warning("enrichment.analyze_failed", error=str(e))
            return failed_analysis()

        return StashAnalysis(title=payload.title, tags=payload.tags, summary=payload.summary)

    # --- Task lists ---

    def generate_subtasks(self, task_title: str) -> list[str]:
        """3-5 actionable subtasks for a task title; [] on any failure."""
        return self._string_list("subtasks", SUBTASKS_PROMPT.format(task=task_title))

    def tasks_from_prompt(self, prompt: str) -> list[str]:
        """3-7 tasks, items or places from a natural-language request; [] on any failure."""
        return self._string_list("tasks_from_prompt", TASKS_FROM_PROMPT.format(prompt=prompt))

    def _string_list(self, kind: str, prompt: str) -> list[str]:
        if not self.enabled:
            logger.debug("enrichment.skipped", kind=kind, reason="no_provider")
            return []

        try:
            raw = self._call(kind, self._generate_json, prompt, STRING_LIST_SCHEMA)
            if not raw:
                return []
            items = json.loads(raw)
            if not isinstance(items, list):
                raise ValueError(f"expected a JSON array, got {type(items).__name__}")
        except Exception as e:
            metrics.counter("enrichment_failures")
            logger.warning("enrichment.list_failed", kind=kind, error=str(e))
            return []

        return [str(item).strip() for item in items if str(item).strip()]

    # --- Tip ---

    def tip(self, context: str) -> str:
        """One-sentence productivity tip."""
        if not self.enabled:
            logger.debug("enrichment.skipped", kind="tip", reason="no_provider")
            return NO_PROVIDER_TIP

        try:
            text = self._call("tip", self._generate_text, TIP_PROMPT.format(context=context))
        except Exception as e:
            metrics.counter("enrichment_failures")
            logger.warning("enrichment.tip_failed", error=str(e))
            return FAILED_TIP

        return text or EMPTY_TIP
