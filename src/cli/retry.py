"""Retry utilities with exponential backoff."""

import logging

import structlog
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from llm.base import LLMAuthError, LLMError

logger = structlog.stdlib.get_logger(__name__)


def llm_retry(
    max_attempts: int = 3,
    min_wait: float = 2.0,
    max_wait: float = 30.0,
    exceptions: tuple = (LLMError,),
):
    """Retry decorator for LLM API calls.

    Auth failures are never retried; a bad key stays bad.

    Args:
        max_attempts: Max retry attempts
        min_wait: Min wait between retries (seconds)
        max_wait: Max wait between retries (seconds)
        exceptions: Exception types to retry on
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(exceptions) & retry_if_not_exception_type(LLMAuthError),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


def retry_from_config(retry_config):
    """Build an LLM retry decorator from a RetryConfig model."""
    return llm_retry(
        max_attempts=retry_config.max_attempts,
        min_wait=retry_config.min_wait,
        max_wait=retry_config.max_wait,
    )
