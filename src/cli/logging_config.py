"""Structured logging configuration using structlog."""

import logging
import re
import sys
from pathlib import Path
from typing import Optional

import structlog

# Patterns to redact from log output
_REDACT_PATTERNS = [
    # Google API keys: AIza + 35 chars
    (re.compile(r"(AIza[a-zA-Z0-9_-]{4})[a-zA-Z0-9_-]{20,}"), r"\1...REDACTED"),
    # JWTs (header.payload.signature)
    (re.compile(r"eyJ[a-zA-Z0-9_-]{10,}\.[a-zA-Z0-9_-]{10,}\.[a-zA-Z0-9_-]+"), "REDACTED.jwt"),
    (re.compile(r"(Bearer\s+)[a-zA-Z0-9_.-]{20,}"), r"\1REDACTED"),
    # Generic API key patterns in key=value
    (re.compile(r"(api[_-]?key['\"]?\s*[:=]\s*['\"]?)[a-zA-Z0-9_-]{10,}"), r"\1REDACTED"),
    # Email addresses
    (re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"), "REDACTED@email"),
]


def redact(value: str) -> str:
    for pattern, replacement in _REDACT_PATTERNS:
        value = pattern.sub(replacement, value)
    return value


def _redact_sensitive(_, __, event_dict: dict) -> dict:
    """Structlog processor to redact API keys/tokens from log output."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = redact(value)
    return event_dict


def setup_logging(
    json_mode: bool = False, level: str = "INFO", log_file: Optional[Path] = None
) -> None:
    """Configure structlog with appropriate renderer.

    Args:
        json_mode: Use JSON renderer (for the API server / machine consumption).
                   False = console renderer (Rich-compatible, for CLI).
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional file that additionally receives JSON lines.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _redact_sensitive,
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    def formatter(renderer) -> structlog.stdlib.ProcessorFormatter:
        return structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )

    console_renderer = (
        structlog.processors.JSONRenderer() if json_mode else structlog.dev.ConsoleRenderer()
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter(console_renderer))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter(structlog.processors.JSONRenderer()))
        root.addHandler(file_handler)
