"""Pydantic configuration models for Flowdesk."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from shared_types import SearchFilter

VALID_LLM_PROVIDERS = {"auto", "gemini"}


def _expand_env(value: Optional[str]) -> Optional[str]:
    """Resolve a ``${VAR}`` reference; other values pass through."""
    if value and value.startswith("${") and value.endswith("}"):
        return os.getenv(value[2:-1], "")
    return value


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = "auto"
    model: Optional[str] = None  # None = use provider default
    api_key: Optional[str] = None
    max_tokens: int = 1000
    enabled: bool = True

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        if v not in VALID_LLM_PROVIDERS:
            raise ValueError(f"Invalid LLM provider: {v}. Must be one of {VALID_LLM_PROVIDERS}")
        return v


class PathsConfig(BaseModel):
    """File paths configuration."""

    data_db: Path = Path("~/flowdesk/flowdesk.db")
    export_dir: Path = Path("~/flowdesk/exports")
    log_file: Path = Path("~/flowdesk/flowdesk.log")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.data_db = self.data_db.expanduser()
        self.export_dir = self.export_dir.expanduser()
        self.log_file = self.log_file.expanduser()
        return self


class SearchConfig(BaseModel):
    """Search defaults."""

    default_filter: str = "all"
    max_results: int = 50

    @field_validator("default_filter")
    @classmethod
    def validate_filter(cls, v: str) -> str:
        valid = {f.value for f in SearchFilter}
        if v not in valid:
            raise ValueError(f"Invalid search filter: {v}. Must be one of {sorted(valid)}")
        return v


class FocusConfig(BaseModel):
    """Focus timer durations, in minutes."""

    work_minutes: int = Field(default=25, gt=0)
    short_break_minutes: int = Field(default=5, gt=0)
    long_break_minutes: int = Field(default=15, gt=0)


class RetryConfig(BaseModel):
    """Retry/backoff configuration for LLM calls."""

    max_attempts: int = Field(default=3, ge=1)
    min_wait: float = 2.0
    max_wait: float = 30.0


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    json_mode: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class FlowdeskConfig(BaseModel):
    """Main configuration model."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    focus: FocusConfig = Field(default_factory=FocusConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def expand_env_vars(self):
        """Expand ${VAR} patterns in API keys."""
        self.llm.api_key = _expand_env(self.llm.api_key)
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "FlowdeskConfig":
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
