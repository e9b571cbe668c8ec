"""Configuration loading and management."""

from pathlib import Path
from typing import Optional

import yaml

from shared_types import SessionType

from .config_models import FlowdeskConfig


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / "config.yaml",
        Path.home() / ".flowdesk" / "config.yaml",
        Path.home() / "flowdesk" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config_model(config_path: Optional[Path] = None) -> FlowdeskConfig:
    """Load configuration as Pydantic model with validation."""
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")

    if not isinstance(base_config, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(base_config).__name__}")

    try:
        return FlowdeskConfig.from_dict(base_config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}")


def focus_durations(config: FlowdeskConfig) -> dict[SessionType, int]:
    """Session durations in seconds, keyed by session type."""
    return {
        SessionType.WORK: config.focus.work_minutes * 60,
        SessionType.SHORT_BREAK: config.focus.short_break_minutes * 60,
        SessionType.LONG_BREAK: config.focus.long_break_minutes * 60,
    }
