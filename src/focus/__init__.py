from .store import FocusSessionStore
from .timer import SESSION_DURATIONS, FocusSession, FocusTimer, format_time, next_session_type

__all__ = [
    "FocusTimer",
    "FocusSession",
    "FocusSessionStore",
    "SESSION_DURATIONS",
    "format_time",
    "next_session_type",
]
