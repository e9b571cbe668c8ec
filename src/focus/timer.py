"""Pomodoro-style focus timer.

The timer is a plain state machine driven by ``tick(seconds)``; callers own
the clock (a CLI loop, a UI interval). Every completed session, work or
break, produces a ``FocusSession`` and bumps ``completed_sessions``. A work
session rotates to a break, and a break rotates back to work. The break is
long when the count before the work session ends in 3 mod 4; since breaks are
counted too, that happens only when breaks are skipped between work sessions.
"""

import uuid
from dataclasses import asdict, dataclass, field
from typing import Callable, Optional

import structlog

from shared_types import SessionType, now_ms

logger = structlog.get_logger()

SESSION_DURATIONS = {
    SessionType.WORK: 25 * 60,
    SessionType.SHORT_BREAK: 5 * 60,
    SessionType.LONG_BREAK: 15 * 60,
}


@dataclass
class FocusSession:
    session_type: SessionType
    duration: int
    completed: bool
    started_at: int
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    task_id: Optional[str] = None
    task_title: Optional[str] = None
    completed_at: Optional[int] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["session_type"] = str(self.session_type)
        data.pop("id")
        return {k: v for k, v in data.items() if v is not None}


def format_time(seconds: int) -> str:
    """Render seconds as MM:SS."""
    mins, secs = divmod(max(seconds, 0), 60)
    return f"{mins:02d}:{secs:02d}"


def next_session_type(current: SessionType, completed_sessions: int) -> SessionType:
    """Session type that follows ``current``.

    ``completed_sessions`` is the count before the session that just ended.
    """
    if current == SessionType.WORK:
        return SessionType.LONG_BREAK if completed_sessions % 4 == 3 else SessionType.SHORT_BREAK
    return SessionType.WORK


class FocusTimer:
    """Countdown over work and break sessions."""

    def __init__(
        self,
        durations: Optional[dict[SessionType, int]] = None,
        on_complete: Optional[Callable[[FocusSession], None]] = None,
    ):
        self.durations = {**SESSION_DURATIONS, **(durations or {})}
        self.on_complete = on_complete
        self.session_type = SessionType.WORK
        self.time_left = self.durations[self.session_type]
        self.is_running = False
        self.completed_sessions = 0
        self.task_id: Optional[str] = None
        self.task_title: Optional[str] = None
        self._started_at: Optional[int] = None

    @property
    def duration(self) -> int:
        return self.durations[self.session_type]

    @property
    def focus_minutes(self) -> int:
        return self.completed_sessions * self.durations[SessionType.WORK] // 60

    def progress(self) -> float:
        """Elapsed share of the current session, 0-100."""
        return (self.duration - self.time_left) / self.duration * 100

    def select_task(self, task_id: Optional[str], task_title: Optional[str] = None) -> None:
        self.task_id = task_id
        self.task_title = task_title

    def set_session_type(self, session_type: SessionType) -> None:
        """Switch session type; stops the clock and refills it."""
        self.session_type = SessionType(session_type)
        self.time_left = self.duration
        self.is_running = False
        self._started_at = None

    def start(self) -> None:
        if not self.is_running:
            self.is_running = True
            if self._started_at is None:
                self._started_at = now_ms()

    def pause(self) -> None:
        self.is_running = False

    def toggle(self) -> None:
        if self.is_running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        self.is_running = False
        self.time_left = self.duration
        self._started_at = None

    def tick(self, seconds: int = 1) -> Optional[FocusSession]:
        """Advance the clock; returns the finished session when it hits zero."""
        if not self.is_running:
            return None
        self.time_left = max(self.time_left - seconds, 0)
        if self.time_left == 0:
            return self._complete()
        return None

    def _complete(self) -> FocusSession:
        finished = self.session_type
        session = FocusSession(
            session_type=finished,
            duration=self.duration,
            completed=True,
            started_at=self._started_at or now_ms(),
            completed_at=now_ms(),
            task_id=self.task_id if finished == SessionType.WORK else None,
            task_title=self.task_title if finished == SessionType.WORK else None,
        )
        upcoming = next_session_type(finished, self.completed_sessions)
        self.completed_sessions += 1
        self.set_session_type(upcoming)
        logger.info("focus.session_completed", session_type=str(finished), next=str(upcoming))
        if self.on_complete:
            self.on_complete(session)
        return session
