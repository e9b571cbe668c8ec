"""Completed focus session log."""

from docstore import DocumentStore
from shared_types import Collection, SessionType

from .timer import FocusSession


class FocusSessionStore:
    def __init__(self, documents: DocumentStore):
        self.documents = documents

    def record(self, user_id: str, session: FocusSession) -> FocusSession:
        doc = self.documents.add(user_id, Collection.FOCUS_SESSIONS, session.to_dict())
        session.id = doc["id"]
        return session

    def list_sessions(self, user_id: str) -> list[FocusSession]:
        sessions = []
        for doc in self.documents.list(user_id, Collection.FOCUS_SESSIONS):
            sessions.append(
                FocusSession(
                    id=doc["id"],
                    session_type=SessionType(doc["session_type"]),
                    duration=int(doc["duration"]),
                    completed=bool(doc.get("completed", False)),
                    started_at=int(doc["started_at"]),
                    task_id=doc.get("task_id"),
                    task_title=doc.get("task_title"),
                    completed_at=doc.get("completed_at"),
                )
            )
        return sessions
