"""Per-user document collections on SQLite.

Documents live at ``users/{user_id}/{collection}/{id}``. A collection path may
nest under a parent document (``todoLists/{list_id}/tasks``); deleting the
parent removes everything below it.
"""

import json
import sqlite3
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional

import structlog

from db import wal_connect

logger = structlog.get_logger()


class DocumentNotFoundError(LookupError):
    """Raised when updating a document that does not exist."""

    def __init__(self, collection: str, doc_id: str):
        super().__init__(f"Document not found: {collection}/{doc_id}")
        self.collection = collection
        self.doc_id = doc_id


def _new_id() -> str:
    return uuid.uuid4().hex[:20]


def _validate_collection(collection: str) -> str:
    parts = collection.split("/")
    # collection, or collection/doc/subcollection...
    if not collection or len(parts) % 2 == 0 or any(not p for p in parts):
        raise ValueError(f"Invalid collection path: {collection!r}")
    return collection


class DocumentStore:
    """SQLite-backed store of JSON documents grouped by user and collection."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path).expanduser()
        self._init_tables()

    def _init_tables(self) -> None:
        conn = wal_connect(self.db_path)
        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS documents (
                    seq        INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id    TEXT NOT NULL,
                    collection TEXT NOT NULL,
                    id         TEXT NOT NULL,
                    data       TEXT NOT NULL,
                    UNIQUE (user_id, collection, id)
                );
                CREATE INDEX IF NOT EXISTS idx_doc_scope ON documents(user_id, collection, seq);
            """)
        finally:
            conn.close()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        conn = wal_connect(self.db_path, row_factory=True)
        try:
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
            except BaseException:
                conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")
        finally:
            conn.close()

    def list(self, user_id: str, collection: str) -> list[dict[str, Any]]:
        """All documents in a collection, in insertion order."""
        _validate_collection(collection)
        conn = wal_connect(self.db_path, row_factory=True)
        try:
            rows = conn.execute(
                "SELECT id, data FROM documents WHERE user_id = ? AND collection = ? ORDER BY seq",
                (user_id, collection),
            ).fetchall()
        finally:
            conn.close()
        return [{**json.loads(r["data"]), "id": r["id"]} for r in rows]

    def get(self, user_id: str, collection: str, doc_id: str) -> Optional[dict[str, Any]]:
        _validate_collection(collection)
        conn = wal_connect(self.db_path, row_factory=True)
        try:
            row = conn.execute(
                "SELECT data FROM documents WHERE user_id = ? AND collection = ? AND id = ?",
                (user_id, collection, doc_id),
            ).fetchone()
        finally:
            conn.close()
        if row is None:
            return None
        return {**json.loads(row["data"]), "id": doc_id}

    def add(self, user_id: str, collection: str, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a document and return it with its generated id."""
        _validate_collection(collection)
        doc_id = _new_id()
        body = {k: v for k, v in data.items() if k != "id"}
        with self._transaction() as conn:
            conn.execute(
                "INSERT INTO documents (user_id, collection, id, data) VALUES (?, ?, ?, ?)",
                (user_id, collection, doc_id, json.dumps(body)),
            )
        logger.debug("docstore.added", collection=collection, doc_id=doc_id)
        return {**body, "id": doc_id}

    def update(
        self, user_id: str, collection: str, doc_id: str, fields: dict[str, Any]
    ) -> dict[str, Any]:
        """Merge ``fields`` into a document; the last write to each field wins.

        A field set to None is removed from the document.

        Raises:
            DocumentNotFoundError: If the document does not exist.
        """
        _validate_collection(collection)
        with self._transaction() as conn:
            row = conn.execute(
                "SELECT data FROM documents WHERE user_id = ? AND collection = ? AND id = ?",
                (user_id, collection, doc_id),
            ).fetchone()
            if row is None:
                raise DocumentNotFoundError(collection, doc_id)
            doc = json.loads(row["data"])
            for key, value in fields.items():
                if key == "id":
                    continue
                if value is None:
                    doc.pop(key, None)
                else:
                    doc[key] = value
            conn.execute(
                "UPDATE documents SET data = ? WHERE user_id = ? AND collection = ? AND id = ?",
                (json.dumps(doc), user_id, collection, doc_id),
            )
        return {**doc, "id": doc_id}

    def delete(self, user_id: str, collection: str, doc_id: str) -> bool:
        """Delete a document and any sub-collections nested under it."""
        _validate_collection(collection)
        prefix = f"{collection}/{doc_id}/"
        with self._transaction() as conn:
            cur = conn.execute(
                "DELETE FROM documents WHERE user_id = ? AND collection = ? AND id = ?",
                (user_id, collection, doc_id),
            )
            deleted = cur.rowcount > 0
            nested = conn.execute(
                "DELETE FROM documents WHERE user_id = ? AND substr(collection, 1, ?) = ?",
                (user_id, len(prefix), prefix),
            ).rowcount
        if nested:
            logger.debug("docstore.nested_deleted", collection=collection, doc_id=doc_id, count=nested)
        return deleted
