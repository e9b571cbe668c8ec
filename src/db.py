"""SQLite connection helper for the document store."""

import sqlite3
from pathlib import Path

BUSY_TIMEOUT_MS = 5000


def wal_connect(db_path: str | Path, row_factory: bool = False) -> sqlite3.Connection:
    """Open an autocommit SQLite connection in WAL mode.

    Transactions are opened explicitly by the caller (BEGIN IMMEDIATE).

    Args:
        db_path: Path to database file. Parent directories are created.
        row_factory: If True, set conn.row_factory = sqlite3.Row.
    """
    path = Path(db_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path), isolation_level=None, check_same_thread=False)
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute(f"PRAGMA busy_timeout={BUSY_TIMEOUT_MS}")
    if row_factory:
        conn.row_factory = sqlite3.Row
    return conn
