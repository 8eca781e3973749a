"""SQLite-backed durable key-value store."""

import asyncio
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..errors import StoreReadError, StoreWriteError
from ..logging.config import get_logger
from .base import KeyValueStore


class SqliteKeyValueStore(KeyValueStore):
    """
    Key-value persistence in a single SQLite table.

    Blocking sqlite calls run in a worker thread so the event loop is never
    stalled; a lock serializes access from those threads.
    """

    def __init__(self, db_path: str = "fortune.db"):
        self.db_path = Path(db_path)
        self.logger = get_logger("fortune.store")
        self._lock = threading.Lock()

        self._init_database()

    def _init_database(self) -> None:
        """Initialize database schema."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()

    @contextmanager
    def _get_connection(self):
        """Get database connection with proper error handling."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=30.0)
            conn.row_factory = sqlite3.Row
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            self.logger.error("Database error", db_path=str(self.db_path), error=str(e))
            raise
        finally:
            if conn:
                conn.close()

    def _get_sync(self, key: str) -> Optional[str]:
        with self._lock:
            try:
                with self._get_connection() as conn:
                    row = conn.execute(
                        "SELECT value FROM kv WHERE key = ?", (key,)
                    ).fetchone()
            except sqlite3.Error as e:
                raise StoreReadError(
                    f"Failed to read key {key!r}: {e}", key=key
                ) from e

        return row["value"] if row else None

    def _set_sync(self, key: str, value: str) -> None:
        with self._lock:
            try:
                with self._get_connection() as conn:
                    conn.execute("""
                        INSERT OR REPLACE INTO kv (key, value, updated_at)
                        VALUES (?, ?, ?)
                    """, (key, value, datetime.now(timezone.utc).isoformat()))
                    conn.commit()
            except sqlite3.Error as e:
                raise StoreWriteError(
                    f"Failed to write key {key!r}: {e}", key=key
                ) from e

        self.logger.debug("Value stored", key=key, size=len(value))

    async def get(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._get_sync, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._set_sync, key, value)
