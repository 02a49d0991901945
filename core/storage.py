"""Key/value storage implementation using SQLite3.

This module provides the durable per-process store used for JSON blobs such as the
translation quota ledger and the translation settings.
"""

from __future__ import annotations

import json
import sqlite3
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any, Self

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging


__all__: list[str] = ["KeyValueStorage"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

MEMORY_DATABASE: str = ":memory:"


class KeyValueStorage:
    """SQLite3-based storage for JSON values under fixed keys.

    Values are written through immediately (autocommit). Reads of a key that was never written,
    or whose stored JSON cannot be parsed, return None.

    Attributes:
        db_path (Path): Path to the SQLite database file, or ":memory:".
        _connection (sqlite3.Connection | None): Active database connection.
    """

    def __init__(self, db_path: str | Path) -> None:
        """Initialize the storage with the path to the database file.

        Args:
            db_path (str | Path): Path to the SQLite database file. ":memory:" keeps data in memory.

        Raises:
            RuntimeError: If the database path is empty.
        """
        logger.debug("Initializing %s", self.__class__.__name__)

        if str(db_path).strip() == "":
            msg: str = "The database path is empty."
            raise RuntimeError(msg)

        self.db_path: Path = Path(db_path)
        self._connection: sqlite3.Connection | None = None
        logger.debug("Database path set to: %s", self.db_path)

    def __enter__(self) -> Self:
        self._initialize_database()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        self.close()

    @property
    def is_memory(self) -> bool:
        return str(self.db_path) == MEMORY_DATABASE

    def _initialize_database(self) -> None:
        """Open the connection and create the table if it doesn't exist."""
        if self._connection is not None:
            return

        if not self.is_memory:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self._connection = sqlite3.connect(
            str(self.db_path),
            check_same_thread=False,
            isolation_level=None,  # Autocommit mode
        )
        self._connection.execute(
            """
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at REAL NOT NULL
            )
            """
        )
        logger.debug("Database initialized successfully")

    @property
    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            self._initialize_database()
        if self._connection is None:
            msg = "Database connection is not initialized."
            raise RuntimeError(msg)
        return self._connection

    def load(self, key: str) -> Any | None:
        """Load the JSON value stored under key.

        Args:
            key (str): Storage key, e.g. "translation-quotas".

        Returns:
            Any | None: The decoded value, or None if missing or unreadable.
        """
        cursor: sqlite3.Cursor = self.connection.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
        row = cursor.fetchone()
        if row is None:
            logger.debug("No value stored for key: %s", key)
            return None

        try:
            return json.loads(row[0])
        except json.JSONDecodeError as err:
            logger.error("Stored value for key '%s' is not valid JSON: %s", key, err)
            return None

    def save(self, key: str, value: Any) -> None:
        """Store value as JSON under key, replacing any previous value.

        Raises:
            TypeError: If the value cannot be serialized to JSON.
        """
        payload: str = json.dumps(value, ensure_ascii=False)
        self.connection.execute(
            "INSERT OR REPLACE INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)",
            (key, payload, time.time()),
        )
        logger.debug("Saved value for key: %s", key)

    def delete(self, key: str) -> None:
        self.connection.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        logger.debug("Deleted value for key: %s", key)

    def close(self) -> None:
        """Close the database connection if open."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.debug("Database connection closed")
