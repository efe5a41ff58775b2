"""
SQLite database implementation for registry persistence.

The registry state is stored as SSZ-encoded bytes in a BLOB column.
The SSZ format gives a deterministic encoding that round-trips exactly.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from signers_spec.subspecs.signers.types import RegistryState

from .namespaces import ALL_NAMESPACES, REGISTRY

logger = logging.getLogger(__name__)


class SQLiteDatabase:
    """
    SQLite implementation of the Database protocol.

    Stores the registry state in a single SQLite file.
    Deserialization happens on read.
    """

    def __init__(self, path: Path | str) -> None:
        """
        Initialize SQLite database.

        Creates database file and tables if they don't exist.

        Args:
            path: Path to SQLite database file.
                  Use ":memory:" for in-memory database.
        """
        self._path = Path(path) if isinstance(path, str) else path

        # Only the thread that opened the database may use it.
        self._conn = sqlite3.connect(str(self._path))
        self._conn.row_factory = sqlite3.Row

        self._init_schema()

    def _init_schema(self) -> None:
        """Create tables if they don't exist."""
        cursor = self._conn.cursor()
        for namespace in ALL_NAMESPACES:
            cursor.execute(namespace.CREATE_TABLE)
        self._conn.commit()

    # -------------------------------------------------------------------------
    # Registry Operations
    # -------------------------------------------------------------------------

    def get_registry_state(self) -> RegistryState | None:
        """Retrieve the stored registry state."""
        cursor = self._conn.cursor()
        cursor.execute(
            f"SELECT data FROM {REGISTRY.TABLE_NAME} WHERE key = ?",
            (REGISTRY.KEY_CURRENT,),
        )
        row = cursor.fetchone()
        if row is None:
            return None
        return RegistryState.decode_bytes(row["data"])

    def put_registry_state(self, state: RegistryState) -> None:
        """Replace the stored registry state."""
        # The connection context manager commits on success and rolls back
        # on error, so the previous row survives a failed write.
        with self._conn:
            self._conn.execute(
                f"""
                INSERT OR REPLACE INTO {REGISTRY.TABLE_NAME} (key, reward_cycle, data)
                VALUES (?, ?, ?)
                """,
                (REGISTRY.KEY_CURRENT, str(state.last_set_cycle), state.encode_bytes()),
            )
        logger.debug("Persisted registry state for cycle %s to %s", state.last_set_cycle, self._path)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Close database connection."""
        self._conn.close()

    def __enter__(self) -> SQLiteDatabase:
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.close()
