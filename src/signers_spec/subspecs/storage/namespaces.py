"""
Database namespace definitions for storage tables.

Defines table names and schema constants for SQLite storage.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RegistryNamespace:
    """
    Namespace for the registry state.

    A key-value table with a single fixed key. The value is the SSZ-encoded
    `RegistryState`, alongside its reward cycle for inspection with plain SQL.
    """

    TABLE_NAME: str = "registry"
    """Table name for registry storage."""

    KEY_CURRENT: str = "current"
    """Key of the live registry state."""

    CREATE_TABLE: str = """
        CREATE TABLE IF NOT EXISTS registry (
            key TEXT PRIMARY KEY,
            reward_cycle TEXT NOT NULL,
            data BLOB NOT NULL
        )
    """
    """SQL to create the registry table. Cycles are uint128, stored as decimal text."""


REGISTRY = RegistryNamespace()

ALL_NAMESPACES = [REGISTRY]
"""All namespace definitions for schema initialization."""
