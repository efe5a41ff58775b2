"""
Storage module for registry persistence.

Keeps the registry state across restarts.
Uses SQLite for simplicity and correctness.
"""

from .database import Database
from .namespaces import RegistryNamespace
from .sqlite import SQLiteDatabase

__all__ = [
    "Database",
    "SQLiteDatabase",
    "RegistryNamespace",
]
