"""
Durable key-value store adapters.

The lifecycle manager persists the last fortune and its calendar day as
two string values; any backend implementing ``KeyValueStore`` will do.
"""

from .base import KeyValueStore
from .memory_store import InMemoryStore
from .sqlite_store import SqliteKeyValueStore

__all__ = ["KeyValueStore", "InMemoryStore", "SqliteKeyValueStore"]
