"""Storage layer for depositrack."""

from depositrack.database.base import TransactionStore
from depositrack.database.factories import create_memory_store, create_sqlite_store

__all__ = ["TransactionStore", "create_memory_store", "create_sqlite_store"]
