"""Store factory functions for creating transaction store instances."""

import os
from pathlib import Path
from typing import Optional

from depositrack.database.memory import InMemoryTransactionStore
from depositrack.database.sqlalchemy_db import SQLAlchemyTransactionStore

DB_PATH_ENV = "DEPOSITRACK_DB_PATH"


def resolve_database_path(database_path: Optional[str] = None) -> str:
    """Resolve the SQLite file path.

    Args:
        database_path: Explicit path. If None, checks DEPOSITRACK_DB_PATH
            environment variable, then defaults to ~/.depositrack/depositrack.db

    Returns:
        Path to the SQLite database file
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        # Default to ~/.depositrack/depositrack.db
        home = Path.home()
        db_dir = home / ".depositrack"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "depositrack.db")

    return database_path


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyTransactionStore:
    """Create a SQLite-backed transaction store.

    Args:
        database_path: Path to SQLite database file, resolved with
            resolve_database_path

    Returns:
        SQLAlchemyTransactionStore instance configured for SQLite
    """
    database_url = f"sqlite:///{resolve_database_path(database_path)}"
    return SQLAlchemyTransactionStore(database_url)


def create_memory_store() -> InMemoryTransactionStore:
    """Create a transaction store that lives only for the current process."""
    return InMemoryTransactionStore()
