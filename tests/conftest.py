"""Shared pytest fixtures for depositrack tests."""

import tempfile
import os
from decimal import Decimal
from pathlib import Path
import pytest

from depositrack.database.factories import create_memory_store, create_sqlite_store
from depositrack.domain.entities import TransactionRecord


@pytest.fixture
def temp_db():
    """Create a temporary SQLite store for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    # Cleanup
    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_store():
    """Create an empty in-memory store."""
    store = create_memory_store()
    store.connect()
    yield store
    store.disconnect()


@pytest.fixture(params=["memory", "sqlite"])
def store(request):
    """Run a test against every store implementation."""
    if request.param == "memory":
        return request.getfixturevalue("memory_store")
    return request.getfixturevalue("temp_db")


@pytest.fixture
def make_record():
    """Return a builder for transaction records with qualifying defaults."""

    def build(
        txid="tx-1",
        vout=0,
        address="addr-1",
        category="receive",
        amount="1.0",
        confirmations=6,
    ) -> TransactionRecord:
        return TransactionRecord(
            txid=txid,
            vout=vout,
            address=address,
            category=category,
            amount=Decimal(amount),
            confirmations=confirmations,
        )

    return build


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def config_file(fixtures_dir):
    """Return the path of the sample config file."""
    return fixtures_dir / "config.json"
