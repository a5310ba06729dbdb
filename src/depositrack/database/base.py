"""Abstract transaction store interface."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from depositrack.domain.entities import (
    AggregateBucket,
    BatchResult,
    DepositCriteria,
    TransactionRecord,
)


class TransactionStore(ABC):
    """Deduplicated set of transaction records keyed by (txid, vout)."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the backing storage."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the backing storage."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    # Write operations
    @abstractmethod
    def reset(self) -> None:
        """Remove every stored record."""
        pass

    @abstractmethod
    def upsert_batch(self, records: Sequence[TransactionRecord]) -> BatchResult:
        """Insert or replace records by (txid, vout).

        The whole batch is validated before anything is written; a record
        that fails validation aborts the batch with nothing applied. When a
        key appears more than once in the batch the last occurrence wins.

        Raises:
            ValidationError: If any record is malformed
            StoreUnavailableError: If the backing storage fails
        """
        pass

    # Read operations
    @abstractmethod
    def get_transaction(self, txid: str, vout: int) -> Optional[TransactionRecord]:
        """Get a record by its identity key."""
        pass

    @abstractmethod
    def list_transactions(self) -> list[TransactionRecord]:
        """List all records ordered by (txid, vout)."""
        pass

    @abstractmethod
    def count_transactions(self) -> int:
        """Return the number of stored records."""
        pass

    # Aggregation queries
    @abstractmethod
    def aggregate_by_address(self, criteria: DepositCriteria) -> list[AggregateBucket]:
        """Group records matching criteria by address with count and sum."""
        pass

    @abstractmethod
    def get_amount_range(
        self, criteria: DepositCriteria
    ) -> Optional[tuple[Decimal, Decimal]]:
        """Return (min, max) amount of records matching criteria.

        Returns None when no record matches.
        """
        pass


def latest_by_key(records: Sequence[TransactionRecord]) -> dict[tuple[str, int], TransactionRecord]:
    """Collapse a batch to one record per key, keeping the last occurrence."""
    latest: dict[tuple[str, int], TransactionRecord] = {}
    for record in records:
        latest[record.key] = record
    return latest
