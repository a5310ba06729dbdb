"""In-memory transaction store."""

from collections import defaultdict
from decimal import Decimal
from typing import Optional, Sequence

from depositrack.database.base import TransactionStore, latest_by_key
from depositrack.domain.entities import (
    AggregateBucket,
    BatchResult,
    DepositCriteria,
    TransactionRecord,
)
from depositrack.domain.records import validate_record


class InMemoryTransactionStore(TransactionStore):
    """Dictionary-backed implementation of TransactionStore."""

    def __init__(self):
        self._records: dict[tuple[str, int], TransactionRecord] = {}

    def connect(self) -> None:
        """Connect to the store."""
        # Nothing to connect to
        pass

    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    def initialize_schema(self) -> None:
        """Initialize store schema."""
        pass

    def reset(self) -> None:
        """Remove every stored record."""
        self._records.clear()

    def upsert_batch(self, records: Sequence[TransactionRecord]) -> BatchResult:
        """Insert or replace records by (txid, vout)."""
        for record in records:
            validate_record(record)

        latest = latest_by_key(records)
        updated = sum(1 for key in latest if key in self._records)
        self._records.update(latest)
        return BatchResult(
            inserted=len(latest) - updated,
            updated=updated,
            total=len(self._records),
        )

    def get_transaction(self, txid: str, vout: int) -> Optional[TransactionRecord]:
        """Get a record by its identity key."""
        return self._records.get((txid, vout))

    def list_transactions(self) -> list[TransactionRecord]:
        """List all records ordered by (txid, vout)."""
        return [self._records[key] for key in sorted(self._records)]

    def count_transactions(self) -> int:
        """Return the number of stored records."""
        return len(self._records)

    def aggregate_by_address(self, criteria: DepositCriteria) -> list[AggregateBucket]:
        """Group records matching criteria by address with count and sum."""
        totals: dict[str, dict[str, Decimal | int]] = defaultdict(
            lambda: {"count": 0, "sum": Decimal(0)}
        )
        for record in self._records.values():
            if criteria.matches(record):
                totals[record.address]["count"] += 1
                totals[record.address]["sum"] += record.amount

        return [
            AggregateBucket(address=address, count=data["count"], sum=data["sum"])
            for address, data in totals.items()
        ]

    def get_amount_range(
        self, criteria: DepositCriteria
    ) -> Optional[tuple[Decimal, Decimal]]:
        """Return (min, max) amount of records matching criteria."""
        amounts = [
            record.amount for record in self._records.values() if criteria.matches(record)
        ]
        if not amounts:
            return None
        return min(amounts), max(amounts)
