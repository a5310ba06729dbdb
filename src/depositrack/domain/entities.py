"""Domain model entities for depositrack.

These are pure data classes representing business concepts, independent of
database schema. Stores, the aggregator and the classifier all exchange
these values, so a storage backend can change without touching the logic
that consumes them.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

# Amounts are kept at satoshi precision.
AMOUNT_PLACES = 8
AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_PLACES)


@dataclass(frozen=True)
class TransactionRecord:
    """Wallet transaction entry identified by its output."""

    txid: str
    vout: int
    address: str
    category: str
    amount: Decimal
    confirmations: int

    @property
    def key(self) -> tuple[str, int]:
        """Identity of the record inside a store."""
        return (self.txid, self.vout)


@dataclass(frozen=True)
class DepositCriteria:
    """Filter deciding which records count as confirmed deposits."""

    min_confirmations: int = 6
    categories: frozenset[str] = frozenset({"receive", "generate"})

    def matches(self, record: TransactionRecord) -> bool:
        """Return True if the record is a qualifying deposit."""
        return (
            record.confirmations >= self.min_confirmations
            and record.category in self.categories
        )


QUALIFYING_DEPOSITS = DepositCriteria()


@dataclass(frozen=True)
class BatchResult:
    """Outcome of a batch upsert."""

    inserted: int
    updated: int
    total: int


@dataclass(frozen=True)
class AggregateBucket:
    """Count and sum of qualifying deposits for one address."""

    address: str
    count: int
    sum: Decimal


@dataclass(frozen=True)
class DepositSummary:
    """Per-address buckets plus the smallest and largest qualifying deposit."""

    min: Decimal
    max: Decimal
    buckets: frozenset[AggregateBucket]

    def bucket_for(self, address: str) -> Optional[AggregateBucket]:
        """Return the bucket for an address, or None."""
        for bucket in self.buckets:
            if bucket.address == address:
                return bucket
        return None


@dataclass(frozen=True)
class KnownDeposit:
    """Deposits of a registered customer."""

    name: str
    count: int
    sum: Decimal


@dataclass(frozen=True)
class UnknownDeposits:
    """Deposits to addresses without a registered customer."""

    count: int = 0
    sum: Decimal = Decimal(0)


@dataclass(frozen=True)
class DepositReport:
    """Classified deposit totals ready for display."""

    known_deposits: tuple[KnownDeposit, ...]
    unknown_deposits: UnknownDeposits
    min: Decimal
    max: Decimal
