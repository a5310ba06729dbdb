"""Domain layer for depositrack."""

from depositrack.domain.entities import (
    AggregateBucket,
    BatchResult,
    DepositCriteria,
    DepositReport,
    DepositSummary,
    KnownDeposit,
    TransactionRecord,
    UnknownDeposits,
)
from depositrack.domain.errors import (
    DomainError,
    NoQualifyingDepositsError,
    RegistryError,
    StoreUnavailableError,
    ValidationError,
)

__all__ = [
    "AggregateBucket",
    "BatchResult",
    "DepositCriteria",
    "DepositReport",
    "DepositSummary",
    "KnownDeposit",
    "TransactionRecord",
    "UnknownDeposits",
    "DomainError",
    "NoQualifyingDepositsError",
    "RegistryError",
    "StoreUnavailableError",
    "ValidationError",
]
