"""End-to-end deposit processing service."""

from typing import Sequence

from depositrack.database.base import TransactionStore
from depositrack.domain.aggregation import DepositAggregator
from depositrack.domain.classification import CustomerClassifier, CustomerRegistry
from depositrack.domain.entities import (
    QUALIFYING_DEPOSITS,
    BatchResult,
    DepositCriteria,
    DepositReport,
    DepositSummary,
    TransactionRecord,
)


class DepositService:
    """Service running a full-refresh deposit run against one store."""

    def __init__(self, store: TransactionStore, criteria: DepositCriteria = QUALIFYING_DEPOSITS):
        """Initialize deposit service.

        Args:
            store: Transaction store owned by the caller
            criteria: Definition of a qualifying deposit
        """
        self.store = store
        self.aggregator = DepositAggregator(store, criteria)
        self.classifier = CustomerClassifier()

    def load(self, records: Sequence[TransactionRecord]) -> BatchResult:
        """Replace the store contents with a batch of records.

        Records from a previous run are discarded first, so re-running with
        the same input leaves the store unchanged.
        """
        self.store.reset()
        return self.store.upsert_batch(records)

    def summarize(self) -> DepositSummary:
        """Aggregate the current store contents."""
        return self.aggregator.aggregate()

    def build_report(self, registry: CustomerRegistry) -> DepositReport:
        """Aggregate the current store contents and classify them."""
        return self.classifier.classify(self.summarize(), registry)

    def process(
        self, records: Sequence[TransactionRecord], registry: CustomerRegistry
    ) -> DepositReport:
        """Load a batch of records and report on it.

        Raises:
            ValidationError: If a record is malformed
            NoQualifyingDepositsError: If no loaded record qualifies
            RegistryError: If the registry is malformed
            StoreUnavailableError: If the store fails
        """
        self.load(records)
        return self.build_report(registry)
