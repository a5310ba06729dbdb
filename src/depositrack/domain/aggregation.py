"""Confirmed-deposit aggregation."""

from depositrack.database.base import TransactionStore
from depositrack.domain.entities import (
    QUALIFYING_DEPOSITS,
    DepositCriteria,
    DepositSummary,
)
from depositrack.domain.errors import NoQualifyingDepositsError, no_qualifying_deposits


class DepositAggregator:
    """Service computing deposit totals from a transaction store."""

    def __init__(self, store: TransactionStore, criteria: DepositCriteria = QUALIFYING_DEPOSITS):
        """Initialize deposit aggregator.

        Args:
            store: Transaction store to read from
            criteria: Definition of a qualifying deposit, shared by the
                bucket and range queries
        """
        self.store = store
        self.criteria = criteria

    def aggregate(self) -> DepositSummary:
        """Compute per-address buckets and the global deposit range.

        Returns:
            DepositSummary over every record matching the criteria

        Raises:
            NoQualifyingDepositsError: If no stored record qualifies
            StoreUnavailableError: If the store cannot be queried
        """
        amount_range = self.store.get_amount_range(self.criteria)
        if amount_range is None:
            raise NoQualifyingDepositsError(
                no_qualifying_deposits(self.criteria.min_confirmations, self.criteria.categories)
            )

        smallest, largest = amount_range
        buckets = self.store.aggregate_by_address(self.criteria)
        return DepositSummary(min=smallest, max=largest, buckets=frozenset(buckets))
