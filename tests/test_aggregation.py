"""Tests for the deposit aggregator."""

from decimal import Decimal

import pytest

from depositrack.domain.aggregation import DepositAggregator
from depositrack.domain.entities import AggregateBucket, DepositCriteria
from depositrack.domain.errors import NoQualifyingDepositsError


def test_aggregate_example(store, make_record):
    """Two qualifying deposits and one unconfirmed one for the same address."""
    store.upsert_batch(
        [
            make_record(txid="t1", address="A1", amount="1.5", confirmations=6, category="receive"),
            make_record(txid="t2", address="A1", amount="2.5", confirmations=10, category="generate"),
            make_record(txid="t3", address="A1", amount="7", confirmations=3, category="receive"),
        ]
    )

    summary = DepositAggregator(store).aggregate()

    assert summary.buckets == frozenset({AggregateBucket(address="A1", count=2, sum=Decimal("4.0"))})
    assert summary.min == Decimal("1.5")
    assert summary.max == Decimal("2.5")


def test_min_max_over_records_not_bucket_sums(store, make_record):
    store.upsert_batch(
        [
            make_record(txid="t1", address="A1", amount="1"),
            make_record(txid="t2", address="A1", amount="1"),
            make_record(txid="t3", address="A2", amount="1.5"),
        ]
    )

    summary = DepositAggregator(store).aggregate()

    assert summary.bucket_for("A1").sum == Decimal("2")
    assert summary.max == Decimal("1.5")
    assert summary.min == Decimal("1")


@pytest.mark.parametrize(
    "overrides",
    [
        {"confirmations": 5, "amount": "1000"},
        {"category": "send", "amount": "1000"},
        {"category": "send", "amount": "-1000", "confirmations": 100},
        {"confirmations": 5, "amount": "0.00000001"},
    ],
)
def test_non_qualifying_records_never_contribute(store, make_record, overrides):
    store.upsert_batch(
        [
            make_record(txid="good", address="A1", amount="2"),
            make_record(txid="bad", address="A1", **overrides),
        ]
    )

    summary = DepositAggregator(store).aggregate()

    assert summary.buckets == frozenset({AggregateBucket(address="A1", count=1, sum=Decimal("2"))})
    assert summary.min == Decimal("2")
    assert summary.max == Decimal("2")


def test_no_qualifying_deposits_raises(store, make_record):
    store.upsert_batch([make_record(confirmations=5), make_record(txid="t2", category="send")])

    with pytest.raises(NoQualifyingDepositsError) as excinfo:
        DepositAggregator(store).aggregate()

    assert "at least 6 confirmations" in str(excinfo.value)


def test_empty_store_raises(store):
    with pytest.raises(NoQualifyingDepositsError):
        DepositAggregator(store).aggregate()


def test_aggregate_is_deterministic(store, make_record):
    store.upsert_batch(
        [make_record(txid=f"t{i}", address=f"A{i % 3}", amount="0.00100001") for i in range(30)]
    )
    aggregator = DepositAggregator(store)

    first = aggregator.aggregate()
    second = aggregator.aggregate()

    assert first == second
    assert sum(bucket.count for bucket in first.buckets) == 30
    assert sum(bucket.sum for bucket in first.buckets) == Decimal("0.0300003")


def test_custom_criteria_used_for_buckets_and_range(store, make_record):
    store.upsert_batch(
        [
            make_record(txid="t1", amount="5", confirmations=1),
            make_record(txid="t2", amount="9", confirmations=1, category="generate"),
        ]
    )
    criteria = DepositCriteria(min_confirmations=1, categories=frozenset({"receive"}))

    summary = DepositAggregator(store, criteria).aggregate()

    assert summary.buckets == frozenset({AggregateBucket(address="addr-1", count=1, sum=Decimal("5"))})
    assert (summary.min, summary.max) == (Decimal("5"), Decimal("5"))
