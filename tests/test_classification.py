"""Tests for the customer classifier."""

from decimal import Decimal

import pytest

from depositrack.domain.classification import CustomerClassifier, registry_entries
from depositrack.domain.entities import (
    AggregateBucket,
    DepositSummary,
    KnownDeposit,
    UnknownDeposits,
)
from depositrack.domain.errors import RegistryError


def _summary(*buckets, min_amount="0.5", max_amount="5"):
    return DepositSummary(
        min=Decimal(min_amount),
        max=Decimal(max_amount),
        buckets=frozenset(
            AggregateBucket(address=address, count=count, sum=Decimal(total))
            for address, count, total in buckets
        ),
    )


@pytest.fixture
def classifier():
    return CustomerClassifier()


def test_known_customer(classifier):
    summary = _summary(("A1", 2, "4.0"), min_amount="1.5", max_amount="2.5")

    report = classifier.classify(summary, {"A1": "Alice"})

    assert report.known_deposits == (KnownDeposit(name="Alice", count=2, sum=Decimal("4.0")),)
    assert report.unknown_deposits == UnknownDeposits(count=0, sum=Decimal(0))
    assert report.min == Decimal("1.5")
    assert report.max == Decimal("2.5")


def test_unknown_addresses_are_summed(classifier):
    summary = _summary(("U1", 1, "3"), ("U2", 2, "7"))

    report = classifier.classify(summary, {"A1": "Alice"})

    assert report.known_deposits == ()
    assert report.unknown_deposits == UnknownDeposits(count=3, sum=Decimal("10"))


def test_known_deposits_follow_registry_order(classifier):
    summary = _summary(("A1", 1, "1"), ("A2", 1, "2"), ("A3", 1, "3"))
    registry = {"A3": "Carol", "A1": "Alice", "A2": "Bob"}

    report = classifier.classify(summary, registry)

    assert [deposit.name for deposit in report.known_deposits] == ["Carol", "Alice", "Bob"]


def test_registered_customer_without_deposits_is_omitted(classifier):
    summary = _summary(("A1", 1, "1"))

    report = classifier.classify(summary, {"A0": "Nobody", "A1": "Alice"})

    assert [deposit.name for deposit in report.known_deposits] == ["Alice"]


def test_partition_is_complete(classifier):
    buckets = [("A1", 1, "1"), ("A2", 4, "2"), ("U1", 2, "3"), ("U2", 8, "4.5")]
    summary = _summary(*buckets)

    report = classifier.classify(summary, {"A1": "Alice", "A2": "Bob", "A9": "Zed"})

    known_count = sum(deposit.count for deposit in report.known_deposits)
    known_sum = sum(deposit.sum for deposit in report.known_deposits)
    assert known_count + report.unknown_deposits.count == 15
    assert known_sum + report.unknown_deposits.sum == Decimal("10.5")
    assert report.unknown_deposits == UnknownDeposits(count=10, sum=Decimal("7.5"))


def test_registry_as_pairs(classifier):
    summary = _summary(("A1", 1, "1"), ("A2", 1, "2"))

    report = classifier.classify(summary, [("A2", "Bob"), ("A1", "Alice")])

    assert [deposit.name for deposit in report.known_deposits] == ["Bob", "Alice"]


def test_classify_is_pure(classifier):
    summary = _summary(("A1", 1, "1"), ("U1", 1, "2"))
    registry = {"A1": "Alice"}

    assert classifier.classify(summary, registry) == classifier.classify(summary, registry)
    assert registry == {"A1": "Alice"}


class TestRegistryErrors:
    """Malformed registries are rejected."""

    def test_duplicate_address(self, classifier):
        with pytest.raises(RegistryError) as excinfo:
            classifier.classify(_summary(("A1", 1, "1")), [("A1", "Alice"), ("A1", "Alicia")])

        assert "registered more than once" in str(excinfo.value)

    @pytest.mark.parametrize("name", ["", "   ", None, 42])
    def test_missing_name(self, classifier, name):
        with pytest.raises(RegistryError) as excinfo:
            classifier.classify(_summary(("A1", 1, "1")), {"A1": name})

        assert "has no name" in str(excinfo.value)

    def test_missing_address(self):
        with pytest.raises(RegistryError):
            registry_entries({"": "Alice"})

    def test_entry_not_a_pair(self):
        with pytest.raises(RegistryError):
            registry_entries([("A1",)])
