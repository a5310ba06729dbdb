"""Known/unknown customer classification of deposit totals."""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Union

from depositrack.domain.entities import (
    DepositReport,
    DepositSummary,
    KnownDeposit,
    UnknownDeposits,
)
from depositrack.domain.errors import (
    RegistryError,
    duplicate_registry_address,
    registry_name_missing,
)

CustomerRegistry = Union[Mapping[str, str], Iterable[tuple[str, str]]]


def registry_entries(registry: CustomerRegistry) -> list[tuple[str, str]]:
    """Return registry (address, name) pairs in registry order.

    Raises:
        RegistryError: If an address repeats or an entry lacks a name
    """
    pairs = registry.items() if isinstance(registry, Mapping) else registry

    entries: list[tuple[str, str]] = []
    seen: set[str] = set()
    for entry in pairs:
        try:
            address, name = entry
        except (TypeError, ValueError):
            raise RegistryError(f"Registry entry {entry!r} is not an (address, name) pair")
        if not isinstance(address, str) or not address.strip():
            raise RegistryError(f"Registry entry {entry!r} has no address")
        if not isinstance(name, str) or not name.strip():
            raise RegistryError(registry_name_missing(address))
        if address in seen:
            raise RegistryError(duplicate_registry_address(address))
        seen.add(address)
        entries.append((address, name))
    return entries


class CustomerClassifier:
    """Service splitting deposit buckets into known and unknown customers."""

    def classify(self, summary: DepositSummary, registry: CustomerRegistry) -> DepositReport:
        """Build the deposit report for a summary.

        Args:
            summary: Aggregated deposits
            registry: Address to display name, as a mapping or ordered pairs

        Returns:
            DepositReport with known deposits in registry order. Registered
            addresses without deposits are left out; every other bucket is
            added to the unknown total.

        Raises:
            RegistryError: If the registry is malformed
        """
        entries = registry_entries(registry)
        by_address = {bucket.address: bucket for bucket in summary.buckets}

        known_deposits = []
        for address, name in entries:
            bucket = by_address.get(address)
            if bucket is not None:
                known_deposits.append(KnownDeposit(name=name, count=bucket.count, sum=bucket.sum))

        registered = {address for address, _ in entries}
        unknown_count = 0
        unknown_sum = Decimal(0)
        for bucket in summary.buckets:
            if bucket.address not in registered:
                unknown_count += bucket.count
                unknown_sum += bucket.sum

        return DepositReport(
            known_deposits=tuple(known_deposits),
            unknown_deposits=UnknownDeposits(count=unknown_count, sum=unknown_sum),
            min=summary.min,
            max=summary.max,
        )
