"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested file or entity does not exist."""


class NoQualifyingDepositsError(DomainError):
    """Aggregation found no confirmed deposits."""


class StoreUnavailableError(DomainError):
    """The transaction store could not be reached or queried."""


class RegistryError(DomainError):
    """Malformed customer registry entry."""


def missing_field(field: str) -> str:
    """Return message for a record missing a required field."""
    return f"Transaction record is missing required field '{field}'"


def invalid_field(field: str, value: object, reason: str) -> str:
    """Return message for a record field with an unusable value."""
    return f"Invalid {field} {value!r}: {reason}"


def no_qualifying_deposits(min_confirmations: int, categories: frozenset[str]) -> str:
    """Return message when nothing passes the deposit filter."""
    return (
        f"No deposits with at least {min_confirmations} confirmations "
        f"in categories {', '.join(sorted(categories))}"
    )


def duplicate_registry_address(address: str) -> str:
    """Return message for an address registered twice."""
    return f"Customer address '{address}' is registered more than once"


def registry_name_missing(address: str) -> str:
    """Return message for a registry entry without a display name."""
    return f"Customer address '{address}' has no name"
