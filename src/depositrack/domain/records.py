"""Validation of raw wallet entries into transaction records."""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from depositrack.domain.entities import AMOUNT_PLACES, TransactionRecord
from depositrack.domain.errors import ValidationError, invalid_field, missing_field
from depositrack.utils.amount_parser import (
    fits_satoshi_range,
    has_amount_precision,
    parse_amount,
)

REQUIRED_FIELDS = ("txid", "vout", "address", "category", "amount", "confirmations")


def _non_negative_int(field: str, value: Any) -> int:
    # bool is an int subclass; a JSON true is never a valid index or count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(invalid_field(field, value, "expected an integer"))
    if value < 0:
        raise ValidationError(invalid_field(field, value, "must not be negative"))
    return value


def _non_empty_str(field: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(invalid_field(field, value, "expected a non-empty string"))
    return value


def _amount(value: Any) -> Decimal:
    try:
        amount = parse_amount(value)
    except ValueError as e:
        raise ValidationError(invalid_field("amount", value, str(e))) from e
    try:
        in_range = fits_satoshi_range(amount)
        precise = in_range and has_amount_precision(amount)
    except ArithmeticError as e:
        # Decimal signals InvalidOperation or Overflow past its context limits
        raise ValidationError(invalid_field("amount", value, "out of range")) from e
    if not in_range:
        raise ValidationError(invalid_field("amount", value, "out of range"))
    if not precise:
        raise ValidationError(
            invalid_field("amount", value, f"more than {AMOUNT_PLACES} decimal places")
        )
    return amount


def parse_transaction(raw: Mapping[str, Any]) -> TransactionRecord:
    """Build a TransactionRecord from a wallet entry.

    Keys other than the required ones (``time``, ``blockhash``, ...) are
    ignored.

    Args:
        raw: Mapping as found in a wallet ``transactions`` list

    Returns:
        Validated TransactionRecord

    Raises:
        ValidationError: If a required field is missing or unusable
    """
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Transaction entry must be an object, got {type(raw).__name__}")

    for field in REQUIRED_FIELDS:
        if raw.get(field) is None:
            raise ValidationError(missing_field(field))

    return TransactionRecord(
        txid=_non_empty_str("txid", raw["txid"]),
        vout=_non_negative_int("vout", raw["vout"]),
        address=_non_empty_str("address", raw["address"]),
        category=_non_empty_str("category", raw["category"]),
        amount=_amount(raw["amount"]),
        confirmations=_non_negative_int("confirmations", raw["confirmations"]),
    )


def validate_record(record: TransactionRecord) -> TransactionRecord:
    """Check a record built elsewhere before it reaches a store.

    Records constructed directly (not through parse_transaction) are not
    checked by the dataclass, so stores run this on every batch entry.

    Raises:
        ValidationError: If a field is missing or malformed
    """
    if record.txid is None:
        raise ValidationError(missing_field("txid"))
    if record.vout is None:
        raise ValidationError(missing_field("vout"))
    _non_empty_str("txid", record.txid)
    _non_negative_int("vout", record.vout)
    _non_empty_str("address", record.address)
    _non_empty_str("category", record.category)
    if not isinstance(record.amount, Decimal):
        raise ValidationError(invalid_field("amount", record.amount, "expected a Decimal"))
    _amount(record.amount)
    _non_negative_int("confirmations", record.confirmations)
    return record
