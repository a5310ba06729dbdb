"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
from typing import Union

from depositrack.domain.entities import AMOUNT_PLACES

# Largest satoshi value a signed 64-bit column holds
MAX_SATOSHIS = 2**63 - 1

AmountInput = Union[str, int, float, Decimal]


def parse_amount(value: AmountInput) -> Decimal:
    """Parse a wallet amount into a Decimal.

    Handles the shapes wallet exports use:
    - Decimal (JSON read with ``parse_float=Decimal``)
    - "0.00100000"
    - 5 (whole coins)
    - -0.0001 (floats are converted through their shortest repr, so
      ``0.1`` becomes ``Decimal("0.1")`` rather than the binary value)

    Args:
        value: Raw amount

    Returns:
        Decimal amount

    Raises:
        ValueError: If the value cannot be parsed or is not finite
    """
    if isinstance(value, bool):
        raise ValueError(f"Could not parse amount {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        if not value.strip():
            raise ValueError("Empty amount string")
        try:
            amount = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"Could not parse amount '{value}': {e}")
    else:
        raise ValueError(f"Could not parse amount {value!r}")

    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return amount


def fits_satoshi_range(amount: Decimal) -> bool:
    """Return True if the amount in satoshis fits a signed 64-bit integer."""
    return abs(amount.scaleb(AMOUNT_PLACES)) <= MAX_SATOSHIS


def has_amount_precision(amount: Decimal, places: int = AMOUNT_PLACES) -> bool:
    """Return True if the amount has no more than ``places`` decimal places."""
    return amount == amount.quantize(Decimal(1).scaleb(-places))


def to_satoshis(amount: Decimal) -> int:
    """Convert a coin amount to integer base units."""
    return int(amount.scaleb(AMOUNT_PLACES))


def from_satoshis(value: int) -> Decimal:
    """Convert integer base units back to a coin amount."""
    return Decimal(value).scaleb(-AMOUNT_PLACES)
