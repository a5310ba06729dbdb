"""Reading wallet transaction exports from disk."""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, Union

from depositrack.domain.entities import TransactionRecord
from depositrack.domain.errors import NotFoundError, ValidationError
from depositrack.domain.records import parse_transaction

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_transactions(file_path: PathLike) -> list[dict[str, Any]]:
    """Read the ``transactions`` list of a wallet JSON export.

    Numbers with a fraction are parsed as Decimal so amounts never pass
    through binary floating point.

    Args:
        file_path: Path to JSON file

    Returns:
        Raw transaction entries in file order

    Raises:
        NotFoundError: If the file doesn't exist
        ValidationError: If the file is not valid JSON or has no transactions list
    """
    path = Path(file_path)
    if not path.exists():
        raise NotFoundError(f"Transaction file not found: {file_path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Failed to parse transaction file {file_path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("transactions"), list):
        raise ValidationError(f"Transaction file {file_path} has no 'transactions' list")

    logger.debug("Read %d transactions from %s", len(data["transactions"]), path)
    return data["transactions"]


def load_transaction_files(file_paths: Iterable[PathLike]) -> list[TransactionRecord]:
    """Read and validate the transactions of several files, in order.

    Raises:
        NotFoundError: If a file doesn't exist
        ValidationError: If a file or one of its entries is malformed
    """
    records: list[TransactionRecord] = []
    for file_path in file_paths:
        for index, raw in enumerate(read_transactions(file_path)):
            try:
                records.append(parse_transaction(raw))
            except ValidationError as e:
                raise ValidationError(f"{file_path}, transaction {index}: {e}") from e
    return records
