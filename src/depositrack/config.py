"""Run configuration loaded from a JSON file."""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from depositrack.domain.errors import NotFoundError, ValidationError

CONFIG_PATH_ENV = "DEPOSITRACK_CONFIG"
DEFAULT_CONFIG_NAME = "config.json"


class _ObjectPairs(list):
    """JSON object decoded as its (key, value) pairs, in file order."""


@dataclass(frozen=True)
class Config:
    """Application configuration.

    ``known_customers`` keeps the (address, name) pairs exactly as written,
    duplicates included, so the classifier can reject a repeated address
    instead of the JSON parser silently keeping the last one.
    """

    transaction_files: tuple[Path, ...] = ()
    known_customers: tuple[tuple[str, str], ...] = ()
    database_path: Optional[str] = None

    @classmethod
    def from_file(cls, config_path: str | Path) -> "Config":
        """Create config from a JSON file.

        Expected keys: ``transactionFiles`` (paths relative to the config
        file), ``knownCustomers`` (address to name) and optional
        ``databasePath``.

        Raises:
            NotFoundError: If the file doesn't exist
            ValidationError: If the file is not valid JSON or has the wrong shape
        """
        path = Path(config_path)
        if not path.exists():
            raise NotFoundError(f"Config file not found: {config_path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                # Keep every object as ordered pairs to see duplicate keys
                pairs = json.load(f, object_pairs_hook=_ObjectPairs)
            except json.JSONDecodeError as e:
                raise ValidationError(f"Failed to parse config file {config_path}: {e}") from e

        if not isinstance(pairs, _ObjectPairs):
            raise ValidationError(f"Config file {config_path} must contain an object")
        data: dict[str, Any] = dict(pairs)

        files = data.get("transactionFiles", [])
        if (
            isinstance(files, _ObjectPairs)
            or not isinstance(files, list)
            or not all(isinstance(p, str) for p in files)
        ):
            raise ValidationError("'transactionFiles' must be a list of paths")

        customers = data.get("knownCustomers", _ObjectPairs())
        if not isinstance(customers, _ObjectPairs):
            raise ValidationError("'knownCustomers' must be an object of address to name")

        database_path = data.get("databasePath")
        if database_path is not None and not isinstance(database_path, str):
            raise ValidationError("'databasePath' must be a string")

        base_dir = path.parent
        return cls(
            transaction_files=tuple(base_dir / p for p in files),
            known_customers=tuple(tuple(entry) for entry in customers),
            database_path=str(base_dir / database_path) if database_path else None,
        )

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """Load config from an explicit path, DEPOSITRACK_CONFIG, or ./config.json.

        An explicitly named file must exist; when falling back to
        ./config.json a missing file yields an empty config.
        """
        if config_path is None:
            config_path = os.environ.get(CONFIG_PATH_ENV)

        if config_path is None:
            default = Path.cwd() / DEFAULT_CONFIG_NAME
            if not default.exists():
                return cls()
            config_path = str(default)

        return cls.from_file(config_path)
