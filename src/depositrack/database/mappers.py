"""Mapper functions to convert between domain records and SQLAlchemy models.

This layer isolates the conversion logic, including the satoshi encoding of
amounts, so the schema can change without touching the domain.
"""

from depositrack.domain import entities as domain
from depositrack.database.models import Transaction as ORMTransaction
from depositrack.utils.amount_parser import from_satoshis, to_satoshis


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.TransactionRecord:
    """Convert SQLAlchemy Transaction model to domain TransactionRecord."""
    return domain.TransactionRecord(
        txid=orm_transaction.txid,
        vout=orm_transaction.vout,
        address=orm_transaction.address,
        category=orm_transaction.category,
        amount=from_satoshis(orm_transaction.amount_sats),
        confirmations=orm_transaction.confirmations,
    )


def transaction_to_orm(record: domain.TransactionRecord) -> ORMTransaction:
    """Build a new SQLAlchemy Transaction row from a domain record."""
    return ORMTransaction(
        txid=record.txid,
        vout=record.vout,
        address=record.address,
        category=record.category,
        amount_sats=to_satoshis(record.amount),
        confirmations=record.confirmations,
    )


def apply_record(orm_transaction: ORMTransaction, record: domain.TransactionRecord) -> None:
    """Overwrite the mutable columns of an existing row with a record's values."""
    orm_transaction.address = record.address
    orm_transaction.category = record.category
    orm_transaction.amount_sats = to_satoshis(record.amount)
    orm_transaction.confirmations = record.confirmations
