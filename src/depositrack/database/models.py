"""SQLAlchemy models for depositrack database."""

from sqlalchemy import (
    BigInteger,
    Column,
    Integer,
    String,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Transaction(Base):
    """Wallet transaction model.

    Amounts are stored as integer satoshis so SUM/MIN/MAX stay exact on
    every backend, including SQLite which has no native decimal type.
    """

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    txid = Column(String, nullable=False)
    vout = Column(Integer, nullable=False)
    address = Column(String, nullable=False, index=True)
    category = Column(String, nullable=False)
    amount_sats = Column(BigInteger, nullable=False)
    confirmations = Column(Integer, nullable=False)

    # Identity of a wallet output
    __table_args__ = (UniqueConstraint("txid", "vout", name="uq_txid_vout"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
