# models.py
# Role: SQLAlchemy ORM models for the finance ledger domain.
#       Defines the Transaction model, one credit or debit entry
#       stored in the ledger.

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Float, Index
from db import Base


TRANSACTION_TYPES = ("credit", "debit")


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the ledger's storage convention)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Transaction(Base):
    """
    ORM model representing a single ledger entry.

    `type` is not constrained at the database level: rows written by older
    clients may carry other values, and the reports skip them.
    Dates are stored as naive UTC datetimes.
    """

    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_date_id", "date", "id"),
        {"sqlite_autoincrement": True},
    )

    # Primary key (sqlite_autoincrement: ids are never reused after deletion)
    id = Column(Integer, primary_key=True)

    # "credit" or "debit"
    type = Column(String, nullable=False)

    # Non-negative amount in currency units
    amount = Column(Float, nullable=False)

    # Free text; may be empty
    description = Column(String, nullable=False, default="")

    # When the transaction happened (UTC); defaults to insert time
    date = Column(DateTime, nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return (
            f"<Transaction id={self.id} type={self.type!r} amount={self.amount} "
            f"date={self.date}>"
        )
