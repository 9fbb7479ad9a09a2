# app/services/store.py
#
# Transaction Store
# The ledger's persistence contract on top of a SQLAlchemy session:
# validated inserts, paged listing, delete-by-id, and the full snapshot
# used by the reports.

import math
import numbers
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import TRANSACTION_TYPES, Transaction, utcnow
from app.errors import NotFoundError, StoreError, ValidationError
from app.logging_setup import get_logger
from app.services.week_bucketer import to_utc_naive

logger = get_logger("store")

# signed 64-bit range of a SQLite INTEGER
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


# ---- Input validation ----

def validate_type(raw: Any) -> str:
    if raw is None:
        raise ValidationError("type is required")
    if not isinstance(raw, str) or raw not in TRANSACTION_TYPES:
        raise ValidationError(f"type must be one of {', '.join(TRANSACTION_TYPES)}, got {raw!r}")
    return raw


def validate_amount(raw: Any) -> float:
    if raw is None:
        raise ValidationError("amount is required")
    if isinstance(raw, bool):
        raise ValidationError("amount must be a number")

    if isinstance(raw, (numbers.Real, Decimal)):
        try:
            value = float(raw)
        except (OverflowError, ValueError):
            raise ValidationError("amount must be a finite number")
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise ValidationError("amount is required")
        try:
            value = float(Decimal(text))
        except InvalidOperation:
            raise ValidationError(f"amount must be a number, got {raw!r}")
    else:
        raise ValidationError("amount must be a number")

    if not math.isfinite(value):
        raise ValidationError("amount must be a finite number")
    if value < 0:
        raise ValidationError("amount must not be negative")
    return value


def validate_description(raw: Any) -> str:
    # Empty / whitespace-only is fine here; the categorizer treats it as absent.
    if raw is None:
        raise ValidationError("description is required")
    if not isinstance(raw, str):
        raise ValidationError("description must be a string")
    return raw


def parse_date(raw: Any) -> Optional[datetime]:
    """
    Accepts datetime, date or an ISO-8601 string ('Z' suffix allowed).
    Returns a naive UTC datetime, or None when no date was given.
    """
    if raw is None:
        return None

    if isinstance(raw, datetime):
        try:
            return to_utc_naive(raw)
        except OverflowError:
            raise ValidationError(f"date is out of range, got {raw!r}")

    if isinstance(raw, date):
        return datetime(raw.year, raw.month, raw.day)

    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        if text[-1] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        try:
            return to_utc_naive(datetime.fromisoformat(text))
        except (ValueError, OverflowError):
            raise ValidationError(f"date must be an ISO-8601 timestamp, got {raw!r}")

    raise ValidationError("date must be an ISO-8601 timestamp")


# ---- Store ----

class TransactionStore:
    """
    Durable record of ledger transactions, bound to one session.

    Listing order is date ascending, then id ascending.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        type: Any,
        amount: Any,
        description: Any,
        date: Any = None,
        *,
        commit: bool = True,
    ) -> Transaction:
        """
        Validate and insert one transaction.

        With commit=False the row is only flushed (id assigned), so a caller
        can insert several rows and commit() or rollback() them together.
        """
        try:
            tx = Transaction(
                type=validate_type(type),
                amount=validate_amount(amount),
                description=validate_description(description),
                date=parse_date(date) or utcnow(),
            )
        except ValidationError as e:
            logger.warning("Rejected transaction: %s", e.message)
            raise

        try:
            self.db.add(tx)
            if commit:
                self.db.commit()
                self.db.refresh(tx)
            else:
                self.db.flush()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to insert transaction")
            raise StoreError(str(e), status_code=400) from e

        logger.info("Created transaction id=%s type=%s amount=%s", tx.id, tx.type, tx.amount)
        return tx

    def list(self, skip: int = 0, limit: int = 100) -> List[Transaction]:
        if skip < 0 or limit < 0:
            raise ValidationError("skip and limit must be non-negative")
        if skip > SQLITE_INT_MAX or limit > SQLITE_INT_MAX:
            raise ValidationError(f"skip and limit must not exceed {SQLITE_INT_MAX}")

        try:
            return (
                self.db.query(Transaction)
                .order_by(Transaction.date.asc(), Transaction.id.asc())
                .offset(skip)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to list transactions")
            raise StoreError(str(e)) from e

    def delete(self, transaction_id: Any) -> bool:
        """
        Permanently remove a transaction. Raises NotFoundError if it does not exist.
        """
        try:
            tx_id = int(transaction_id)
        except (TypeError, ValueError):
            logger.warning("Delete requested for invalid id %r", transaction_id)
            raise NotFoundError()

        if not SQLITE_INT_MIN <= tx_id <= SQLITE_INT_MAX:
            # no row can have an id outside the INTEGER column range
            logger.warning("Delete requested for out-of-range id %s", tx_id)
            raise NotFoundError()

        try:
            # single DELETE statement; a concurrent delete of the same id sees rowcount 0
            removed = (
                self.db.query(Transaction)
                .filter(Transaction.id == tx_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to delete transaction id=%s", tx_id)
            raise StoreError(str(e), status_code=400) from e

        if not removed:
            logger.warning("Delete requested for unknown transaction id=%s", tx_id)
            raise NotFoundError()

        logger.info("Deleted transaction id=%s", tx_id)
        return True

    def all(self) -> List[Transaction]:
        try:
            return self.db.query(Transaction).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to read transactions")
            raise StoreError(str(e)) from e

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Commit failed")
            raise StoreError(str(e), status_code=400) from e

    def rollback(self) -> None:
        self.db.rollback()
