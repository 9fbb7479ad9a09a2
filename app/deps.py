# app/deps.py
# Role: Shared FastAPI dependencies.
#       Provides the standard SQLAlchemy session dependency and builds the
#       store / report engine on top of it for each request.

"""
Shared dependencies for the finance ledger app.
"""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from db import SessionLocal
from app.services.reports import ReportEngine
from app.services.store import TransactionStore


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session and ensures it is closed.

    Typical usage in routes:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> TransactionStore:
    return TransactionStore(db)


def get_report_engine(store: TransactionStore = Depends(get_store)) -> ReportEngine:
    return ReportEngine(store)
