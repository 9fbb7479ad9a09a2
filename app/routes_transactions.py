# routes_transactions.py
"""
Routes for creating, listing and deleting ledger transactions.

Errors raised by the store (ValidationError, NotFoundError, StoreError) are
turned into responses by the handlers in app/errors.py.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Query

from app.deps import get_store
from app.errors import ValidationError
from app.schemas import MessageOut, TransactionOut
from app.services.store import TransactionStore
from app.settings import DEFAULT_PAGE_LIMIT

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("/", response_model=List[TransactionOut])
def list_transactions(
    skip: int = Query(0),
    limit: int = Query(DEFAULT_PAGE_LIMIT),
    store: TransactionStore = Depends(get_store),
):
    """
    Transactions ordered by date (oldest first), paged with skip/limit.
    """
    return store.list(skip=skip, limit=limit)


@router.post("/", response_model=TransactionOut)
def create_transaction(
    payload: Any = Body(...),
    store: TransactionStore = Depends(get_store),
):
    """
    Create a transaction from {type, amount, description[, date]}.
    """
    if not isinstance(payload, dict):
        raise ValidationError("request body must be a JSON object")

    body: Dict[str, Any] = payload
    return store.create(
        type=body.get("type"),
        amount=body.get("amount"),
        description=body.get("description"),
        date=body.get("date"),
    )


@router.delete("/{transaction_id}", response_model=MessageOut)
def delete_transaction(
    transaction_id: str,
    store: TransactionStore = Depends(get_store),
):
    store.delete(transaction_id)
    return {"message": "Transaction deleted successfully"}
