# app/schemas.py
# Role: Pydantic response shapes for the JSON API.

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_serializer


class TransactionOut(BaseModel):
    """Transaction as returned from the API (dates always carry a UTC offset)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    type: str
    amount: float
    description: str
    date: datetime

    @field_serializer("date")
    def _serialize_date(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()


class WeeklyRow(BaseModel):
    week: str  # Monday of the week, "YYYY-MM-DD"
    credit: float
    debit: float
    balance: float


class BreakdownRow(BaseModel):
    type: str
    category: str
    amount: float


class MessageOut(BaseModel):
    message: str
