# app/services/week_bucketer.py
#
# Week Bucketing
# Maps a timestamp to the Monday that starts its week. Used as the bucket key
# of the weekly report.

from datetime import date, datetime, timedelta, timezone
from typing import Union


def to_utc_naive(value: datetime) -> datetime:
    """
    Normalize a datetime to the ledger's storage convention: UTC, no tzinfo.
    Naive values are assumed to already be UTC.
    """
    if value.tzinfo is not None and value.utcoffset() is not None:
        value = value.astimezone(timezone.utc)
    return value.replace(tzinfo=None)


def week_start(value: Union[datetime, date]) -> date:
    """
    Return the Monday on or before the calendar date of `value`.

    Aware datetimes are converted to UTC first; the time of day is discarded.
    date.weekday() counts Monday=0 .. Sunday=6, so subtracting it lands on
    Monday whatever the locale's first day of the week is.
    """
    if isinstance(value, datetime):
        day = to_utc_naive(value).date()
    elif isinstance(value, date):
        day = value
    else:
        raise TypeError(f"expected date or datetime, got {type(value).__name__}")

    return day - timedelta(days=day.weekday())


def week_key(value: Union[datetime, date]) -> str:
    """Week start as a zero-padded 'YYYY-MM-DD' string (sortable)."""
    return week_start(value).isoformat()
