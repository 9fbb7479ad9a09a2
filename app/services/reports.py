# app/services/reports.py
"""
Weekly and category-breakdown reports.

Both reports are rebuilt from a fresh snapshot of the store on every call;
accumulators are local to the call. Rows whose type is not credit/debit
(legacy or malformed data) are left out instead of failing the report.

Sums use math.fsum so the totals do not depend on row order.
"""

import math
from typing import Any, Dict, Iterable, List, Tuple

from models import TRANSACTION_TYPES
from app.logging_setup import get_logger
from app.services.categorizer import categorize
from app.services.week_bucketer import week_key

logger = get_logger("reports")


def _is_reportable(tx: Any) -> bool:
    return tx.type in TRANSACTION_TYPES and tx.amount is not None and tx.date is not None


def build_weekly_report(transactions: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    One row per week that has transactions, sorted by week start:
        {"week": "YYYY-MM-DD", "credit": float, "debit": float, "balance": float}

    balance = credit - debit within that week only (not cumulative).
    """
    # week -> {"credit": [amounts], "debit": [amounts]}
    buckets: Dict[str, Dict[str, List[float]]] = {}

    for tx in transactions:
        if not _is_reportable(tx):
            continue
        bucket = buckets.setdefault(week_key(tx.date), {"credit": [], "debit": []})
        bucket[tx.type].append(float(tx.amount))

    report = []
    for week in sorted(buckets):
        credits = buckets[week]["credit"]
        debits = buckets[week]["debit"]
        report.append(
            {
                "week": week,
                "credit": math.fsum(credits),
                "debit": math.fsum(debits),
                "balance": math.fsum(credits + [-amount for amount in debits]),
            }
        )
    return report


def build_breakdown_report(transactions: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    One row per (type, category) pair: {"type", "category", "amount"}.
    Rows come grouped by type (credit first), categories in first-seen order.
    """
    groups: Dict[Tuple[str, str], List[float]] = {}
    for tx in transactions:
        if not _is_reportable(tx):
            continue
        key = (tx.type, categorize(tx.description))
        groups.setdefault(key, []).append(float(tx.amount))

    report = []
    for tx_type in TRANSACTION_TYPES:
        for (group_type, category), amounts in groups.items():
            if group_type != tx_type:
                continue
            report.append({"type": tx_type, "category": category, "amount": math.fsum(amounts)})
    return report


class ReportEngine:
    """Runs the reports against the full contents of a TransactionStore."""

    def __init__(self, store):
        self.store = store

    def weekly_report(self) -> List[Dict[str, Any]]:
        rows = build_weekly_report(self.store.all())
        logger.debug("Weekly report: %d rows", len(rows))
        return rows

    def breakdown_report(self) -> List[Dict[str, Any]]:
        rows = build_breakdown_report(self.store.all())
        logger.debug("Breakdown report: %d rows", len(rows))
        return rows
