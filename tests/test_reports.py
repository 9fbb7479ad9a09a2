import random
from collections import Counter
from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from models import Transaction
from app.services.reports import build_breakdown_report, build_weekly_report


def _row(tx_type, amount, description="", when=datetime(2024, 1, 1)):
    return SimpleNamespace(type=tx_type, amount=amount, description=description, date=when)


class TestWeeklyReport:
    def test_single_week(self, store, report_engine):
        store.create("credit", 100, "Salary", "2024-01-01")   # Monday
        store.create("debit", 40, "Groceries", "2024-01-03")  # Wednesday

        assert report_engine.weekly_report() == [
            {"week": "2024-01-01", "credit": 100.0, "debit": 40.0, "balance": 60.0}
        ]

    def test_rows_sorted_by_week_and_balance_not_cumulative(self, store, report_engine):
        store.create("debit", 30, "Rent", "2024-01-15")
        store.create("credit", 50, "Gift", "2024-01-07")  # Sunday -> week of 2024-01-01
        store.create("credit", 10, "Refund", "2024-01-08")

        report = report_engine.weekly_report()
        assert [r["week"] for r in report] == ["2024-01-01", "2024-01-08", "2024-01-15"]
        assert [r["balance"] for r in report] == [50.0, 10.0, -30.0]

    def test_empty_store(self, report_engine):
        assert report_engine.weekly_report() == []

    def test_unknown_types_are_skipped(self, store, db_session, report_engine):
        db_session.add(Transaction(type="transfer", amount=999.0, description="legacy", date=datetime(2024, 2, 5)))
        db_session.commit()
        store.create("credit", 5, "tip", "2024-01-02")

        assert report_engine.weekly_report() == [
            {"week": "2024-01-01", "credit": 5.0, "debit": 0.0, "balance": 5.0}
        ]

    def test_week_with_only_skipped_rows_is_not_emitted(self):
        assert build_weekly_report([_row("bogus", 10)]) == []

    def test_totals_match_transactions(self):
        rng = random.Random(1234)
        start = datetime(2023, 6, 1)
        rows = []
        for _ in range(500):
            tx_type = rng.choice(["credit", "debit", "credit", "debit", "void"])
            when = start + timedelta(days=rng.randint(0, 300), seconds=rng.randint(0, 86399))
            rows.append(_row(tx_type, round(rng.uniform(0, 2000), 2), "x", when))

        report = build_weekly_report(rows)
        expected = sum(r.amount for r in rows if r.type in ("credit", "debit"))
        assert sum(r["credit"] + r["debit"] for r in report) == pytest.approx(expected, abs=1e-6)

        for r in report:
            assert r["balance"] == pytest.approx(r["credit"] - r["debit"], abs=1e-6)
            assert datetime.strptime(r["week"], "%Y-%m-%d").weekday() == 0

        shuffled = rows[:]
        rng.shuffle(shuffled)
        assert build_weekly_report(shuffled) == report


class TestBreakdownReport:
    def test_merges_descriptions_into_one_category(self, store, report_engine):
        store.create("credit", 50, " groceries")
        store.create("credit", 20, "Groceries")

        assert report_engine.breakdown_report() == [
            {"type": "credit", "category": "Groceries", "amount": 70.0}
        ]

    def test_empty_description_is_uncategorized(self, store, report_engine):
        store.create("debit", 12.5, "")
        store.create("debit", 2.5, "  ")

        assert report_engine.breakdown_report() == [
            {"type": "debit", "category": "Uncategorized", "amount": 15.0}
        ]

    def test_same_category_different_types_stay_apart(self, store, report_engine):
        store.create("credit", 10, "Transfer")
        store.create("debit", 4, "transfer")
        store.create("debit", 6, "Rent")

        rows = report_engine.breakdown_report()
        as_set = {(r["type"], r["category"], r["amount"]) for r in rows}
        assert as_set == {
            ("credit", "Transfer", 10.0),
            ("debit", "Transfer", 4.0),
            ("debit", "Rent", 6.0),
        }

    def test_grouped_by_type(self):
        rows = build_breakdown_report(
            [_row("debit", 1, "a"), _row("credit", 2, "b"), _row("debit", 3, "c"), _row("credit", 4, "d")]
        )
        types = [r["type"] for r in rows]
        assert types == sorted(types, key=["credit", "debit"].index)

    def test_unknown_types_are_skipped(self):
        rows = build_breakdown_report([_row("refund", 9, "x"), _row("debit", 1, "x")])
        assert rows == [{"type": "debit", "category": "X", "amount": 1.0}]

    def test_one_row_per_pair(self):
        rng = random.Random(99)
        words = ["rent", "Rent", " rent", "food", "Food ", "", "fun"]
        rows = [_row(rng.choice(["credit", "debit"]), rng.randint(1, 100), rng.choice(words)) for _ in range(200)]

        report = build_breakdown_report(rows)
        keys = Counter((r["type"], r["category"]) for r in report)
        assert all(count == 1 for count in keys.values())
        assert sum(r["amount"] for r in report) == pytest.approx(sum(r.amount for r in rows))


def test_reports_do_not_mutate_store(store, report_engine):
    store.create("credit", 1, "a", "2024-01-01")
    before = [(t.id, t.type, t.amount, t.description, t.date) for t in store.all()]
    report_engine.weekly_report()
    report_engine.breakdown_report()
    after = [(t.id, t.type, t.amount, t.description, t.date) for t in store.all()]
    assert before == after
