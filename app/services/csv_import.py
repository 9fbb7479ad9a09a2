"""
Bulk import of ledger transactions from CSV files.

Each file needs the columns type, amount, description (date is optional;
header names are matched case-insensitively). Every row goes through
TransactionStore.create, so the API's validation rules apply. A file is
imported all-or-nothing: the first invalid row rolls the whole file back,
and the error names it by data row number (1 = first row after the header).

Usage:
    python -m app.services.csv_import path/to/file.csv [more.csv ...]
"""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd

from app.errors import ValidationError
from app.logging_setup import configure_logging, get_logger
from app.services.store import TransactionStore

logger = get_logger("csv_import")

REQUIRED_COLUMNS = {"type", "amount", "description"}


def _none_if_nan(x):
    if pd.isna(x):
        return None
    s = str(x)
    return None if s.strip() == "" else s


def read_transactions_csv(path: str | Path) -> pd.DataFrame:
    path = Path(path)
    # every cell stays a literal string ("NA", "None" ... are real descriptions)
    df = pd.read_csv(path, dtype=str, keep_default_na=False, na_filter=False)

    # normalize headers
    df.columns = df.columns.str.strip().str.lower()

    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValidationError(f"{path.name}: missing required columns: {sorted(missing)}")

    if "date" not in df.columns:
        df["date"] = ""

    if df.empty:
        return df

    # drop rows whose cells are all blank
    blank = df.apply(lambda col: col.str.strip() == "").all(axis=1)
    return df[~blank].copy()


def import_transactions_csv(path: str | Path, store: TransactionStore) -> int:
    """
    Insert every row of one CSV file; returns the number of rows inserted.
    """
    path = Path(path)
    df = read_transactions_csv(path)

    inserted = 0
    try:
        for index, row in df.iterrows():
            # data record number (header and skipped blank lines not counted)
            row_no = int(index) + 1
            try:
                store.create(
                    type=_none_if_nan(row["type"]),
                    amount=_none_if_nan(row["amount"]),
                    description=row["description"],
                    date=_none_if_nan(row["date"]),
                    commit=False,
                )
            except ValidationError as e:
                raise ValidationError(f"{path.name}, row {row_no}: {e.message}") from e
            inserted += 1
        store.commit()
    except Exception:
        store.rollback()
        raise

    logger.info("Imported %d transactions from %s", inserted, path.name)
    return inserted


def main(argv: list[str] | None = None) -> int:
    from db import SessionLocal, init_db

    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: python -m app.services.csv_import FILE.csv [FILE.csv ...]", file=sys.stderr)
        return 2

    configure_logging()
    init_db()

    session = SessionLocal()
    total = 0
    try:
        store = TransactionStore(session)
        for name in args:
            total += import_transactions_csv(name, store)
    finally:
        session.close()

    logger.info("DONE. Total inserted: %d", total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
