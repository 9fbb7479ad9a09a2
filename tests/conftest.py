"""Pytest fixtures: a throwaway SQLite database per test.

``DATABASE_URL`` is pointed at an in-memory database before the app is
imported so importing ``db`` never touches the project's real database
file. Each test then gets its own file-backed database under ``tmp_path``
(file-backed so every connection sees the same data).
"""

from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from db import init_db, make_engine
from app.deps import get_db
from app.services.reports import ReportEngine
from app.services.store import TransactionStore


@pytest.fixture
def engine(tmp_path):
    eng = make_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
    init_db(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db_session):
    return TransactionStore(db_session)


@pytest.fixture
def report_engine(store):
    return ReportEngine(store)


@pytest.fixture
def client(session_factory):
    from main import app

    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
