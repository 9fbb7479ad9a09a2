# db.py
# Role: Database bootstrap for the finance ledger API.
#       Defines the SQLAlchemy engine, session factory, and declarative Base.
#       Also ensures the on-disk database directory exists for the default SQLite file.

"""
Database setup for the finance ledger.

- Uses DATABASE_URL when set (see .env), otherwise a SQLite file at:
  <project_root>/database/finance.db
- Ensures the 'database' folder exists for the default location.
"""

import os

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

load_dotenv()

# Base directory of the project (where this module lives)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Folder for the default SQLite DB
DB_DIR = os.path.join(BASE_DIR, "database")

# Full path to the default SQLite database file
DB_PATH = os.path.join(DB_DIR, "finance.db")


def get_database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    os.makedirs(DB_DIR, exist_ok=True)  # ensure folder exists
    return f"sqlite:///{DB_PATH}"


def make_engine(database_url: str) -> Engine:
    """
    Create an engine for the given URL.

    For SQLite, we need check_same_thread=False for FastAPI (threaded request handling).
    """
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, connect_args=connect_args)


# SQLAlchemy connection URL
DATABASE_URL = get_database_url()

engine = make_engine(DATABASE_URL)

# Standard session factory used via dependency injection (see app/deps.py:get_db)
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Declarative base class for ORM models
Base = declarative_base()


def init_db(bind: Engine = engine) -> None:
    """
    Create database tables (only if they don't exist yet).
    """
    # models must be imported so the Transaction table is registered on Base
    import models  # noqa: F401

    Base.metadata.create_all(bind=bind)
