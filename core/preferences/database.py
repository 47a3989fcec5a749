"""
Database - Preference Store I/O

Durable key-value storage for per-set flags.
Uses SQLAlchemy ORM; Postgres in production, SQLite when DATABASE_URL is unset.

This module handles ONLY database I/O.
Flag semantics are handled by the store module.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from core.preferences.constants import RETENTION_DAYS
from core.preferences.models import Base, Preference

load_dotenv()

logger = logging.getLogger(__name__)

# Fallback SQLite location
DB_DIR = Path(__file__).parent.parent.parent / "logs"


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_database_url() -> str:
    """
    Get the database URL from environment variables.

    Uses TEST_MODE to pick the test database: for a configured DATABASE_URL
    the 'preferences_db' name is swapped for 'test_preferences_db'; for the
    SQLite fallback a separate file is used.

    Returns:
        SQLAlchemy database URL
    """
    base_url = os.getenv("DATABASE_URL")
    if base_url:
        if is_test_mode():
            return base_url.replace("preferences_db", "test_preferences_db")
        return base_url

    DB_DIR.mkdir(exist_ok=True)
    db_name = "test_preferences.db" if is_test_mode() else "preferences.db"
    return f"sqlite:///{DB_DIR / db_name}"


def get_engine(db_url: Optional[str] = None) -> Engine:
    """
    Get SQLAlchemy engine for the preference database.

    Returns:
        SQLAlchemy Engine instance
    """
    db_url = db_url or get_database_url()
    if db_url.startswith("sqlite"):
        return create_engine(db_url, echo=False)
    return create_engine(
        db_url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        echo=False
    )


def init_db(engine: Optional[Engine] = None) -> Engine:
    """
    Create the preferences table if it doesn't exist.

    Safe to call multiple times.
    """
    engine = engine or get_engine()
    if 'preferences' not in inspect(engine).get_table_names():
        Base.metadata.create_all(engine)
        logger.info("Created preferences table")
    return engine


class SqlPreferenceStore:
    """
    Key-value store backed by the preferences table.

    Each write refreshes the row's expiry to RETENTION_DAYS from now; expired
    rows read as absent and are removed on read.
    """

    def __init__(self, engine: Optional[Engine] = None, retention_days: int = RETENTION_DAYS):
        self.engine = engine or init_db()
        self.retention = timedelta(days=retention_days)
        self._sessionmaker = sessionmaker(bind=self.engine, expire_on_commit=False)

    def _session(self) -> Session:
        return self._sessionmaker()

    def get(self, key: str) -> Optional[str]:
        with self._session() as session:
            row = session.get(Preference, key)
            if row is None:
                return None
            if _as_utc(row.expires_at) <= datetime.now(timezone.utc):
                session.delete(row)
                session.commit()
                return None
            return row.value

    def set(self, key: str, value: str) -> None:
        expires_at = datetime.now(timezone.utc) + self.retention
        with self._session() as session:
            row = session.get(Preference, key)
            if row is None:
                session.add(Preference(key=key, value=value, expires_at=expires_at))
            else:
                row.value = value
                row.expires_at = expires_at
            session.commit()


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
