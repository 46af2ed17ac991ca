from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from home_address import config


DATA_DIR = Path(__file__).resolve().parent
SCHEMA_PATH = DATA_DIR / "schema.sql"

logger = logging.getLogger(__name__)


def get_db_path() -> Path:
    return config.SETTINGS.db_path


def get_connection() -> sqlite3.Connection:
    """
    Returns a SQLite connection and ensures schema is applied.
    """
    db_path = get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row

    _ensure_schema(conn)

    return conn


def _ensure_schema(conn: sqlite3.Connection) -> None:
    """
    Applies schema.sql (idempotent because schema uses IF NOT EXISTS).
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"schema.sql not found: {SCHEMA_PATH}")

    sql = SCHEMA_PATH.read_text(encoding="utf-8")
    conn.executescript(sql)
    _ensure_home_address_columns(conn)
    conn.commit()


def _ensure_home_address_columns(conn: sqlite3.Connection) -> None:
    """
    Adds missing columns to home_address for existing DBs.
    """
    rows = conn.execute("PRAGMA table_info(home_address)").fetchall()
    existing = {row[1] for row in rows}

    if "country" not in existing:
        logger.info("Adding home_address.country column")
        conn.execute("ALTER TABLE home_address ADD COLUMN country TEXT NOT NULL DEFAULT ''")
