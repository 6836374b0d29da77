"""
connection.py - DB connection helpers
Single responsibility: manage SQLite connections and pragmas.
"""

import logging
import sqlite3
from contextlib import contextmanager

from tracker import config

logger = logging.getLogger(__name__)


def open_connection() -> sqlite3.Connection:
    """Open SQLite connection with shared defaults."""
    try:
        conn = sqlite3.connect(config.DB_PATH, timeout=10)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        conn.execute("PRAGMA journal_mode = WAL")
        return conn
    except sqlite3.Error as e:
        logger.error("Failed to connect to database at %s: %s", config.DB_PATH, e)
        raise


@contextmanager
def get_connection():
    """Transaction scope: commit on success, roll back on error, always close."""
    conn = open_connection()
    try:
        with conn:
            yield conn
    finally:
        conn.close()
