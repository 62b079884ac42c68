# post_browser/db/connection.py

"""
SQLite connection handler
"""

import sqlite3
import threading
from pathlib import Path
from typing import Any, Dict

from simple_logger import Slogger

MEMORY_DB = ":memory:"

SCHEMA = """
CREATE TABLE IF NOT EXISTS categories (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    slug TEXT NOT NULL UNIQUE
);

CREATE TABLE IF NOT EXISTS posts (
    id INTEGER PRIMARY KEY,
    title TEXT NOT NULL,
    slug TEXT NOT NULL UNIQUE,
    description TEXT,
    status TEXT NOT NULL DEFAULT 'DRAFT',
    category_id INTEGER,
    created_at TEXT,
    FOREIGN KEY (category_id) REFERENCES categories(id)
);

CREATE INDEX IF NOT EXISTS idx_posts_status_created ON posts (status, created_at);
"""


class SQLiteConnection:
    """
    Handles basic connection to SQLite
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize SQLite connection

        Args:
            config: Configuration dictionary containing SQLite settings
        """
        db_path_str = config["sqlite"]["db_path"]

        if db_path_str != MEMORY_DB:
            db_path = Path(db_path_str)
            if not db_path.parent.exists():
                Slogger.log(f"Creating database directory: {db_path.parent}")
                db_path.parent.mkdir(parents=True, exist_ok=True)

        Slogger.debug(f"Opening SQLite database at {db_path_str}")
        # Listing fetches run in worker threads, so the connection is shared
        # across threads and every statement goes through `_lock`.
        self.conn = sqlite3.connect(db_path_str, check_same_thread=False)
        self.conn.execute("PRAGMA foreign_keys = ON")
        self.conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()

    def ensure_schema(self) -> None:
        """Create tables and indexes that do not exist yet."""
        with self._lock:
            self.conn.executescript(SCHEMA)
            self.conn.commit()

    def query(self, sql: str, params: Any = ()) -> list:
        """Run a read query and return all rows as dicts."""
        with self._lock:
            cursor = self.conn.cursor()
            cursor.execute(sql, params)
            return [dict(row) for row in cursor.fetchall()]

    def execute(self, sql: str, params: Any = ()) -> int:
        """Run a write statement, commit, and return the last row id."""
        with self._lock:
            cursor = self.conn.cursor()
            cursor.execute(sql, params)
            self.conn.commit()
            return cursor.lastrowid

    def close(self):
        """Close the connection"""
        self.conn.close()
