# post_browser/db/repos/post_repo.py
"""
Repository for post operations – returns/accepts `Post` domain models.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from post_browser.db.connection import SQLiteConnection
from post_browser.errors import DataSourceError
from post_browser.models.post import Post, PostStatus
from simple_logger import Slogger

_SELECT = """
SELECT p.*, c.slug AS category_slug, c.name AS category_name
FROM posts p
LEFT JOIN categories c ON c.id = p.category_id
"""


def _escape_like(text: str) -> str:
    """Make LIKE wildcards in user input match literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostRepo:
    """Read access (plus inserts for seeding) for Post records."""

    def __init__(self, db: SQLiteConnection) -> None:
        self._db = db

    # ---------- read side --------------------------------------------------

    def list(
        self,
        *,
        page: int = 1,
        per_page: int = 15,
        filters: Dict | None = None,
    ) -> List[Post]:
        """Return one page of posts, newest first."""
        where, params = self._build_where(filters or {})
        skip = (page - 1) * per_page

        query = f"{_SELECT}{where} ORDER BY p.created_at DESC, p.id DESC LIMIT ? OFFSET ?"
        params.extend([per_page, skip])

        rows = self._run(query, params)
        Slogger.debug(f"PostRepo.list: Retrieved {len(rows)} posts (page={page}, per_page={per_page})")
        return [Post.from_sqlite(row) for row in rows]

    def count(self, filters: Dict | None = None) -> int:
        """Total posts matching filters."""
        where, params = self._build_where(filters or {})
        query = (
            "SELECT COUNT(*) AS total FROM posts p "
            f"LEFT JOIN categories c ON c.id = p.category_id{where}"
        )
        return int(self._run(query, params)[0]["total"])

    def by_slug(self, slug: str) -> Optional[Post]:
        rows = self._run(f"{_SELECT} WHERE p.slug = ?", [slug])
        return Post.from_sqlite(rows[0]) if rows else None

    # ---------- write side -------------------------------------------------

    def add(
        self,
        *,
        title: str,
        slug: str,
        description: str = "",
        status: PostStatus = PostStatus.PUBLISHED,
        category_id: Optional[int] = None,
        created_at: Optional[datetime] = None,
    ) -> Optional[Post]:
        """Insert a post; returns the stored model."""
        created = (created_at or datetime.now(timezone.utc)).isoformat()
        try:
            self._db.execute(
                "INSERT INTO posts (title, slug, description, status, category_id, created_at) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (title, slug, description, status.value, category_id, created),
            )
        except sqlite3.Error as e:
            Slogger.exception(e, f"PostRepo.add: Error adding post '{slug}'")
            return None
        return self.by_slug(slug)

    # ------------------------------------------------------------------ #
    # helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_where(filters: Dict[str, Any]) -> Tuple[str, list]:
        clauses = []
        params: list = []

        if filters.get("status"):
            clauses.append("p.status = ?")
            params.append(PostStatus(filters["status"]).value)
        if filters.get("category_slug"):
            clauses.append("c.slug = ?")
            params.append(filters["category_slug"])
        if filters.get("title"):
            clauses.append("p.title LIKE ? ESCAPE '\\'")
            params.append(f"%{_escape_like(filters['title'])}%")

        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        return where, params

    def _run(self, query: str, params: list) -> List[Dict[str, Any]]:
        try:
            return self._db.query(query, params)
        except sqlite3.Error as e:
            raise DataSourceError(f"Post query failed: {e}") from e
