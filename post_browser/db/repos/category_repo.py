# post_browser/db/repos/category_repo.py
"""
Repository for category operations.
"""

from __future__ import annotations

import sqlite3
from typing import List, Optional

from post_browser.db.connection import SQLiteConnection
from post_browser.errors import DataSourceError
from post_browser.models.category import Category
from post_browser.models.post import PostStatus
from simple_logger import Slogger


class CategoryRepo:
    """Access to post categories and their post counts."""

    def __init__(self, db: SQLiteConnection) -> None:
        self._db = db

    # ---------- read side --------------------------------------------------

    def list(
        self,
        *,
        status: PostStatus = PostStatus.PUBLISHED,
        limit: int = 100,
    ) -> List[Category]:
        """All categories sorted by name, each with its count of `status` posts."""
        query = """
            SELECT c.id, c.name, c.slug, COUNT(p.id) AS post_count
            FROM categories c
            LEFT JOIN posts p ON p.category_id = c.id AND p.status = ?
            GROUP BY c.id, c.name, c.slug
            ORDER BY c.name ASC
            LIMIT ?
        """
        try:
            rows = self._db.query(query, (status.value, limit))
        except sqlite3.Error as e:
            raise DataSourceError(f"Category query failed: {e}") from e
        return [Category.from_sqlite(row) for row in rows]

    def by_slug(self, slug: str) -> Optional[Category]:
        try:
            rows = self._db.query(
                "SELECT id, name, slug, 0 AS post_count FROM categories WHERE slug = ?",
                (slug,),
            )
        except sqlite3.Error as e:
            raise DataSourceError(f"Category lookup failed: {e}") from e
        return Category.from_sqlite(rows[0]) if rows else None

    # ---------- write side -------------------------------------------------

    def find_or_create(self, *, name: str, slug: str) -> Optional[Category]:
        """Return the category with `slug`, inserting it first if needed."""
        existing = self.by_slug(slug)
        if existing:
            return existing

        try:
            self._db.execute("INSERT INTO categories (name, slug) VALUES (?, ?)", (name, slug))
        except sqlite3.Error as e:
            Slogger.exception(e, f"CategoryRepo.find_or_create: Error adding category '{slug}'")
            return None
        Slogger.info(f"CategoryRepo.find_or_create: Added category '{name}' ({slug})")
        return self.by_slug(slug)
