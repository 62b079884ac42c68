# post_browser/services/category_service.py
"""Category use-cases for the listing sidebar."""

from __future__ import annotations

from typing import List, Optional

from post_browser.db.repos.category_repo import CategoryRepo
from post_browser.models.category import Category


class CategoryService:
    def __init__(self, category_repo: CategoryRepo) -> None:
        self._categories = category_repo

    def list_with_posts(self) -> List[Category]:
        """Categories (by name) that have at least one published post."""
        return [c for c in self._categories.list() if c.post_count > 0]

    def name_for(self, slug: Optional[str], categories: List[Category]) -> Optional[str]:
        if not slug:
            return None
        return next((c.name for c in categories if c.slug == slug), None)
