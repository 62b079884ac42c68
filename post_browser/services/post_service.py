# post_browser/services/post_service.py
"""
Business-logic layer for posts: the content query service behind listings.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

from post_browser.db.repos.post_repo import PostRepo
from post_browser.models.post import PostStatus
from simple_logger import Slogger


class PostService:
    """Answers page-of-posts queries."""

    def __init__(self, post_repo: PostRepo, *, default_page_size: int = 15) -> None:
        self._posts = post_repo
        self._per_page = default_page_size

    # --------------------------------------------------------------------- #
    # read side
    # --------------------------------------------------------------------- #

    def fetch_items(
        self,
        *,
        page: int = 1,
        per_page: int | None = None,
        status: PostStatus = PostStatus.PUBLISHED,
        category_slug: Optional[str] = None,
        title: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Return `{"data": [Post, ...], "page_count": int}` for one page.

        An out-of-range page yields an empty `data` list with the real
        page count; it is not an error.
        """
        per_page = per_page or self._per_page
        filters = self._build_filters(status, category_slug, title)

        total = self._posts.count(filters)
        page_count = math.ceil(total / per_page)
        posts = self._posts.list(page=page, per_page=per_page, filters=filters) if total else []

        Slogger.debug(
            f"PostService.fetch_items: {len(posts)} of {total} posts",
            {"page": page, "page_count": page_count, "category": category_slug, "title": title},
        )
        return {"data": posts, "page_count": page_count}

    # ------------------------------------------------------------------ #
    # helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_filters(
        status: PostStatus, category_slug: Optional[str], title: Optional[str]
    ) -> dict:
        filters: dict = {"status": status}
        if category_slug:
            filters["category_slug"] = category_slug
        if title:
            filters["title"] = title
        return filters
