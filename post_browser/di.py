# post_browser/di.py
"""
Very small dependency-injection helper.
"""

from __future__ import annotations

from typing import Any, Dict

from post_browser.db.connection import SQLiteConnection
from post_browser.db.repos.category_repo import CategoryRepo
from post_browser.db.repos.post_repo import PostRepo
from post_browser.services.category_service import CategoryService
from post_browser.services.post_service import PostService


class Container:
    """Holds lazily-created singletons."""

    def __init__(self, config: Dict[str, Any]) -> None:
        self._cfg = config
        self._db: SQLiteConnection | None = None
        self._post_repo: PostRepo | None = None
        self._category_repo: CategoryRepo | None = None
        self._post_service: PostService | None = None
        self._category_service: CategoryService | None = None

    @property
    def config(self) -> Dict[str, Any]:
        return self._cfg

    # ---------- infra ----------
    @property
    def db(self) -> SQLiteConnection:
        if self._db is None:
            self._db = SQLiteConnection(self._cfg)
            self._db.ensure_schema()
        return self._db

    # ---------- repositories ----------
    @property
    def post_repo(self) -> PostRepo:
        if self._post_repo is None:
            self._post_repo = PostRepo(self.db)
        return self._post_repo

    @property
    def category_repo(self) -> CategoryRepo:
        if self._category_repo is None:
            self._category_repo = CategoryRepo(self.db)
        return self._category_repo

    # ---------- services ----------
    @property
    def post_service(self) -> PostService:
        if self._post_service is None:
            self._post_service = PostService(
                self.post_repo,
                default_page_size=self._cfg.get("listing", {}).get("per_page", 15),
            )
        return self._post_service

    @property
    def category_service(self) -> CategoryService:
        if self._category_service is None:
            self._category_service = CategoryService(self.category_repo)
        return self._category_service

    def close(self) -> None:
        if self._db is not None:
            self._db.close()
            self._db = None


# convenience factory
def build_container(config: Dict[str, Any]) -> Container:
    """Create a container for the given config."""
    return Container(config)
