"""The filter that decides which page of posts is requested."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from post_browser.errors import InvalidFilterError


@dataclass(frozen=True, slots=True)
class FilterState:
    category_slug: Optional[str] = None
    page: int = 1
    search: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.page, bool) or not isinstance(self.page, int) or self.page < 1:
            raise InvalidFilterError(f"page must be a positive integer, got {self.page!r}")
        # "" and None both mean "no category"
        if not self.category_slug:
            object.__setattr__(self, "category_slug", None)
        object.__setattr__(self, "search", (self.search or "").strip())

    # ---------- transitions ----------
    def with_category(self, category_slug: Optional[str]) -> "FilterState":
        """A new filter on `category_slug`, back on page 1."""
        return replace(self, category_slug=category_slug, page=1)

    def with_search(self, search: str) -> "FilterState":
        """A new filter on the search term, back on page 1."""
        return replace(self, search=search, page=1)

    def with_page(self, page: int) -> "FilterState":
        return replace(self, page=page)
