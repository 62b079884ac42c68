"""
Canonical listing addresses: `<base>[/page/<n>][?category=<slug>&title=<term>]`.

Page 1 never carries a page segment, so every listing has exactly one
address for its first page.
"""

from __future__ import annotations

from typing import Dict, Protocol
from urllib.parse import parse_qs, urlencode, urlsplit

from post_browser.errors import InvalidAddressError
from post_browser.models.filter_state import FilterState

PAGE_SEGMENT = "page"
CATEGORY_PARAM = "category"
SEARCH_PARAM = "title"


class LinkStrategy(Protocol):
    def query(self, filter_state: FilterState) -> Dict[str, str]:
        """Query parameters that carry `filter_state` in the address."""
        ...


class FilteredLinkStrategy:
    """Keeps the active category and search term in the query string."""

    def query(self, filter_state: FilterState) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if filter_state.category_slug:
            params[CATEGORY_PARAM] = filter_state.category_slug
        if filter_state.search:
            params[SEARCH_PARAM] = filter_state.search
        return params


class PlainLinkStrategy:
    """Page links only; used by listings that have no filter controls."""

    def query(self, filter_state: FilterState) -> Dict[str, str]:
        return {}


def _normalize_base(base_path: str) -> str:
    if not base_path.startswith("/"):
        raise ValueError(f"base_path must start with '/', got {base_path!r}")
    return base_path.rstrip("/") or "/"


class NavigationLinkBuilder:
    """Builds the address of any page of one listing."""

    def __init__(self, base_path: str = "/blog", strategy: LinkStrategy | None = None) -> None:
        self.base_path = _normalize_base(base_path)
        self.strategy = strategy or FilteredLinkStrategy()

    def build_link(self, target_page: int, filter_state: FilterState) -> str:
        if target_page < 1:
            raise ValueError(f"target_page must be >= 1, got {target_page}")

        path = self.base_path
        if target_page > 1:
            prefix = "" if path == "/" else path
            path = f"{prefix}/{PAGE_SEGMENT}/{target_page}"

        params = self.strategy.query(filter_state)
        return f"{path}?{urlencode(params)}" if params else path

    def link_for(self, filter_state: FilterState) -> str:
        """The address of the page `filter_state` is on."""
        return self.build_link(filter_state.page, filter_state)

    def parse(self, address: str) -> FilterState:
        return parse_address(address, self.base_path)


def parse_address(address: str, base_path: str = "/blog") -> FilterState:
    """
    Read the filter an address encodes.

    A missing, malformed or non-positive page segment means page 1.
    Raises InvalidAddressError if the path is not part of the listing.
    """
    base = _normalize_base(base_path)
    parts = urlsplit(address)
    path = parts.path.rstrip("/") or "/"

    page = 1
    if path != base:
        prefix = "" if base == "/" else base
        head = f"{prefix}/{PAGE_SEGMENT}"
        if path != head and not path.startswith(head + "/"):
            raise InvalidAddressError(f"{address!r} is not an address under {base!r}")
        segment = path[len(head) + 1:]
        if segment.isascii() and segment.isdigit() and int(segment) >= 1:
            page = int(segment)

    query = parse_qs(parts.query)
    category = (query.get(CATEGORY_PARAM) or [None])[0]
    search = (query.get(SEARCH_PARAM) or [""])[0]
    return FilterState(category_slug=category or None, page=page, search=search)
