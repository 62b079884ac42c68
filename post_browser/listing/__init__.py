"""Paginated, filterable listing engine."""

from post_browser.listing.address import AddressHistory
from post_browser.listing.debounce import SearchTermDebouncer
from post_browser.listing.fetcher import ListingFetcher
from post_browser.listing.links import (
    FilteredLinkStrategy,
    NavigationLinkBuilder,
    PlainLinkStrategy,
    parse_address,
)
from post_browser.listing.page_sequence import ELLIPSIS, EllipsisToken, PageToken, generate_page_sequence
from post_browser.listing.store import FilterStateStore, ListingStatus

__all__ = [
    "AddressHistory",
    "ELLIPSIS",
    "EllipsisToken",
    "FilterStateStore",
    "FilteredLinkStrategy",
    "ListingFetcher",
    "ListingStatus",
    "NavigationLinkBuilder",
    "PageToken",
    "PlainLinkStrategy",
    "SearchTermDebouncer",
    "generate_page_sequence",
    "parse_address",
]
