"""
FilterStateStore: owns the filter/page of one listing view.

Every event that changes what should be shown mints a new request
generation and starts a fetch. A fetch result is only accepted if its
generation is still the latest one, so the last request initiated wins
no matter in which order the responses arrive.
"""

from __future__ import annotations

import asyncio
import itertools
from enum import Enum
from typing import Callable, List, Optional, Set

from post_browser.listing.fetcher import ListingFetcher
from post_browser.listing.links import NavigationLinkBuilder
from post_browser.listing.page_sequence import PageToken, generate_page_sequence
from post_browser.models.filter_state import FilterState
from post_browser.models.pagination import PageResult
from simple_logger import Slogger

Listener = Callable[["FilterStateStore"], None]


class ListingStatus(Enum):
    IDLE = "idle"          # last accepted result is current and visible
    PENDING = "pending"    # a fetch is outstanding


class FilterStateStore:
    """Explicit state machine behind a listing view."""

    def __init__(
        self,
        fetcher: ListingFetcher,
        link_builder: NavigationLinkBuilder,
        initial_filter: FilterState,
        initial_result: PageResult,
        *,
        navigate: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Args:
            fetcher: Retrieves pages for a filter
            link_builder: Turns a filter into its canonical address
            initial_filter: Filter read from the address at load time
            initial_result: Page already fetched by the host view
            navigate: Called with the new address whenever a user event changes it
        """
        self._fetcher = fetcher
        self._links = link_builder
        self._navigate = navigate

        self._filter = initial_filter
        self._result = initial_result
        self._status = ListingStatus.IDLE

        self._generations = itertools.count(1)
        self._generation = 0
        self._tasks: Set[asyncio.Task] = set()
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------ #
    # read side
    # ------------------------------------------------------------------ #

    @property
    def filter(self) -> FilterState:
        return self._filter

    @property
    def result(self) -> PageResult:
        return self._result

    @property
    def status(self) -> ListingStatus:
        return self._status

    @property
    def generation(self) -> int:
        """Id of the latest fetch issued (0 before the first one)."""
        return self._generation

    @property
    def address(self) -> str:
        return self._links.link_for(self._filter)

    @property
    def is_empty(self) -> bool:
        return self._status is ListingStatus.IDLE and self._result.is_empty

    def page_tokens(self) -> List[PageToken]:
        return generate_page_sequence(self._filter.page, self._result.page_count)

    def link_for_page(self, page: int) -> str:
        return self._links.build_link(page, self._filter)

    # ------------------------------------------------------------------ #
    # events
    # ------------------------------------------------------------------ #

    def external_navigation(self, new_filter: FilterState) -> Optional[asyncio.Task]:
        """
        The address changed outside the store (back/forward, typed address).

        A different category always adopts the new filter. The page segment
        and search term are route state as well, so a change there is
        followed too. The address is not written back.
        """
        if new_filter == self._filter:
            return None
        return self._issue(new_filter, update_address=False)

    def select_category(self, category_slug: Optional[str]) -> asyncio.Task:
        return self._issue(self._filter.with_category(category_slug))

    def toggle_category(self, category_slug: str) -> asyncio.Task:
        """Select `category_slug`, or clear the filter if it is already active."""
        if category_slug == self._filter.category_slug:
            return self.select_category(None)
        return self.select_category(category_slug)

    def select_page(self, page: int) -> asyncio.Task:
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        return self._issue(self._filter.with_page(page))

    def set_search(self, term: str) -> Optional[asyncio.Task]:
        """Search for `term`; a term that normalizes to the current one is a no-op."""
        new_filter = self._filter.with_search(term)
        if new_filter.search == self._filter.search:
            return None
        return self._issue(new_filter)

    def retry(self) -> asyncio.Task:
        """Fetch the current filter again."""
        return self._issue(self._filter, update_address=False)

    def fetch_resolved(self, generation: int, result: PageResult) -> bool:
        """
        Offer a fetch result to the store.

        Returns True if it was adopted, False if it was stale and dropped.
        """
        if generation != self._generation:
            Slogger.debug(
                "FilterStateStore: dropped stale result",
                {"generation": generation, "latest": self._generation},
            )
            return False

        self._result = result
        self._status = ListingStatus.IDLE
        Slogger.debug(
            "FilterStateStore: result accepted",
            {"generation": generation, "items": len(result.items), "page_count": result.page_count},
        )
        self._notify()
        return True

    # ------------------------------------------------------------------ #
    # listeners / lifecycle
    # ------------------------------------------------------------------ #

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> bool:
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    async def wait_idle(self) -> None:
        """Wait until every fetch issued so far has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """Tear down: drop listeners and cancel in-flight fetches."""
        self._listeners.clear()
        for task in list(self._tasks):
            task.cancel()

    # ------------------------------------------------------------------ #
    # internals
    # ------------------------------------------------------------------ #

    def _issue(self, new_filter: FilterState, *, update_address: bool = True) -> asyncio.Task:
        self._filter = new_filter
        if update_address and self._navigate is not None:
            self._navigate(self.address)

        self._generation = next(self._generations)
        self._status = ListingStatus.PENDING
        Slogger.debug(
            "FilterStateStore: fetch issued",
            {
                "generation": self._generation,
                "category": new_filter.category_slug,
                "page": new_filter.page,
                "search": new_filter.search,
            },
        )

        task = asyncio.get_running_loop().create_task(self._run_fetch(self._generation, new_filter))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        self._notify()
        return task

    async def _run_fetch(self, generation: int, filter_state: FilterState) -> bool:
        result = await self._fetcher.fetch(filter_state)
        return self.fetch_resolved(generation, result)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                Slogger.exception(e, "FilterStateStore: listener failed")
