# post_browser/ui/screens/listing_screen.py
"""
Post listing screen: category sidebar, search, table and page controls
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from post_browser.errors import DataSourceError, InvalidAddressError
from post_browser.listing.address import AddressHistory
from post_browser.listing.fetcher import ListingFetcher
from post_browser.listing.links import FilteredLinkStrategy, NavigationLinkBuilder
from post_browser.listing.store import FilterStateStore, ListingStatus
from post_browser.models.category import Category
from post_browser.models.filter_state import FilterState
from post_browser.services.category_service import CategoryService
from post_browser.services.post_service import PostService
from post_browser.ui.controllers.status_bar import StatusBarController
from post_browser.ui.messages import ListingChanged
from post_browser.ui.widgets.category_list import CategoryList
from post_browser.ui.widgets.pagination import Pagination
from post_browser.ui.widgets.post_table import PostTable
from post_browser.ui.widgets.search_bar import SearchBar
from simple_logger import Slogger

EMPTY_MESSAGE = "No posts found."
DEFAULT_TITLE = "Latest posts"


class ListingScreen(Screen):
    """Main screen: one filterable, paginated listing of posts."""

    BINDINGS = [
        Binding("f", "focus_search", "Search", show=True),
        Binding("n", "next_page", "Next Page", show=True),
        Binding("p", "prev_page", "Prev Page", show=True),
        Binding("c", "clear_category", "All Posts", show=True),
        Binding("r", "retry", "Reload", show=True),
        Binding("alt+left", "back", "Back", show=True),
        Binding("alt+right", "forward", "Forward", show=True),
    ]

    DEFAULT_CSS = """
    #address-bar {
        height: 1;
        color: $text-muted;
    }

    #listing-title {
        text-style: bold;
        content-align: center middle;
        height: 2;
    }

    #empty-state {
        content-align: center middle;
        height: 3;
    }

    #posts-table {
        height: 1fr;
    }
    """

    # ------------------------------------------------------------------ #

    def __init__(
        self,
        post_service: PostService,
        category_service: CategoryService,
        config: Dict[str, Any],
        *,
        initial_address: Optional[str] = None,
        id: str = "listing_screen",
    ) -> None:
        super().__init__(id=id)

        self.config = config
        listing_cfg = config.get("listing", {})
        self.links = NavigationLinkBuilder(
            listing_cfg.get("base_path", "/blog"), FilteredLinkStrategy()
        )
        self.fetcher = ListingFetcher(
            post_service.fetch_items, per_page=listing_cfg.get("per_page", 15)
        )
        self.category_service = category_service

        self.initial_filter = self._filter_from_address(initial_address)
        self.history = AddressHistory(self.links.link_for(self.initial_filter))
        self.categories: List[Category] = []
        self.store: Optional[FilterStateStore] = None

    # ------------------------------------------------------------------ #
    # Compose & mount
    # ------------------------------------------------------------------ #

    def compose(self) -> ComposeResult:
        listing_cfg = self.config.get("listing", {})
        yield Header(show_clock=True)

        with Horizontal(id="main-container"):
            yield CategoryList(id="categories")
            with Vertical(id="content-area"):
                yield Static(id="address-bar", markup=False)
                yield Static(id="listing-title", markup=False)
                yield SearchBar(
                    delay=listing_cfg.get("search_debounce", 0.2),
                    initial=self.initial_filter.search,
                    id="search-bar",
                )
                yield PostTable(
                    date_format=self.config.get("ui", {}).get("date_format", "%Y-%m-%d"),
                    id="posts-table",
                )
                yield Static(EMPTY_MESSAGE, id="empty-state")
                yield Pagination(id="pagination")

        yield Static(id="status-bar", markup=False)
        yield Footer()

    async def on_mount(self) -> None:
        self.status_controller = StatusBarController(self.query_one("#status-bar", Static))

        self.categories = await self._load_categories()
        self.query_one(CategoryList).set_categories(
            self.categories, self.initial_filter.category_slug
        )

        # First page is fetched before the store exists so there is no empty flash
        initial_result = await self.fetcher.fetch(self.initial_filter)
        self.store = FilterStateStore(
            self.fetcher,
            self.links,
            self.initial_filter,
            initial_result,
            navigate=self.history.push,
        )
        self.store.subscribe(self._on_store_changed)
        self.refresh_listing()

    def on_unmount(self) -> None:
        if self.store is not None:
            self.store.close()

    # ------------------------------------------------------------------ #
    # Action handlers
    # ------------------------------------------------------------------ #

    def action_focus_search(self) -> None:
        self.query_one(SearchBar).focus_input()

    def action_next_page(self) -> None:
        if self.store and self.store.filter.page < self.store.result.page_count:
            self.store.select_page(self.store.filter.page + 1)

    def action_prev_page(self) -> None:
        if self.store and self.store.filter.page > 1:
            self.store.select_page(self.store.filter.page - 1)

    def action_clear_category(self) -> None:
        if self.store and self.store.filter.category_slug:
            self.store.select_category(None)

    def action_retry(self) -> None:
        if self.store:
            self.store.retry()

    def action_back(self) -> None:
        self._follow(self.history.back())

    def action_forward(self) -> None:
        self._follow(self.history.forward())

    # ------------------------------------------------------------------ #
    # Event handlers
    # ------------------------------------------------------------------ #

    def on_category_list_selected(self, event: CategoryList.Selected) -> None:
        if not self.store:
            return
        if event.slug is None:
            self.store.select_category(None)
        else:
            self.store.toggle_category(event.slug)

    def on_search_bar_changed(self, event: SearchBar.Changed) -> None:
        if self.store:
            self.store.set_search(event.query)

    def on_pagination_page_changed(self, event: Pagination.PageChanged) -> None:
        if self.store:
            self.store.select_page(event.page)

    def on_listing_changed(self, event: ListingChanged) -> None:
        self.refresh_listing()

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def refresh_listing(self) -> None:
        """Redraw every widget from the store's current state."""
        store = self.store
        if store is None:
            return

        current = store.filter
        result = store.result

        self.query_one("#address-bar", Static).update(f"Address: {self.history.current}")
        self.query_one("#listing-title", Static).update(self._title(current))
        self.query_one(CategoryList).set_selected(current.category_slug)

        if store.status is ListingStatus.IDLE:
            self.query_one(PostTable).show_posts(result.items)
        self.query_one(PostTable).display = not store.is_empty
        self.query_one("#empty-state", Static).display = store.is_empty

        self.query_one(Pagination).update_pages(
            current.page, result.page_count, link_for=store.link_for_page
        )

        self.status_controller.update(
            {
                "items": len(result.items),
                "pages": result.page_count,
                "current_page": current.page,
                "category": self._category_name(current.category_slug),
                "search": current.search,
            },
            store.status,
        )

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _on_store_changed(self, store: FilterStateStore) -> None:
        self.post_message(ListingChanged(store.status, store.generation))

    def _follow(self, address: Optional[str]) -> None:
        if address is None or self.store is None:
            return
        try:
            new_filter = self.links.parse(address)
        except InvalidAddressError as e:
            Slogger.warning(f"Ignoring history entry outside the listing: {e}")
            return
        self.store.external_navigation(new_filter)
        self.query_one(SearchBar).set_term(new_filter.search)
        self.refresh_listing()

    def _filter_from_address(self, address: Optional[str]) -> FilterState:
        if not address:
            return FilterState()
        try:
            return self.links.parse(address)
        except InvalidAddressError as e:
            Slogger.warning(f"Start address rejected, using defaults: {e}")
            return FilterState()

    async def _load_categories(self) -> List[Category]:
        try:
            return await asyncio.to_thread(self.category_service.list_with_posts)
        except DataSourceError as e:
            Slogger.exception(e, "Could not load categories", {"screen": "ListingScreen"})
            self.notify("Categories are unavailable", severity="warning", timeout=3)
            return []

    def _category_name(self, slug: Optional[str]) -> Optional[str]:
        return self.category_service.name_for(slug, self.categories) or slug

    def _title(self, current: FilterState) -> str:
        title = self.category_service.name_for(current.category_slug, self.categories) or DEFAULT_TITLE
        if current.page > 1:
            return f"Page {current.page}\n{title}"
        return title
