"""
Asynchronous retrieval of one listing page.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Dict, Union

from post_browser.models.filter_state import FilterState
from post_browser.models.pagination import PageResult
from post_browser.models.post import PostStatus
from simple_logger import Slogger

# fetch_items(page=, per_page=, status=, category_slug=, title=) -> {"data": [...], "page_count": n}
DataSource = Callable[..., Union[Dict[str, Any], Awaitable[Dict[str, Any]]]]


def _is_async(fn: Any) -> bool:
    return inspect.iscoroutinefunction(fn) or inspect.iscoroutinefunction(getattr(fn, "__call__", None))


class ListingFetcher:
    """
    Requests pages from the content query service.

    Overlapping calls are neither merged nor cancelled; deciding which
    result is still wanted belongs to the caller. A failing data source
    never raises out of `fetch`: the failure is logged and an empty page
    is returned instead.
    """

    def __init__(
        self,
        fetch_items: DataSource,
        *,
        per_page: int = 15,
        status: PostStatus = PostStatus.PUBLISHED,
    ) -> None:
        self._fetch_items = fetch_items
        self._per_page = per_page
        self._status = status

    async def fetch(self, filter_state: FilterState) -> PageResult:
        kwargs = dict(
            page=filter_state.page,
            per_page=self._per_page,
            status=self._status,
            category_slug=filter_state.category_slug,
            title=filter_state.search or None,
        )
        context = {"page": filter_state.page, "category": filter_state.category_slug}

        try:
            if _is_async(self._fetch_items):
                response = await self._fetch_items(**kwargs)
            else:
                # blocking sources (sqlite) run off the event loop
                response = await asyncio.to_thread(self._fetch_items, **kwargs)
            result = PageResult.from_response(response)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            Slogger.exception(e, "ListingFetcher.fetch: data source failed, showing empty page", context)
            return PageResult.empty()

        Slogger.debug(
            f"ListingFetcher.fetch: {len(result.items)} items, {result.page_count} pages", context
        )
        return result
