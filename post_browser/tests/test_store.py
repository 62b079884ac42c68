import asyncio
import unittest

from ..listing.fetcher import ListingFetcher
from ..listing.links import NavigationLinkBuilder
from ..listing.page_sequence import ELLIPSIS
from ..listing.store import FilterStateStore, ListingStatus
from ..models.filter_state import FilterState
from ..models.pagination import PageResult
from .helpers import ControlledSource, settle


class StoreTestCase(unittest.IsolatedAsyncioTestCase):
    def make_store(self, initial_filter=None, initial_result=None):
        self.source = ControlledSource()
        self.addresses = []
        self.store = FilterStateStore(
            ListingFetcher(self.source.fetch_items, per_page=15),
            NavigationLinkBuilder("/blog"),
            initial_filter or FilterState(),
            initial_result or PageResult(items=("initial",), page_count=3),
            navigate=self.addresses.append,
        )
        return self.store

    async def asyncTearDown(self):
        if getattr(self, "store", None) is not None:
            self.store.close()


class TestInitialState(StoreTestCase):
    async def test_starts_idle_with_supplied_result(self):
        store = self.make_store(FilterState(category_slug="python", page=2))
        self.assertIs(store.status, ListingStatus.IDLE)
        self.assertEqual(store.result.items, ("initial",))
        self.assertEqual(store.filter, FilterState(category_slug="python", page=2))
        self.assertEqual(store.address, "/blog/page/2?category=python")
        self.assertEqual(store.generation, 0)
        self.assertEqual(self.source.calls, [])


class TestSupersession(StoreTestCase):
    async def test_late_stale_response_is_discarded(self):
        store = self.make_store()
        task_a = store.select_category("python")
        await settle()
        task_b = store.select_category("nextjs")
        await settle()

        self.source.resolve(1, ["nextjs-post"])
        self.assertTrue(await task_b)
        self.assertEqual(store.result.items, ("nextjs-post",))
        self.assertIs(store.status, ListingStatus.IDLE)

        self.source.resolve(0, ["python-post"])
        self.assertFalse(await task_a)
        self.assertEqual(store.result.items, ("nextjs-post",))
        self.assertEqual(store.filter.category_slug, "nextjs")
        self.assertIs(store.status, ListingStatus.IDLE)

    async def test_early_stale_response_keeps_store_pending(self):
        store = self.make_store()
        task_a = store.select_category("python")
        await settle()
        task_b = store.select_page(2)
        await settle()

        self.source.resolve(0, ["python-page-1"])
        self.assertFalse(await task_a)
        self.assertIs(store.status, ListingStatus.PENDING)
        self.assertEqual(store.result.items, ("initial",))

        self.source.resolve(1, ["python-page-2"])
        await task_b
        self.assertEqual(store.result.items, ("python-page-2",))
        self.assertIs(store.status, ListingStatus.IDLE)

    async def test_generations_increase(self):
        store = self.make_store()
        store.select_page(2)
        first = store.generation
        store.select_page(3)
        self.assertGreater(store.generation, first)
        self.assertFalse(store.fetch_resolved(first, PageResult(items=("x",), page_count=1)))
        self.assertTrue(store.fetch_resolved(store.generation, PageResult(items=("y",), page_count=1)))
        self.assertEqual(store.result.items, ("y",))

    async def test_result_is_replaced_not_merged(self):
        store = self.make_store()
        task = store.select_page(2)
        await settle()
        self.source.resolve(0, ["second"], page_count=3)
        await task
        self.assertEqual(store.result, PageResult(items=("second",), page_count=3))


class TestUserEvents(StoreTestCase):
    async def test_selecting_category_resets_page_and_address(self):
        store = self.make_store(FilterState(category_slug="python", page=3))
        store.select_category("nextjs")
        self.assertEqual(store.filter, FilterState(category_slug="nextjs", page=1))
        self.assertEqual(self.addresses, ["/blog?category=nextjs"])
        self.assertNotIn("/page/", store.address)
        self.assertIs(store.status, ListingStatus.PENDING)

    async def test_clearing_category(self):
        store = self.make_store(FilterState(category_slug="python", page=2))
        store.select_category(None)
        self.assertEqual(self.addresses, ["/blog"])

    async def test_toggle_category_deselects_active_one(self):
        store = self.make_store(FilterState(category_slug="python"))
        store.toggle_category("python")
        self.assertIsNone(store.filter.category_slug)
        store.toggle_category("nextjs")
        self.assertEqual(store.filter.category_slug, "nextjs")

    async def test_selecting_page_keeps_category(self):
        store = self.make_store(FilterState(category_slug="python"))
        store.select_page(3)
        await settle()
        self.assertEqual(store.filter, FilterState(category_slug="python", page=3))
        self.assertEqual(self.addresses, ["/blog/page/3?category=python"])
        self.assertEqual(self.source.calls[0][0]["page"], 3)
        self.assertEqual(self.source.calls[0][0]["category_slug"], "python")

    async def test_invalid_page(self):
        store = self.make_store()
        with self.assertRaises(ValueError):
            store.select_page(0)
        self.assertIs(store.status, ListingStatus.IDLE)

    async def test_search_resets_page(self):
        store = self.make_store(FilterState(category_slug="python", page=4))
        store.set_search("async")
        self.assertEqual(store.filter, FilterState(category_slug="python", search="async"))
        self.assertEqual(self.addresses, ["/blog?category=python&title=async"])

    async def test_search_with_only_whitespace_change_keeps_page(self):
        store = self.make_store(FilterState(search="py", page=3))
        self.assertIsNone(store.set_search("py "))
        self.assertIsNone(store.set_search("  py"))
        self.assertEqual(store.filter, FilterState(search="py", page=3))
        self.assertIs(store.status, ListingStatus.IDLE)
        self.assertEqual(store.generation, 0)
        self.assertEqual(self.addresses, [])
        self.assertEqual(self.source.calls, [])

    async def test_retry_refetches_without_moving(self):
        store = self.make_store(FilterState(page=2))
        task = store.retry()
        await settle()
        self.assertEqual(self.addresses, [])
        self.source.resolve(0, ["again"])
        await task
        self.assertEqual(store.result.items, ("again",))

    async def test_reselecting_same_category_fetches_again(self):
        store = self.make_store(FilterState(category_slug="python"))
        store.select_category("python")
        await settle()
        self.assertEqual(len(self.source.calls), 1)


class TestExternalNavigation(StoreTestCase):
    async def test_new_category_is_adopted_without_writing_address(self):
        store = self.make_store(FilterState(category_slug="python"))
        task = store.external_navigation(FilterState(category_slug="nextjs", page=2))
        self.assertIsNotNone(task)
        self.assertEqual(store.filter, FilterState(category_slug="nextjs", page=2))
        self.assertIs(store.status, ListingStatus.PENDING)
        self.assertEqual(self.addresses, [])

    async def test_same_filter_is_a_no_op(self):
        store = self.make_store(FilterState(category_slug="python", page=2))
        self.assertIsNone(store.external_navigation(FilterState(category_slug="python", page=2)))
        self.assertIs(store.status, ListingStatus.IDLE)
        self.assertEqual(store.generation, 0)

    async def test_page_only_change_is_followed(self):
        store = self.make_store(FilterState(category_slug="python", page=2))
        store.external_navigation(FilterState(category_slug="python", page=1))
        self.assertEqual(store.filter.page, 1)
        self.assertIs(store.status, ListingStatus.PENDING)


class TestEmptyAndFailure(StoreTestCase):
    async def test_out_of_range_page_shows_empty_state(self):
        store = self.make_store()
        task = store.select_page(99)
        await settle()
        self.source.resolve(0, [], page_count=3)
        await task
        self.assertTrue(store.is_empty)
        self.assertEqual(store.filter.page, 99)
        self.assertEqual(store.page_tokens(), [1, 2, 3])

    async def test_transport_failure_shows_empty_state(self):
        store = self.make_store()
        task = store.select_category("python")
        await settle()
        self.source.fail(0, OSError("boom"))
        self.assertTrue(await task)
        self.assertTrue(store.is_empty)
        self.assertEqual(store.result.page_count, 0)

    async def test_not_empty_while_pending(self):
        store = self.make_store(initial_result=PageResult.empty())
        self.assertTrue(store.is_empty)
        store.select_page(2)
        self.assertFalse(store.is_empty)


class TestListenersAndLifecycle(StoreTestCase):
    async def test_listeners_see_pending_then_idle(self):
        store = self.make_store()
        seen = []
        store.subscribe(lambda s: seen.append(s.status))
        task = store.select_page(2)
        await settle()
        self.source.resolve(0, ["p2"])
        await task
        self.assertEqual(seen, [ListingStatus.PENDING, ListingStatus.IDLE])

    async def test_failing_listener_does_not_break_store(self):
        store = self.make_store()

        def broken(_store):
            raise RuntimeError("render failed")

        store.subscribe(broken)
        task = store.select_page(2)
        await settle()
        self.source.resolve(0, ["p2"])
        self.assertTrue(await task)
        self.assertIs(store.status, ListingStatus.IDLE)

    async def test_unsubscribe(self):
        store = self.make_store()
        seen = []
        listener = lambda s: seen.append(s)
        store.subscribe(listener)
        self.assertTrue(store.unsubscribe(listener))
        self.assertFalse(store.unsubscribe(listener))
        store.select_page(2)
        self.assertEqual(seen, [])

    async def test_wait_idle_waits_for_all_fetches(self):
        store = self.make_store()
        store.select_page(2)
        store.select_page(3)
        await settle()
        waiter = asyncio.ensure_future(store.wait_idle())
        await settle()
        self.assertFalse(waiter.done())
        self.source.resolve(1, ["p3"])
        self.source.resolve(0, ["p2"])
        await waiter
        self.assertEqual(store.result.items, ("p3",))

    async def test_close_cancels_in_flight_fetches(self):
        store = self.make_store()
        task = store.select_page(2)
        await settle()
        store.close()
        with self.assertRaises(asyncio.CancelledError):
            await task
        self.assertEqual(store.result.items, ("initial",))

    async def test_page_tokens_follow_visible_state(self):
        store = self.make_store(FilterState(page=8), PageResult(items=("x",), page_count=16))
        self.assertEqual(store.page_tokens(), [1, 2, ELLIPSIS, 7, 8, 9, ELLIPSIS, 15, 16])
        self.assertEqual(store.link_for_page(9), "/blog/page/9")


if __name__ == "__main__":
    unittest.main()
