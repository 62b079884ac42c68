import unittest

from ..listing.fetcher import ListingFetcher
from ..models.filter_state import FilterState
from ..models.pagination import PageResult
from ..models.post import PostStatus


class TestListingFetcher(unittest.IsolatedAsyncioTestCase):
    async def test_passes_filter_to_async_source(self):
        seen = {}

        async def fetch_items(**kwargs):
            seen.update(kwargs)
            return {"data": ["a", "b"], "page_count": 4}

        fetcher = ListingFetcher(fetch_items, per_page=2)
        result = await fetcher.fetch(FilterState(category_slug="python", page=3, search="gil"))

        self.assertEqual(result, PageResult(items=("a", "b"), page_count=4))
        self.assertEqual(
            seen,
            {
                "page": 3,
                "per_page": 2,
                "status": PostStatus.PUBLISHED,
                "category_slug": "python",
                "title": "gil",
            },
        )

    async def test_blocking_source_runs_in_a_thread(self):
        def fetch_items(**kwargs):
            return {"data": [kwargs["page"]], "page_count": 9}

        result = await ListingFetcher(fetch_items).fetch(FilterState(page=2))
        self.assertEqual(result.items, (2,))
        self.assertEqual(result.page_count, 9)

    async def test_empty_search_is_sent_as_none(self):
        seen = {}

        def fetch_items(**kwargs):
            seen.update(kwargs)
            return {"data": [], "page_count": 0}

        await ListingFetcher(fetch_items).fetch(FilterState())
        self.assertIsNone(seen["title"])
        self.assertIsNone(seen["category_slug"])

    async def test_source_failure_becomes_empty_page(self):
        async def fetch_items(**kwargs):
            raise ConnectionError("database went away")

        result = await ListingFetcher(fetch_items).fetch(FilterState())
        self.assertEqual(result, PageResult.empty())
        self.assertTrue(result.is_empty)

    async def test_malformed_response_becomes_empty_page(self):
        def fetch_items(**kwargs):
            return {"data": [], "page_count": -3}

        result = await ListingFetcher(fetch_items).fetch(FilterState())
        self.assertEqual(result, PageResult.empty())

    async def test_out_of_range_page_is_just_empty(self):
        def fetch_items(**kwargs):
            return {"data": [], "page_count": 2}

        result = await ListingFetcher(fetch_items).fetch(FilterState(page=50))
        self.assertTrue(result.is_empty)
        self.assertEqual(result.page_count, 2)


if __name__ == "__main__":
    unittest.main()
