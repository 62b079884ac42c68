"""Shared fakes for listing tests."""

import asyncio

from ..db.connection import MEMORY_DB, SQLiteConnection
from ..db.repos.category_repo import CategoryRepo
from ..db.repos.post_repo import PostRepo


class ControlledSource:
    """Async data source whose responses the test releases by hand."""

    def __init__(self):
        self.calls = []

    async def fetch_items(self, **kwargs):
        future = asyncio.get_running_loop().create_future()
        self.calls.append((kwargs, future))
        return await future

    def resolve(self, index, data, page_count=1):
        self.calls[index][1].set_result({"data": list(data), "page_count": page_count})

    def fail(self, index, exc):
        self.calls[index][1].set_exception(exc)


async def settle(rounds=5):
    """Let freshly created tasks run up to their first real suspension."""
    for _ in range(rounds):
        await asyncio.sleep(0)


def memory_db():
    db = SQLiteConnection({"sqlite": {"db_path": MEMORY_DB}})
    db.ensure_schema()
    return db, PostRepo(db), CategoryRepo(db)
