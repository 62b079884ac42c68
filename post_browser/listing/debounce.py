"""
Debounce for free-text search input.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

DEFAULT_DELAY = 0.2


class SearchTermDebouncer:
    """
    Coalesces rapid search input into one callback per quiet period.

    Every `push` cancels the pending timer and starts a new one, so the
    callback fires `delay` seconds after the last keystroke with the last
    term. Terms are compared without surrounding whitespace, and a term
    equal to the one last delivered is not delivered again.
    Must be used from inside a running event loop.
    """

    def __init__(self, callback: Callable[[str], None], delay: float = DEFAULT_DELAY) -> None:
        self._callback = callback
        self.delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None
        self._term: str = ""
        self._delivered: Optional[str] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, term: str) -> None:
        self.cancel()
        self._term = term
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def flush(self) -> None:
        """Deliver a pending term right away."""
        if self._handle is not None:
            self.cancel()
            self._fire()

    def reset(self, term: str = "") -> None:
        """Forget history, e.g. after the term was changed from elsewhere."""
        self.cancel()
        self._term = term
        self._delivered = term.strip()

    def _fire(self) -> None:
        self._handle = None
        term = self._term.strip()
        if term == self._delivered:
            return
        self._delivered = term
        self._callback(term)
