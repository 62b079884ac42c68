# post_browser/ui/messages.py
"""Message classes for the application."""

from __future__ import annotations

from textual.message import Message

from post_browser.listing.store import ListingStatus


class ListingChanged(Message):
    """The listing store entered a new state."""

    def __init__(self, status: ListingStatus, generation: int) -> None:
        super().__init__()
        self.status = status
        self.generation = generation
