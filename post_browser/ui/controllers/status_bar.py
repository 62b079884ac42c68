# post_browser/ui/controllers/status_bar.py
"""Formats and updates the status bar."""

from __future__ import annotations

from typing import Dict, Optional

from textual.widgets import Static

from post_browser.listing.store import ListingStatus


class StatusBarController:
    """Builds the human-readable status text and writes it to the bar."""

    STATUS_LABELS = {
        ListingStatus.IDLE: "Ready",
        ListingStatus.PENDING: "Loading...",
    }

    def __init__(self, status_bar: Static) -> None:
        self._bar = status_bar

    def update(self, meta: Dict[str, object], status: ListingStatus) -> None:
        """
        Refresh the whole status line.

        `meta` expected keys:
            items, pages, current_page, category, search
        """
        self._bar.update(self.format(meta, status))

    @classmethod
    def format(cls, meta: Dict[str, object], status: ListingStatus) -> str:
        parts: list[str] = [
            f"Posts on page: {meta.get('items', 0)}",
            f"Page: {meta.get('current_page', 1)}/{meta.get('pages', 0)}",
        ]

        category: Optional[object] = meta.get("category")
        if category:
            parts.append(f"Category: {category}")
        if meta.get("search"):
            parts.append(f"Search: '{meta['search']}'")

        parts.append(cls.STATUS_LABELS[status])
        return " | ".join(parts)
