"""
Page numbers to show in a pagination bar, with ellipsis gaps.
"""

from __future__ import annotations

from typing import List, Union

# Up to this many pages every page gets its own control.
MAX_UNTRUNCATED = 7


class EllipsisToken:
    """Marker for a run of skipped pages."""

    _instance = None

    def __new__(cls) -> "EllipsisToken":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ELLIPSIS"

    def __str__(self) -> str:
        return "..."


ELLIPSIS = EllipsisToken()

PageToken = Union[int, EllipsisToken]


def generate_page_sequence(current_page: int, page_count: int) -> List[PageToken]:
    """
    Build the bounded page-token sequence for a pagination bar.

    Args:
        current_page: 1-based page being viewed; may exceed `page_count`
        page_count: Total number of pages (0 for an empty listing)

    Returns:
        Page numbers in ascending order with `ELLIPSIS` where pages are skipped.
        Page 1 and the last page are always present when `page_count >= 1`.
    """
    if page_count < 0:
        raise ValueError(f"page_count must be >= 0, got {page_count}")
    if current_page < 1:
        raise ValueError(f"current_page must be >= 1, got {current_page}")

    if page_count <= MAX_UNTRUNCATED:
        return list(range(1, page_count + 1))

    last = page_count
    if current_page <= 3:
        return [1, 2, 3, 4, ELLIPSIS, last - 1, last]
    if current_page >= last - 2:
        return [1, 2, ELLIPSIS, last - 3, last - 2, last - 1, last]
    return [
        1, 2, ELLIPSIS,
        current_page - 1, current_page, current_page + 1,
        ELLIPSIS, last - 1, last,
    ]
