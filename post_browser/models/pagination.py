"""One page of listing results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Sequence, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PageResult(Generic[T]):
    """A single page of items plus the total number of pages."""

    items: Tuple[T, ...]
    page_count: int      # authoritative upper bound for the page number

    def __post_init__(self) -> None:
        # accept any sequence but store an immutable copy
        object.__setattr__(self, "items", tuple(self.items))
        if self.page_count < 0:
            raise ValueError(f"page_count must be >= 0, got {self.page_count}")

    # ------------- helpers -------------
    @classmethod
    def empty(cls) -> "PageResult[Any]":
        return cls(items=(), page_count=0)

    @classmethod
    def from_response(cls, response: dict) -> "PageResult[Any]":
        """Build from a content query service response ({data, page_count})."""
        data: Sequence[Any] = response.get("data") or ()
        return cls(items=tuple(data), page_count=int(response.get("page_count") or 0))

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0
