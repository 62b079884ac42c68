"""Domain model for a post Category."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True, slots=True)
class Category:
    id: str
    name: str
    slug: str
    post_count: int = 0

    @classmethod
    def from_sqlite(cls, row: Dict[str, Any]) -> "Category":
        """Build a `Category` from a SQLite row (dict)."""
        return cls(
            id=str(row.get("id", "")),
            name=row.get("name", ""),
            slug=row.get("slug", ""),
            post_count=int(row.get("post_count") or 0),
        )
