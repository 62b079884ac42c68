"""Domain model for a Post entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class PostStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"


def _parse_date(value: Any) -> Optional[datetime]:
    """Convert various inputs → datetime | None."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


@dataclass(frozen=True, slots=True)
class Post:
    id: str
    title: str
    slug: str
    description: str = ""
    status: PostStatus = PostStatus.DRAFT
    category_slug: Optional[str] = None
    category_name: Optional[str] = None
    created_at: Optional[datetime] = None

    # ---------- mappings ----------
    @classmethod
    def from_sqlite(cls, row: Dict[str, Any]) -> "Post":
        """Build a `Post` from a SQLite row joined with its category."""
        return cls(
            id=str(row.get("id", "")),
            title=row.get("title", ""),
            slug=row.get("slug", ""),
            description=row.get("description") or "",
            status=PostStatus(row.get("status") or PostStatus.DRAFT.value),
            category_slug=row.get("category_slug"),
            category_name=row.get("category_name"),
            created_at=_parse_date(row.get("created_at")),
        )
