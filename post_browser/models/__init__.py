"""Post browser data models."""

from post_browser.models.category import Category
from post_browser.models.filter_state import FilterState
from post_browser.models.pagination import PageResult
from post_browser.models.post import Post, PostStatus

__all__ = ["Category", "FilterState", "PageResult", "Post", "PostStatus"]
