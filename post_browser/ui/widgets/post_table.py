"""
DataTable for displaying one page of posts
"""

from typing import Iterable, Optional

from rich.text import Text
from textual.widgets import DataTable

from post_browser.models.post import Post
from post_browser.utils.formatters import format_date, truncate_text


class PostTable(DataTable):
    """
    Read-only post listing, one row per post in server order
    """

    def __init__(
        self,
        *,
        date_format: str = "%Y-%m-%d",
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.cursor_type = "row"
        self.zebra_stripes = True
        self._date_format = date_format

    def on_mount(self) -> None:
        self.add_columns("Title", "Category", "Published", "Description")

    def show_posts(self, posts: Iterable[Post]) -> None:
        self.clear()
        for post in posts:
            self.add_row(
                Text(truncate_text(post.title, 60), style="bold"),
                Text(post.category_name or "-", style="magenta"),
                format_date(post.created_at, self._date_format),
                truncate_text(post.description, 70),
                key=post.slug or post.id,
            )
