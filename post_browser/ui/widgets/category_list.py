"""
Category sidebar: pick one category to filter the listing by
"""

from typing import List, Optional

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Label, OptionList
from textual.widgets.option_list import Option

from post_browser.models.category import Category

ALL_POSTS = "__all__"


class CategoryList(Vertical):
    """Lists categories that have posts, with their post counts."""

    DEFAULT_CSS = """
    CategoryList {
        width: 32;
    }

    CategoryList > .section-title {
        text-style: bold;
        padding: 0 1;
    }
    """

    class Selected(Message):
        """A category (or `None` for all posts) was picked"""
        def __init__(self, slug: Optional[str]) -> None:
            super().__init__()
            self.slug = slug

    def __init__(self, *, id: Optional[str] = None, classes: Optional[str] = None) -> None:
        super().__init__(id=id, classes=classes)
        self._categories: List[Category] = []
        self._selected: Optional[str] = None

    def compose(self) -> ComposeResult:
        yield Label("CATEGORIES", classes="section-title")
        yield OptionList(id="category-options")

    def set_categories(self, categories: List[Category], selected: Optional[str] = None) -> None:
        self._categories = list(categories)
        self._selected = selected
        self._rebuild()

    def set_selected(self, selected: Optional[str]) -> None:
        if selected != self._selected:
            self._selected = selected
            self._rebuild()

    def _rebuild(self) -> None:
        options = self.query_one("#category-options", OptionList)
        highlighted = options.highlighted
        options.clear_options()
        options.add_option(Option(self._label("All posts", None), id=ALL_POSTS))
        for category in self._categories:
            noun = "post" if category.post_count == 1 else "posts"
            options.add_option(
                Option(
                    self._label(f"{category.name} ({category.post_count} {noun})", category.slug),
                    id=category.slug,
                )
            )
        if highlighted is not None and highlighted < options.option_count:
            options.highlighted = highlighted

    def _label(self, text: str, slug: Optional[str]) -> str:
        marker = "●" if slug == self._selected else " "
        return f"{marker} {text}"

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        option_id = event.option.id
        self.post_message(self.Selected(None if option_id == ALL_POSTS else option_id))
