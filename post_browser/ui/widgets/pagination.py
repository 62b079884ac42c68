"""
Pagination widget: prev/next plus numbered page buttons with ellipsis gaps
"""

from typing import Callable, Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Label

from post_browser.listing.page_sequence import EllipsisToken, generate_page_sequence


class Pagination(Horizontal):
    """
    Page controls for a listing. Hidden while there is only one page.
    """

    DEFAULT_CSS = """
    Pagination {
        height: 3;
        align: center middle;
    }

    Pagination > Button {
        min-width: 5;
        margin: 0 1;
    }

    Pagination > Button.-active {
        text-style: bold reverse;
    }

    Pagination > .ellipsis {
        padding: 1 1;
    }
    """

    class PageChanged(Message):
        """Page changed message"""
        def __init__(self, page: int) -> None:
            super().__init__()
            self.page = page

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.current_page = 1
        self.page_count = 0
        self._link_for: Optional[Callable[[int], str]] = None

    def compose(self) -> ComposeResult:
        yield Button("< Prev", name="prev", disabled=self.current_page <= 1)

        for token in generate_page_sequence(self.current_page, self.page_count):
            if isinstance(token, EllipsisToken):
                yield Label(str(token), classes="ellipsis")
                continue
            button = Button(
                str(token),
                name=str(token),
                classes="page-button -active" if token == self.current_page else "page-button",
            )
            if self._link_for is not None:
                button.tooltip = self._link_for(token)
            yield button

        yield Button("Next >", name="next", disabled=self.current_page >= self.page_count)

    def update_pages(
        self,
        current: int,
        total: int,
        link_for: Optional[Callable[[int], str]] = None,
    ) -> None:
        """
        Rebuild the controls for a new page/page-count pair

        Args:
            current: Page being viewed
            total: Number of pages in the listing
            link_for: Optional page -> address mapping shown as tooltip
        """
        self.current_page = current
        self.page_count = total
        self._link_for = link_for
        self.display = total > 1
        self.refresh(recompose=True)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        name = event.button.name
        new_page = self.current_page

        if name == "prev":
            new_page = self.current_page - 1
        elif name == "next":
            new_page = self.current_page + 1
        elif name and name.isdigit():
            new_page = int(name)

        if new_page != self.current_page and 1 <= new_page <= self.page_count:
            self.post_message(self.PageChanged(new_page))
