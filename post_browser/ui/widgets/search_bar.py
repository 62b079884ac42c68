"""
Search bar widget with debounced title filtering
"""

from typing import Optional

from textual.containers import Container
from textual.message import Message
from textual.widgets import Input

from post_browser.listing.debounce import DEFAULT_DELAY, SearchTermDebouncer


class SearchBar(Container):
    """
    Free-text search input. Emits `Changed` once typing pauses.
    """

    DEFAULT_CSS = """
    SearchBar {
        height: 3;
    }
    """

    class Changed(Message):
        """Debounced search term changed"""
        def __init__(self, query: str) -> None:
            super().__init__()
            self.query = query

    def __init__(
        self,
        *,
        delay: float = DEFAULT_DELAY,
        initial: str = "",
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        """
        Initialize the SearchBar

        Args:
            delay: Quiet period in seconds before a term is propagated
            initial: Term to show (and treat as already applied)
            id: Optional widget ID
            classes: Optional CSS classes
        """
        super().__init__(id=id, classes=classes)
        self._initial = initial
        self._debouncer = SearchTermDebouncer(self._emit, delay=delay)
        self._debouncer.reset(initial)

    def compose(self):
        yield Input(value=self._initial, placeholder="Search posts by title...", id="search-input")

    @property
    def term(self) -> str:
        return self.query_one("#search-input", Input).value

    def focus_input(self) -> None:
        self.query_one("#search-input", Input).focus()

    def set_term(self, term: str) -> None:
        """Show `term` without emitting a change (e.g. after back/forward)."""
        self._debouncer.reset(term)
        search_input = self.query_one("#search-input", Input)
        with search_input.prevent(Input.Changed):
            search_input.value = term

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self._debouncer.push(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter applies the term without waiting."""
        event.stop()
        self._debouncer.flush()

    def on_unmount(self) -> None:
        self._debouncer.cancel()

    def _emit(self, term: str) -> None:
        self.post_message(self.Changed(term))
