"""
Main Textual application class for the post browser
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from textual.app import App
from textual.binding import Binding

from post_browser.di import Container, build_container
from post_browser.ui.screens.listing_screen import ListingScreen
from simple_logger import Slogger


class PostBrowserApp(App):
    """Terminal browser for published posts."""

    TITLE = "Post Browser"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-container {
        height: 1fr;
    }

    #content-area {
        padding: 0 1;
    }

    #status-bar {
        height: 1;
        background: $boost;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: Dict[str, Any],
        *,
        initial_address: Optional[str] = None,
        container: Optional[Container] = None,
    ) -> None:
        super().__init__()
        self.config = config
        self.container: Container = container or build_container(config)
        self.initial_address = initial_address

    def on_mount(self) -> None:
        Slogger.info("Opening listing screen", {"address": self.initial_address or "-"})
        self.push_screen(
            ListingScreen(
                post_service=self.container.post_service,
                category_service=self.container.category_service,
                config=self.config,
                initial_address=self.initial_address,
            )
        )
