"""
Browser-style history of listing addresses.
"""

from __future__ import annotations

from typing import List, Optional


class AddressHistory:
    """The navigable address bar: current entry plus back/forward stacks."""

    def __init__(self, initial: str) -> None:
        self._entries: List[str] = [initial]
        self._index = 0

    @property
    def current(self) -> str:
        return self._entries[self._index]

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return self._index < len(self._entries) - 1

    def push(self, address: str) -> None:
        """Navigate to `address`, dropping any forward entries."""
        if address == self.current:
            return
        del self._entries[self._index + 1:]
        self._entries.append(address)
        self._index += 1

    def back(self) -> Optional[str]:
        if not self.can_go_back:
            return None
        self._index -= 1
        return self.current

    def forward(self) -> Optional[str]:
        if not self.can_go_forward:
            return None
        self._index += 1
        return self.current

    def __len__(self) -> int:
        return len(self._entries)
