"""Protocol definition for membership filters."""

from __future__ import annotations

from typing import Protocol

from ..core.types import FilterState, Item


class MembershipFilter(Protocol):
    """Probabilistic set membership test."""

    def insert(self, item: Item) -> None:
        """Add item to the filter."""
        ...

    def lookup(self, item: Item) -> bool:
        """Return True if item may be present; False if definitely absent."""
        ...

    def state(self) -> FilterState:
        """Snapshot the filter for persistence."""
        ...
