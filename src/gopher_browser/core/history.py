"""Bounded back-navigation history."""

from collections import deque

from .item import HistoryEntry

MAX_HISTORY = 50


class History:
    """Stack of visited addresses capped at a maximum depth.

    Pushing past the cap silently drops the oldest entry.
    """

    def __init__(self, max_entries: int = MAX_HISTORY):
        """
        Initialize an empty history.

        Args:
            max_entries: Maximum number of entries kept.
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._entries: deque[HistoryEntry] = deque(maxlen=max_entries)

    @property
    def max_entries(self) -> int:
        return self._entries.maxlen

    def push(self, entry: HistoryEntry) -> None:
        """Record an address as the most recent entry."""
        self._entries.append(entry)

    def pop(self) -> HistoryEntry | None:
        """Remove and return the most recent entry, or None if empty."""
        if not self._entries:
            return None
        return self._entries.pop()

    def entries(self) -> list[HistoryEntry]:
        """All entries, oldest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
