"""Tests for the History module."""

import pytest
from gopher_browser.core.history import History, MAX_HISTORY
from gopher_browser.core.item import HistoryEntry


class TestHistory:
    """Tests for History."""

    def test_starts_empty(self):
        """New history has no entries."""
        history = History()
        assert len(history) == 0
        assert not history
        assert history.max_entries == MAX_HISTORY == 50

    def test_pop_is_lifo(self):
        """pop returns the most recently pushed entry."""
        history = History()
        history.push(HistoryEntry("a", "/1"))
        history.push(HistoryEntry("b", "/2"))
        assert history.pop() == HistoryEntry("b", "/2")
        assert history.pop() == HistoryEntry("a", "/1")

    def test_pop_empty(self):
        """pop on empty history returns None."""
        assert History().pop() is None

    def test_evicts_oldest_past_limit(self):
        """Pushing 51 entries keeps 50, dropping the first pushed."""
        history = History()
        for i in range(51):
            history.push(HistoryEntry("host", f"/{i}"))

        entries = history.entries()
        assert len(entries) == 50
        assert entries[0] == HistoryEntry("host", "/1")
        assert entries[-1] == HistoryEntry("host", "/50")
        assert HistoryEntry("host", "/0") not in entries

    def test_custom_limit(self):
        """A custom limit is honored."""
        history = History(max_entries=2)
        for i in range(3):
            history.push(HistoryEntry("host", f"/{i}"))
        assert [e.selector for e in history.entries()] == ["/1", "/2"]

    def test_invalid_limit(self):
        """A limit below one is rejected."""
        with pytest.raises(ValueError):
            History(max_entries=0)
