"""Navigation controller: current page, selection and history."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..errors import (
    EmptyResponse,
    GopherError,
    NoHistoryError,
    UnsupportedContentError,
)
from ..interfaces import ContentTransport
from .history import MAX_HISTORY, History
from .item import DEFAULT_PORT, HistoryEntry, Item, ItemKind, Page
from .parser import parse_response

logger = logging.getLogger(__name__)

STATUS_CONNECTING = "Connecting..."
STATUS_LOADING = "Loading..."
STATUS_LOAD_FAILED = "Failed to load page"
STATUS_NO_HISTORY = "No more history"
STATUS_UNSUPPORTED = "Binary files cannot be displayed"


class FollowResult(Enum):
    """Outcome of following the selected item."""

    LOADED = "loaded"
    FAILED = "failed"
    SEARCH_REQUIRED = "search_required"
    UNSUPPORTED = "unsupported"
    NOTHING_SELECTED = "nothing_selected"


@dataclass(frozen=True)
class NavigationSnapshot:
    """Read-only view of the controller state for renderers."""

    host: str
    selector: str
    port: int
    items: tuple[Item, ...]
    raw_text: str
    is_menu: bool
    truncated: bool
    selected_index: int
    status: str
    is_loading: bool


def build_search_selector(item: Item, query: str) -> str:
    """Append a query to a search item's selector, separated by a tab."""
    return f"{item.selector}\t{query}"


class NavigationController:
    """Owns the current page, the selection cursor and the back history.

    All operations are synchronous: a fetch blocks until the transport
    returns. Failures are reported through `status` and `last_error`
    together with a False/FollowResult return value, never by raising.

    The working address (`host`, `selector`, `port`) is updated before a
    fetch is attempted. When the fetch fails the address points at the
    unreached destination while `page` still holds the previous content.
    """

    def __init__(
        self,
        transport: ContentTransport,
        max_history: int = MAX_HISTORY,
    ):
        """
        Initialize with no page loaded.

        Args:
            transport: Transport used for every fetch.
            max_history: Maximum number of back-history entries.
        """
        self.transport = transport
        self.history = History(max_history)

        self.page: Page | None = None
        self.host = ""
        self.selector = ""
        self.port = DEFAULT_PORT
        self.selected_index = -1
        self.status = ""
        self.last_error: GopherError | None = None
        self.is_loading = False
        self.pending_search: Item | None = None

    @property
    def items(self) -> tuple[Item, ...]:
        return self.page.items if self.page else ()

    @property
    def selected_item(self) -> Item | None:
        """The currently selected item, or None."""
        items = self.items
        if 0 <= self.selected_index < len(items):
            return items[self.selected_index]
        return None

    @property
    def history_depth(self) -> int:
        return len(self.history)

    def snapshot(self) -> NavigationSnapshot:
        """Capture the current state for display."""
        page = self.page or Page()
        return NavigationSnapshot(
            host=self.host,
            selector=self.selector,
            port=self.port,
            items=page.items,
            raw_text=page.raw_text,
            is_menu=page.is_menu,
            truncated=page.truncated,
            selected_index=self.selected_index,
            status=self.status,
            is_loading=self.is_loading,
        )

    def navigate(
        self,
        host: str,
        selector: str,
        port: int = DEFAULT_PORT,
        expected_kind: ItemKind = ItemKind.MENU,
    ) -> bool:
        """
        Load a new page, recording the current address in history.

        Args:
            host: Server host.
            selector: Selector to request.
            port: Server port.
            expected_kind: TEXT or HTML parse as a document, anything
                else as a menu.

        Returns:
            True if the page was loaded.
        """
        if self.host:
            self.history.push(HistoryEntry(self.host, self.selector, self.port))

        logger.info(f"Navigating to {host}:{port} {selector!r} as {expected_kind.name}")
        return self._load(host, selector, port, expected_kind, STATUS_CONNECTING)

    def go_back(self) -> bool:
        """
        Re-fetch the most recent history entry.

        The popped entry is not pushed back and the response is always
        parsed as a menu.

        Returns:
            False if history is empty or the fetch failed.
        """
        entry = self.history.pop()
        if entry is None:
            logger.debug("Back requested with empty history")
            self._fail(STATUS_NO_HISTORY, NoHistoryError("History is empty"))
            return False

        logger.info(f"Going back to {entry.host}:{entry.port} {entry.selector!r}")
        return self._load(
            entry.host, entry.selector, entry.port, ItemKind.MENU, STATUS_LOADING
        )

    def first_selectable_index(self) -> int:
        """Index of the first selectable item on the current page, or -1."""
        if self.page is None:
            return -1
        return self.page.first_selectable_index()

    def move_selection(self, direction: int) -> None:
        """
        Move the selection to the next selectable item, wrapping around.

        Args:
            direction: +1 to move down, -1 to move up.

        Raises:
            ValueError: If direction is not +1 or -1.
        """
        if direction not in (1, -1):
            raise ValueError(f"direction must be +1 or -1, got {direction}")

        items = self.items
        count = len(items)
        if count == 0:
            return

        start = self.selected_index
        index = start + direction
        while 0 <= index < count:
            if items[index].is_selectable:
                self.selected_index = index
                return
            index += direction

        # Nothing further in this direction, wrap around
        if direction > 0:
            candidates = range(0, start)
        else:
            candidates = range(count - 1, start, -1)

        for index in candidates:
            if items[index].is_selectable:
                self.selected_index = index
                return

    def select(self, index: int) -> bool:
        """
        Select an item directly.

        Args:
            index: 0-based item index.

        Returns:
            True if the item exists and is selectable.
        """
        items = self.items
        if not 0 <= index < len(items) or not items[index].is_selectable:
            return False
        self.selected_index = index
        return True

    def follow_selected(self) -> FollowResult:
        """
        Act on the selected item according to its kind.

        Menus and unknown kinds load as menus, text and HTML load as
        documents, search items wait for a query via `submit_search`,
        and binary kinds are refused.

        Returns:
            The outcome of the follow.
        """
        item = self.selected_item
        if item is None or not item.is_selectable:
            return FollowResult.NOTHING_SELECTED

        kind = item.kind

        if kind is ItemKind.SEARCH:
            self.initiate_search(item)
            return FollowResult.SEARCH_REQUIRED

        if kind.is_binary:
            logger.info(f"Refusing binary item {item.display!r} ({item.type_char})")
            self._fail(
                STATUS_UNSUPPORTED,
                UnsupportedContentError(f"Unsupported item type {item.type_char!r}"),
            )
            return FollowResult.UNSUPPORTED

        if kind in (ItemKind.TEXT, ItemKind.HTML):
            expected = ItemKind.TEXT
        else:
            expected = ItemKind.MENU

        loaded = self.navigate(item.host, item.selector, item.port, expected)
        return FollowResult.LOADED if loaded else FollowResult.FAILED

    def initiate_search(self, item: Item) -> Callable[[str], bool]:
        """
        Start a search on an item.

        Args:
            item: The search item whose selector receives the query.

        Returns:
            A callback taking the query and returning whether the results
            loaded.
        """
        self.pending_search = item
        self.status = f"Search: {item.display}"
        return self.submit_search

    def submit_search(self, query: str) -> bool:
        """
        Run the pending search. An empty query cancels it.

        Args:
            query: Query text, sent without escaping.

        Returns:
            True if the results loaded.
        """
        item = self.pending_search
        self.pending_search = None

        if item is None:
            logger.debug("Search submitted with no pending search item")
            return False

        if not query:
            logger.debug("Search cancelled")
            self.status = ""
            return False

        selector = build_search_selector(item, query)
        return self.navigate(item.host, selector, item.port, ItemKind.MENU)

    def cancel_search(self) -> None:
        self.submit_search("")

    def _load(
        self,
        host: str,
        selector: str,
        port: int,
        expected_kind: ItemKind,
        pending_status: str,
    ) -> bool:
        """Fetch and parse a page, committing the address up front."""
        self.host = host
        self.selector = selector
        self.port = port
        self.status = pending_status

        self.is_loading = True
        try:
            result = self.transport.fetch_response(host, selector, port)
        finally:
            self.is_loading = False

        if not result.data:
            logger.warning(f"Failed to load {host}:{port} {selector!r}")
            self._fail(
                STATUS_LOAD_FAILED,
                EmptyResponse(f"No data from {host}:{port} {selector!r}"),
            )
            return False

        page = parse_response(
            result.data, expected_kind, host, selector, port, result.truncated
        )

        self.page = page
        self.selected_index = page.first_selectable_index()
        self.status = ""
        self.last_error = None

        logger.debug(
            f"Loaded {len(page.items)} items "
            f"({'menu' if page.is_menu else 'text'}), selection {self.selected_index}"
        )
        return True

    def _fail(self, status: str, error: GopherError) -> None:
        self.status = status
        self.last_error = error
