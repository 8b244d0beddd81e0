"""Core components for the Gopher browser."""

from .command_parser import (
    CommandParser,
    Command,
    SelectCommand,
    FollowCommand,
    NextCommand,
    PrevCommand,
    BackCommand,
    HomeCommand,
    BookmarksCommand,
    GoCommand,
    HelpCommand,
    QuitCommand,
    InvalidCommand,
)
from .history import History
from .item import DEFAULT_PORT, HistoryEntry, Item, ItemKind, Page
from .location import Location, parse_gopher_url
from .navigation import (
    FollowResult,
    NavigationController,
    NavigationSnapshot,
    build_search_selector,
)
from .page_renderer import PageRenderer
from .parser import parse_line, parse_menu, parse_text

__all__ = [
    "CommandParser",
    "Command",
    "SelectCommand",
    "FollowCommand",
    "NextCommand",
    "PrevCommand",
    "BackCommand",
    "HomeCommand",
    "BookmarksCommand",
    "GoCommand",
    "HelpCommand",
    "QuitCommand",
    "InvalidCommand",
    "History",
    "DEFAULT_PORT",
    "HistoryEntry",
    "Item",
    "ItemKind",
    "Page",
    "Location",
    "parse_gopher_url",
    "FollowResult",
    "NavigationController",
    "NavigationSnapshot",
    "build_search_selector",
    "PageRenderer",
    "parse_line",
    "parse_menu",
    "parse_text",
]
