"""Browser - interactive terminal front end for the navigation controller."""

import logging
from typing import Callable

from .config import Config
from .core import (
    BackCommand,
    BookmarksCommand,
    Command,
    CommandParser,
    FollowCommand,
    FollowResult,
    GoCommand,
    HelpCommand,
    HomeCommand,
    InvalidCommand,
    Item,
    ItemKind,
    Location,
    NavigationController,
    NextCommand,
    PageRenderer,
    PrevCommand,
    QuitCommand,
    SelectCommand,
    parse_gopher_url,
)

logger = logging.getLogger(__name__)


class Browser:
    """Reads commands line by line and drives a NavigationController.

    The controller, input function and output function are injected so
    the loop can run against a terminal or a test harness.
    """

    HELP_TEXT = """Gopher Browser Help:
[num]    - Follow item
<enter>  - Follow selected item
n / p    - Select next / previous item
b        - Back
h        - Home
m [num]  - Bookmarks
g <url>  - Open gopher URL
q        - Quit
?        - This help"""

    PROMPT = "gopher> "

    def __init__(
        self,
        controller: NavigationController,
        config: Config | None = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        renderer: PageRenderer | None = None,
    ):
        """
        Initialize the browser.

        Args:
            controller: Controller owning page, selection and history.
            config: Browser configuration (uses defaults if None).
            input_func: Reads one line given a prompt.
            output: Writes one block of text.
            renderer: Page renderer (uses defaults if None).
        """
        self.controller = controller
        self.config = config or Config()
        self.input_func = input_func
        self.output = output
        self.renderer = renderer or PageRenderer()
        self.parser = CommandParser()

    def run(self, start: Location | None = None) -> None:
        """
        Load the start page, then process commands until quit or EOF.

        Args:
            start: Initial location (uses the configured start page if None).
        """
        self.output(self.open_location(start or self.home_location()))

        while True:
            try:
                line = self.input_func(self.PROMPT)
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed")
                break

            command = self.parser.parse(line)
            logger.debug(f"Command: {command.__class__.__name__}")

            if isinstance(command, QuitCommand):
                break

            response = self.handle_command(command)
            if response:
                self.output(response)

    def home_location(self) -> Location:
        return Location(
            host=self.config.start_host,
            port=self.config.start_port,
            selector=self.config.start_selector,
        )

    def handle_command(self, command: Command) -> str:
        """
        Process a command and return the text to show.

        Args:
            command: The parsed command.

        Returns:
            Rendered page or message text.
        """
        if isinstance(command, HelpCommand):
            return self.HELP_TEXT

        if isinstance(command, InvalidCommand):
            logger.debug(f"Invalid command: {command.original_input!r}")
            return f"{command.reason}: {command.original_input.strip()}\nType ? for help"

        if isinstance(command, HomeCommand):
            return self.open_location(self.home_location())

        if isinstance(command, BackCommand):
            self.controller.go_back()
            return self.render()

        if isinstance(command, NextCommand):
            self.controller.move_selection(1)
            return self.render()

        if isinstance(command, PrevCommand):
            self.controller.move_selection(-1)
            return self.render()

        if isinstance(command, FollowCommand):
            return self._follow()

        if isinstance(command, SelectCommand):
            return self._handle_select(command.index)

        if isinstance(command, BookmarksCommand):
            return self._handle_bookmarks(command.index)

        if isinstance(command, GoCommand):
            return self._handle_go(command.url)

        return "Unknown command type"

    def open_location(self, location: Location) -> str:
        """
        Navigate to a location according to its kind.

        Args:
            location: Where to go.

        Returns:
            Rendered page or message text.
        """
        kind = location.kind

        if kind is ItemKind.SEARCH:
            item = Item(
                type_char=kind.value,
                display=location.selector,
                selector=location.selector,
                host=location.host,
                port=location.port,
            )
            self.controller.initiate_search(item)
            return self._collect_search(item)

        if kind.is_binary:
            return "Binary files cannot be displayed"

        self.controller.navigate(location.host, location.selector, location.port, kind)
        return self.render()

    def render(self) -> str:
        return self.renderer.render(self.controller.snapshot())

    def _follow(self) -> str:
        """Follow the selected item, prompting for a query on search items."""
        item = self.controller.selected_item
        result = self.controller.follow_selected()

        if result is FollowResult.NOTHING_SELECTED:
            return "Nothing selected"

        if result is FollowResult.SEARCH_REQUIRED:
            return self._collect_search(item)

        return self.render()

    def _collect_search(self, item: Item) -> str:
        try:
            query = self.input_func(f"Search {item.display}: ")
        except (EOFError, KeyboardInterrupt):
            query = ""

        if not query:
            self.controller.cancel_search()
            return "Search cancelled"

        self.controller.submit_search(query)
        return self.render()

    def _handle_select(self, index: int) -> str:
        """
        Select the n-th selectable item and follow it.

        Args:
            index: 1-based position among selectable items.
        """
        page = self.controller.page
        selectable = page.selectable_indices() if page else []

        if index > len(selectable):
            logger.debug(f"Invalid selection: {index}")
            return f"Invalid selection: {index}"

        self.controller.select(selectable[index - 1])
        return self._follow()

    def _handle_bookmarks(self, index: int | None) -> str:
        bookmarks = self.config.bookmarks

        if index is None:
            if not bookmarks:
                return "(no bookmarks)"
            lines = ["Bookmarks:"]
            for i, bookmark in enumerate(bookmarks, 1):
                lines.append(f"{i}. {bookmark.name} ({bookmark.host}{bookmark.selector})")
            return "\n".join(lines)

        if index > len(bookmarks):
            return f"Invalid bookmark: {index}"

        bookmark = bookmarks[index - 1]
        logger.info(f"Opening bookmark {bookmark.name}")
        return self.open_location(
            Location(host=bookmark.host, port=bookmark.port, selector=bookmark.selector)
        )

    def _handle_go(self, url: str) -> str:
        try:
            location = parse_gopher_url(url)
        except ValueError as e:
            return str(e)
        return self.open_location(location)
