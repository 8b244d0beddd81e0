"""Command parser for interpreting terminal input."""

from abc import ABC
from dataclasses import dataclass


class Command(ABC):
    """Base class for all commands."""

    pass


@dataclass(frozen=True)
class SelectCommand(Command):
    """Command to follow the n-th selectable item (1-based)."""

    index: int


@dataclass(frozen=True)
class FollowCommand(Command):
    """Command to follow the currently selected item."""

    pass


@dataclass(frozen=True)
class NextCommand(Command):
    """Command to move the selection down."""

    pass


@dataclass(frozen=True)
class PrevCommand(Command):
    """Command to move the selection up."""

    pass


@dataclass(frozen=True)
class BackCommand(Command):
    """Command to go back in history."""

    pass


@dataclass(frozen=True)
class HomeCommand(Command):
    """Command to go to the start page."""

    pass


@dataclass(frozen=True)
class BookmarksCommand(Command):
    """Command to list bookmarks, or open one when index is given."""

    index: int | None = None


@dataclass(frozen=True)
class GoCommand(Command):
    """Command to open a gopher URL."""

    url: str


@dataclass(frozen=True)
class HelpCommand(Command):
    """Command to display help information."""

    pass


@dataclass(frozen=True)
class QuitCommand(Command):
    """Command to exit the browser."""

    pass


@dataclass(frozen=True)
class InvalidCommand(Command):
    """Represents an invalid or unrecognized command."""

    original_input: str
    reason: str = "Unknown command"


class CommandParser:
    """Parses terminal input lines into Command objects."""

    # Command mappings
    FOLLOW_COMMANDS = {"", "f", "go", "follow"}
    NEXT_COMMANDS = {"n", "next"}
    PREV_COMMANDS = {"p", "prev"}
    BACK_COMMANDS = {"b", "back"}
    HOME_COMMANDS = {"h", "home"}
    BOOKMARK_COMMANDS = {"m", "bookmarks"}
    GO_COMMANDS = {"g", "go"}
    HELP_COMMANDS = {"?", "help"}
    QUIT_COMMANDS = {"q", "quit"}

    def parse(self, input_str: str) -> Command:
        """
        Parse a line of user input into a Command object.

        Args:
            input_str: The raw input line.

        Returns:
            A Command object representing the parsed input.
        """
        stripped = input_str.strip()
        word, _, argument = stripped.partition(" ")
        word = word.lower()
        argument = argument.strip()

        if argument:
            return self._parse_with_argument(input_str, word, argument)

        if word in self.FOLLOW_COMMANDS:
            return FollowCommand()

        if word in self.NEXT_COMMANDS:
            return NextCommand()

        if word in self.PREV_COMMANDS:
            return PrevCommand()

        if word in self.BACK_COMMANDS:
            return BackCommand()

        if word in self.HOME_COMMANDS:
            return HomeCommand()

        if word in self.BOOKMARK_COMMANDS:
            return BookmarksCommand()

        if word in self.HELP_COMMANDS:
            return HelpCommand()

        if word in self.QUIT_COMMANDS:
            return QuitCommand()

        if word in self.GO_COMMANDS:
            return InvalidCommand(original_input=input_str, reason="Missing URL")

        # Try to parse as number
        number = self._parse_number(word)
        if number is None:
            return InvalidCommand(original_input=input_str, reason="Unknown command")
        if number < 1:
            return InvalidCommand(
                original_input=input_str,
                reason="Selection must be positive",
            )
        return SelectCommand(index=number)

    def _parse_with_argument(self, input_str: str, word: str, argument: str) -> Command:
        """Parse commands of the form '<word> <argument>'."""
        if word in self.GO_COMMANDS:
            return GoCommand(url=argument)

        if word in self.BOOKMARK_COMMANDS:
            number = self._parse_number(argument)
            if number is None or number < 1:
                return InvalidCommand(
                    original_input=input_str,
                    reason="Bookmark must be a positive number",
                )
            return BookmarksCommand(index=number)

        return InvalidCommand(original_input=input_str, reason="Unknown command")

    def _parse_number(self, text: str) -> int | None:
        try:
            return int(text)
        except ValueError:
            return None
