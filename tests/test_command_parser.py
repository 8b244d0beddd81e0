"""Tests for the CommandParser module."""

import pytest
from gopher_browser.core.command_parser import (
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


class TestCommandParser:
    """Tests for CommandParser."""

    @pytest.fixture
    def parser(self):
        """Create a CommandParser instance."""
        return CommandParser()

    def test_parse_single_digit_number(self, parser):
        """Parsing a single digit returns SelectCommand."""
        cmd = parser.parse("2")
        assert isinstance(cmd, SelectCommand)
        assert cmd.index == 2

    def test_parse_large_number(self, parser):
        """Large menus can be addressed past 99."""
        cmd = parser.parse("150")
        assert isinstance(cmd, SelectCommand)
        assert cmd.index == 150

    def test_parse_number_with_whitespace(self, parser):
        """Parsing number with leading/trailing whitespace works."""
        cmd = parser.parse("  7  ")
        assert isinstance(cmd, SelectCommand)
        assert cmd.index == 7

    def test_parse_zero_is_invalid(self, parser):
        """Zero is not a valid selection."""
        cmd = parser.parse("0")
        assert isinstance(cmd, InvalidCommand)
        assert cmd.reason == "Selection must be positive"

    def test_parse_negative_is_invalid(self, parser):
        """Negative numbers are invalid."""
        cmd = parser.parse("-5")
        assert isinstance(cmd, InvalidCommand)

    def test_parse_empty_follows(self, parser):
        """An empty line follows the selected item."""
        assert isinstance(parser.parse(""), FollowCommand)
        assert isinstance(parser.parse("   "), FollowCommand)

    @pytest.mark.parametrize("text", ["f", "go", "follow", "F"])
    def test_parse_follow(self, parser, text):
        """Follow aliases return FollowCommand."""
        assert isinstance(parser.parse(text), FollowCommand)

    @pytest.mark.parametrize("text,expected", [
        ("n", NextCommand),
        ("next", NextCommand),
        ("p", PrevCommand),
        ("PREV", PrevCommand),
        ("b", BackCommand),
        ("Back", BackCommand),
        ("h", HomeCommand),
        ("home", HomeCommand),
        ("?", HelpCommand),
        ("help", HelpCommand),
        ("q", QuitCommand),
        ("quit", QuitCommand),
    ])
    def test_parse_keywords(self, parser, text, expected):
        """Keyword commands are case insensitive."""
        assert isinstance(parser.parse(text), expected)

    def test_parse_bookmarks_list(self, parser):
        """'m' lists bookmarks."""
        cmd = parser.parse("m")
        assert isinstance(cmd, BookmarksCommand)
        assert cmd.index is None

    def test_parse_bookmark_open(self, parser):
        """'m 2' opens the second bookmark."""
        cmd = parser.parse("m 2")
        assert isinstance(cmd, BookmarksCommand)
        assert cmd.index == 2

    def test_parse_bookmark_invalid(self, parser):
        """Bookmark numbers must be positive integers."""
        assert isinstance(parser.parse("m x"), InvalidCommand)
        assert isinstance(parser.parse("m 0"), InvalidCommand)

    def test_parse_go_url(self, parser):
        """'g <url>' opens a URL, keeping its case."""
        cmd = parser.parse("g gopher://SDF.org/1/Users")
        assert isinstance(cmd, GoCommand)
        assert cmd.url == "gopher://SDF.org/1/Users"

    def test_parse_go_long_form(self, parser):
        """'go <url>' also opens a URL."""
        cmd = parser.parse("go sdf.org")
        assert isinstance(cmd, GoCommand)
        assert cmd.url == "sdf.org"

    def test_parse_go_without_url(self, parser):
        """'g' alone is invalid."""
        cmd = parser.parse("g")
        assert isinstance(cmd, InvalidCommand)
        assert cmd.reason == "Missing URL"

    def test_parse_unknown(self, parser):
        """Unknown words are invalid and keep the original input."""
        cmd = parser.parse("xyz")
        assert isinstance(cmd, InvalidCommand)
        assert cmd.original_input == "xyz"
        assert cmd.reason == "Unknown command"

    def test_parse_unknown_with_argument(self, parser):
        """Unknown commands with arguments are invalid."""
        assert isinstance(parser.parse("fly away"), InvalidCommand)

    def test_commands_are_commands(self, parser):
        """Every parse result is a Command."""
        for text in ["1", "b", "", "zzz", "m 1"]:
            assert isinstance(parser.parse(text), Command)
