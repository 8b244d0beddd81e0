"""Item and page model for Gopher responses."""

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_PORT = 70


class ItemKind(Enum):
    """Gopher item type markers (RFC 1436 plus common extensions)."""

    TEXT = "0"
    MENU = "1"
    CSO_SERVER = "2"
    ERROR = "3"
    BINHEX = "4"
    DOS_BINARY = "5"
    UUENCODED = "6"
    SEARCH = "7"
    TELNET = "8"
    BINARY = "9"
    REDUNDANT = "+"
    TN3270 = "T"
    GIF = "g"
    IMAGE = "I"
    INFO = "i"
    HTML = "h"
    SOUND = "s"
    DOCUMENT = "d"
    UNKNOWN = ""

    @classmethod
    def from_char(cls, type_char: str) -> "ItemKind":
        """Classify a type character, falling back to UNKNOWN."""
        if not type_char:
            return cls.UNKNOWN
        try:
            return cls(type_char)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_selectable(self) -> bool:
        """Whether items of this kind can be selected and followed."""
        return self not in _NOT_SELECTABLE

    @property
    def is_binary(self) -> bool:
        """Whether items of this kind hold content that cannot be shown as text."""
        return self in _BINARY

    @property
    def prefix(self) -> str:
        """Short label shown in front of an item."""
        return _PREFIXES.get(self, "[?]")


_NOT_SELECTABLE = frozenset({
    ItemKind.INFO,
    ItemKind.ERROR,
    ItemKind.REDUNDANT,
    ItemKind.CSO_SERVER,
    ItemKind.TELNET,
    ItemKind.TN3270,
})

_BINARY = frozenset({
    ItemKind.BINARY,
    ItemKind.IMAGE,
    ItemKind.GIF,
    ItemKind.SOUND,
    ItemKind.DOS_BINARY,
    ItemKind.BINHEX,
    ItemKind.UUENCODED,
})

_PREFIXES = {
    ItemKind.TEXT: "[T]",
    ItemKind.MENU: "[D]",
    ItemKind.SEARCH: "[?]",
    ItemKind.BINARY: "[B]",
    ItemKind.IMAGE: "[I]",
    ItemKind.GIF: "[I]",
    ItemKind.SOUND: "[S]",
    ItemKind.HTML: "[H]",
    ItemKind.ERROR: "[E]",
    ItemKind.INFO: "   ",
}


@dataclass(frozen=True)
class Item:
    """A single menu entry or document line.

    The raw type character is kept verbatim so unknown types survive
    parsing; `kind` classifies it.
    """

    type_char: str
    display: str = ""
    selector: str = ""
    host: str = ""
    port: int = DEFAULT_PORT

    @classmethod
    def info(cls, text: str) -> "Item":
        """Create a non-interactive info line."""
        return cls(type_char=ItemKind.INFO.value, display=text)

    @property
    def kind(self) -> ItemKind:
        return ItemKind.from_char(self.type_char)

    @property
    def is_selectable(self) -> bool:
        return self.kind.is_selectable


@dataclass(frozen=True)
class Page:
    """A fetched menu or text document (immutable)."""

    host: str = ""
    selector: str = ""
    port: int = DEFAULT_PORT
    items: tuple[Item, ...] = field(default_factory=tuple)
    raw_text: str = ""
    is_menu: bool = True
    truncated: bool = False

    def __init__(
        self,
        host: str = "",
        selector: str = "",
        port: int = DEFAULT_PORT,
        items: list[Item] | tuple[Item, ...] | None = None,
        raw_text: str = "",
        is_menu: bool = True,
        truncated: bool = False,
    ):
        object.__setattr__(self, "host", host)
        object.__setattr__(self, "selector", selector)
        object.__setattr__(self, "port", port)
        # Convert list to tuple for immutability
        object.__setattr__(self, "items", tuple(items) if items else ())
        object.__setattr__(self, "raw_text", raw_text)
        object.__setattr__(self, "is_menu", is_menu)
        object.__setattr__(self, "truncated", truncated)

    def first_selectable_index(self) -> int:
        """Index of the first selectable item, or -1 if there is none."""
        for index, item in enumerate(self.items):
            if item.is_selectable:
                return index
        return -1

    def selectable_indices(self) -> list[int]:
        """Indices of all selectable items, in order."""
        return [i for i, item in enumerate(self.items) if item.is_selectable]


@dataclass(frozen=True)
class HistoryEntry:
    """Address of a previously visited page."""

    host: str
    selector: str
    port: int = DEFAULT_PORT
