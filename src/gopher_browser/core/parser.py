"""Parsing of Gopher menus and text documents.

All functions here are pure: they take the raw response and the address
it came from and return new model objects.
"""

from .item import DEFAULT_PORT, Item, ItemKind, Page

TERMINATOR = "."
MAX_PORT = 65535


def decode_response(response: bytes | str) -> str:
    """Decode response bytes as UTF-8, replacing undecodable bytes."""
    if isinstance(response, bytes):
        return response.decode("utf-8", errors="replace")
    return response


def split_lines(text: str) -> list[str]:
    """
    Split a response into lines up to the end marker.

    One trailing CR is stripped from each line. Processing stops at a
    line that is exactly ".". A final line without a newline is kept.

    Args:
        text: Decoded response text.

    Returns:
        Lines before the terminator, blank lines included.
    """
    lines = text.split("\n")

    # A trailing newline leaves an empty remainder, not a line
    if lines and lines[-1] == "":
        lines.pop()

    result = []
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        if line == TERMINATOR:
            break
        result.append(line)
    return result


def parse_port(value: str) -> int:
    """Convert a port field, defaulting to 70 unless it is plain digits in 1..65535."""
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return DEFAULT_PORT
    port = int(value)
    return port if 0 < port <= MAX_PORT else DEFAULT_PORT


def parse_line(line: str) -> Item:
    """
    Parse one menu line into an Item.

    Format: <type><display>\\t<selector>\\t<host>\\t<port>. Missing fields
    are empty and fields past the port are ignored.

    Args:
        line: A single line without its line terminator.

    Returns:
        The parsed Item. An empty line gives an empty info item.
    """
    if not line:
        return Item.info("")

    fields = line[1:].split("\t")

    return Item(
        type_char=line[0],
        display=fields[0],
        selector=fields[1] if len(fields) > 1 else "",
        host=fields[2] if len(fields) > 2 else "",
        port=parse_port(fields[3]) if len(fields) > 3 else DEFAULT_PORT,
    )


def parse_menu(
    response: bytes | str,
    host: str = "",
    selector: str = "",
    port: int = DEFAULT_PORT,
    truncated: bool = False,
) -> Page:
    """
    Parse a menu response. Blank lines produce no item.

    Args:
        response: Raw response bytes or text.
        host: Host the response came from.
        selector: Selector that was requested.
        port: Port the response came from.
        truncated: Whether the response was cut at the size cap.

    Returns:
        A menu Page.
    """
    text = decode_response(response)
    items = [parse_line(line) for line in split_lines(text) if line]
    return Page(
        host=host,
        selector=selector,
        port=port,
        items=items,
        raw_text=text,
        is_menu=True,
        truncated=truncated,
    )


def parse_text(
    response: bytes | str,
    host: str = "",
    selector: str = "",
    port: int = DEFAULT_PORT,
    truncated: bool = False,
) -> Page:
    """
    Parse a text document. Every line, blank or not, becomes an info item.

    Args:
        response: Raw response bytes or text.
        host: Host the response came from.
        selector: Selector that was requested.
        port: Port the response came from.
        truncated: Whether the response was cut at the size cap.

    Returns:
        A text Page whose raw_text is the decoded response.
    """
    text = decode_response(response)
    items = [Item.info(line) for line in split_lines(text)]
    return Page(
        host=host,
        selector=selector,
        port=port,
        items=items,
        raw_text=text,
        is_menu=False,
        truncated=truncated,
    )


def parse_response(
    response: bytes | str,
    expected_kind: ItemKind,
    host: str = "",
    selector: str = "",
    port: int = DEFAULT_PORT,
    truncated: bool = False,
) -> Page:
    """Parse as text for TEXT and HTML items, as a menu otherwise."""
    if expected_kind in (ItemKind.TEXT, ItemKind.HTML):
        return parse_text(response, host, selector, port, truncated)
    return parse_menu(response, host, selector, port, truncated)
