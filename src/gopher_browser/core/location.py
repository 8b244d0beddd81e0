"""Gopher URL parsing."""

from dataclasses import dataclass

from .item import DEFAULT_PORT, ItemKind

SCHEME = "gopher://"


@dataclass(frozen=True)
class Location:
    """Address of a Gopher resource plus the kind expected there."""

    host: str
    port: int = DEFAULT_PORT
    kind: ItemKind = ItemKind.MENU
    selector: str = ""


def parse_gopher_url(url: str) -> Location:
    """
    Parse a gopher URL or a bare host[:port].

    Format: gopher://host[:port][/<type>[selector]]. Without a path the
    location is the root menu.

    Args:
        url: The URL to parse.

    Returns:
        The parsed Location.

    Raises:
        ValueError: If the scheme is not gopher, the host is missing or
            the port is not a positive number.
    """
    url = url.strip()

    if "://" in url:
        if not url.lower().startswith(SCHEME):
            raise ValueError(f"Not a gopher URL: {url}")
        body = url[len(SCHEME):]
    else:
        body = url

    host_port, _, path = body.partition("/")

    if ":" in host_port:
        host, port_str = host_port.rsplit(":", 1)
        try:
            port = int(port_str)
        except ValueError:
            raise ValueError(f"Invalid port in URL: {url}")
        if port <= 0:
            raise ValueError(f"Invalid port in URL: {url}")
    else:
        host, port = host_port, DEFAULT_PORT

    if not host:
        raise ValueError(f"Missing host in URL: {url}")

    if not path:
        return Location(host=host, port=port)

    kind = ItemKind.from_char(path[0])
    if kind is ItemKind.UNKNOWN:
        # No type prefix, treat the whole path as a menu selector
        return Location(host=host, port=port, selector=path)

    return Location(host=host, port=port, kind=kind, selector=path[1:])
