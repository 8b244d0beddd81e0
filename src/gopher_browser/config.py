"""Configuration handling for the Gopher browser."""

from dataclasses import dataclass, field
from pathlib import Path
import yaml


@dataclass(frozen=True)
class Bookmark:
    """A named Gopher address."""

    name: str
    host: str
    selector: str = "/"
    port: int = 70


DEFAULT_BOOKMARKS = (
    Bookmark("Floodgap Gopher", "gopher.floodgap.com", "/"),
    Bookmark("SDF Public Access", "sdf.org", "/"),
    Bookmark("Gopherpedia", "gopherpedia.com", "/"),
    Bookmark("Veronica-2 Search", "gopher.floodgap.com", "/v2/vs"),
)


@dataclass
class Config:
    """Configuration settings for the Gopher browser.

    Attributes:
        start_host: Host loaded at startup and by the home command.
        start_selector: Selector of the start page.
        start_port: Port of the start page.
        timeout_seconds: Socket timeout for connect, send and receive.
        max_response_size: Maximum response bytes kept per fetch.
        max_history: Maximum back-history depth.
        bookmarks: Named addresses offered by the bookmarks command.
    """

    start_host: str = "gopher.floodgap.com"
    start_selector: str = "/"
    start_port: int = 70
    timeout_seconds: float = 15.0
    max_response_size: int = 512 * 1024
    max_history: int = 50
    bookmarks: list[Bookmark] = field(default_factory=lambda: list(DEFAULT_BOOKMARKS))


def _load_bookmarks(entries: list[dict] | None) -> list[Bookmark]:
    if entries is None:
        return list(DEFAULT_BOOKMARKS)

    bookmarks = []
    for entry in entries:
        if "host" not in entry:
            raise ValueError(f"Bookmark is missing a host: {entry}")
        bookmarks.append(
            Bookmark(
                name=str(entry.get("name", entry["host"])),
                host=entry["host"],
                selector=str(entry.get("selector", "/")),
                port=int(entry.get("port", 70)),
            )
        )
    return bookmarks


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If a bookmark entry has no host.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # Extract sections
    start = data.get("start") or {}
    network = data.get("network") or {}
    history = data.get("history") or {}

    return Config(
        start_host=start.get("host", Config.start_host),
        start_selector=start.get("selector", Config.start_selector),
        start_port=start.get("port", Config.start_port),
        timeout_seconds=network.get("timeout_seconds", Config.timeout_seconds),
        max_response_size=network.get("max_response_size", Config.max_response_size),
        max_history=history.get("max_entries", Config.max_history),
        bookmarks=_load_bookmarks(data.get("bookmarks")),
    )
