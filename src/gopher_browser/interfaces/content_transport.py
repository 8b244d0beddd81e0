"""Abstract interface for fetching Gopher resources."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class FetchResult:
    """Raw bytes returned by a fetch.

    Attributes:
        data: Response bytes, empty if the fetch failed.
        truncated: True if reading stopped at the size cap.
    """

    data: bytes = b""
    truncated: bool = False


class ContentTransport(ABC):
    """Abstract interface for a selector/response exchange with a server."""

    @abstractmethod
    def fetch_response(self, host: str, selector: str, port: int) -> FetchResult:
        """Send a selector and read the whole response.

        Args:
            host: Server host name or address.
            selector: Selector to request (empty for the root menu).
            port: Server port.

        Returns:
            FetchResult with empty data on any failure.
        """
        pass

    def fetch(self, host: str, selector: str, port: int) -> bytes:
        """Fetch a resource and return only its bytes."""
        return self.fetch_response(host, selector, port).data
