"""Abstract interfaces for the Gopher browser."""

from .content_transport import ContentTransport, FetchResult

__all__ = ["ContentTransport", "FetchResult"]
