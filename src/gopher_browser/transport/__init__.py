"""Transports for talking to Gopher servers."""

from .socket_transport import SocketTransport

__all__ = ["SocketTransport"]
