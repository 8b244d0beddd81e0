"""TCP socket transport for Gopher requests."""

import logging
import socket

from ..errors import (
    ConnectError,
    ReceiveError,
    ResolutionError,
    SendError,
    SocketError,
    TransportError,
)
from ..interfaces import ContentTransport, FetchResult

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0
MAX_RESPONSE_SIZE = 512 * 1024
RECV_SIZE = 4096


class SocketTransport(ContentTransport):
    """Fetches Gopher resources over a plain TCP connection.

    Each fetch opens a new connection, sends the selector once and reads
    until the server closes the stream, the read times out or the size cap
    is exceeded.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        max_response_size: int = MAX_RESPONSE_SIZE,
    ):
        """
        Initialize the transport.

        Args:
            timeout: Seconds allowed for each connect, send and receive call.
            max_response_size: Maximum number of response bytes kept.
        """
        self.timeout = timeout
        self.max_response_size = max_response_size

    def connect(self, host: str, port: int) -> socket.socket:
        """
        Open a stream connection to a server.

        Args:
            host: Server host name or address.
            port: Server port.

        Returns:
            A connected socket with the timeout applied.

        Raises:
            ResolutionError: If the host name cannot be resolved.
            SocketError: If the local socket cannot be created.
            ConnectError: If the connection attempt fails.
        """
        try:
            addresses = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
        except (socket.gaierror, UnicodeError, OverflowError, ValueError) as e:
            raise ResolutionError(f"Cannot resolve {host}:{port}: {e}") from e

        if not addresses:
            raise ResolutionError(f"No addresses found for {host}")

        family, socktype, proto, _, address = addresses[0]

        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as e:
            raise SocketError(f"Failed to create socket: {e}") from e

        sock.settimeout(self.timeout)

        try:
            sock.connect(address)
        except OSError as e:
            sock.close()
            raise ConnectError(f"Connection to {host}:{port} failed: {e}") from e

        logger.debug(f"Connected to {host}:{port}")
        return sock

    def fetch_response(self, host: str, selector: str, port: int) -> FetchResult:
        """
        Send a selector and read the response.

        Args:
            host: Server host name or address.
            selector: Selector to request (empty for the root menu).
            port: Server port.

        Returns:
            FetchResult holding the response bytes, or empty data on failure.
        """
        logger.info(f"Fetching {host}:{port} {selector!r}")

        try:
            sock = self.connect(host, port)
        except TransportError as e:
            logger.warning(str(e))
            return FetchResult()

        try:
            self._send(sock, selector)
            result = self._receive(sock)
        except TransportError as e:
            logger.warning(str(e))
            return FetchResult()
        finally:
            sock.close()

        logger.debug(f"Received {len(result.data)} bytes from {host}:{port}")
        return result

    def _send(self, sock: socket.socket, selector: str) -> None:
        """Write the selector followed by CRLF."""
        request = f"{selector}\r\n".encode("utf-8")
        try:
            sock.sendall(request)
        except OSError as e:
            raise SendError(f"Failed to send request: {e}") from e

    def _receive(self, sock: socket.socket) -> FetchResult:
        """Read until the peer closes, the timeout elapses or the size cap is exceeded."""
        buffer = bytearray()

        while True:
            try:
                chunk = sock.recv(RECV_SIZE)
            except socket.timeout as e:
                if not buffer:
                    raise ReceiveError(f"Failed to read response: {e}") from e
                logger.debug(f"Read timed out after {len(buffer)} bytes")
                break
            except OSError as e:
                raise ReceiveError(f"Failed to read response: {e}") from e

            if not chunk:
                break

            buffer.extend(chunk)

            if len(buffer) > self.max_response_size:
                logger.warning(
                    f"Response too large, truncated at {self.max_response_size} bytes"
                )
                return FetchResult(
                    data=bytes(buffer[: self.max_response_size]), truncated=True
                )

        return FetchResult(data=bytes(buffer))
