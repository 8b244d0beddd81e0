"""Error conditions reported by the Gopher browser."""


class GopherError(Exception):
    """Base class for all browser errors."""

    pass


class TransportError(GopherError):
    """A connection or request failed below the protocol layer."""

    pass


class ResolutionError(TransportError):
    """The host name could not be resolved."""

    pass


class SocketError(TransportError):
    """A local socket could not be created."""

    pass


class ConnectError(TransportError):
    """The connection attempt failed or timed out."""

    pass


class SendError(TransportError):
    """The request selector could not be written."""

    pass


class ReceiveError(TransportError):
    """Reading the response failed or timed out."""

    pass


class EmptyResponse(GopherError):
    """A fetch produced no bytes."""

    pass


class UnsupportedContentError(GopherError):
    """A binary item was selected for display."""

    pass


class NoHistoryError(GopherError):
    """Back navigation was requested with an empty history."""

    pass
