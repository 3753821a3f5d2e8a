"""Error hierarchy for master server queries.

Every failure a query can end with derives from MasterQueryError, so callers
can catch one type and still tell the kinds apart.
"""

from typing import Optional


class MasterQueryError(Exception):
    """Base class for all master server query failures."""


class ResolutionError(MasterQueryError):
    """The master server hostname did not resolve to any address."""

    def __init__(self, host: str, reason: Optional[str] = None):
        self.host = host
        self.reason = reason
        message = f"Unknown host: {host}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class NetworkError(MasterQueryError):
    """A socket operation failed.

    Attributes:
        timeout: True when the failure was a timeout rather than another cause.
    """

    action = "network"

    def __init__(self, reason: object, timeout: bool = False):
        self.reason = reason
        self.timeout = timeout
        kind = "timeout" if timeout else "error"
        super().__init__(f"{self.action} {kind}: {reason}")


class TransportError(NetworkError):
    """The UDP association to the master server could not be opened."""
    action = "connect"


class WriteError(NetworkError):
    """The request datagram could not be sent."""
    action = "write"


class ReadError(NetworkError):
    """No response datagram could be received."""
    action = "read"


class EmptyResponse(MasterQueryError):
    """The master server answered with a zero-length datagram."""

    def __init__(self):
        super().__init__("server has no data to answer with")


class MalformedResponse(MasterQueryError):
    """The response is too short to hold its leading header short."""

    def __init__(self, reason: object):
        self.reason = reason
        super().__init__(f"malformed response: {reason}")


class UnexpectedResponseType(MasterQueryError):
    """The response header string is not "servers"."""

    def __init__(self, value: Optional[str], reason: Optional[object] = None):
        self.value = value
        self.reason = reason
        if value is None:
            message = f"unknown response: unreadable header ({reason})"
        else:
            message = f"unknown response: {value!r} != 'servers'"
        super().__init__(message)


class TruncatedBuffer(MasterQueryError):
    """A read asked for more bytes than remain in the response buffer."""

    def __init__(self, position: int, requested: int, length: int):
        self.position = position
        self.requested = requested
        self.length = length
        super().__init__(
            f"buffer going too far! (pos: {position + requested}, size: {length})"
        )
