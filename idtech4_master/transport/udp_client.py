"""UDP transport for talking to a master server.

Wraps a single connected datagram socket: resolve the master hostname, open
the association, send one request and receive one reply. Socket failures are
translated into the query error types, keeping timeouts distinguishable.
"""

import logging
import socket
from typing import Optional, Union

from ..protocol.errors import ReadError, ResolutionError, TransportError, WriteError
from .deadline import Deadline


logger = logging.getLogger(__name__)

# Default connect timeout in seconds
DEFAULT_CONNECT_TIMEOUT = 2.0

# Default receive timeout in seconds
DEFAULT_READ_TIMEOUT = 3.0


class MasterServerSocket:
    """Connected UDP socket to one master server.

    Usage:
        with MasterServerSocket("idnet.ua-corp.com", 27650) as sock:
            sock.connect(timeout=2.0)
            sock.send(request)
            size = sock.receive(buffer, Deadline(3.0).start())
    """

    def __init__(self, host: str, port: int):
        """Initialize the transport.

        Args:
            host: Master server hostname or IP literal.
            port: Master server UDP port.
        """
        self.host = host
        self.port = port
        self._sock: Optional[socket.socket] = None
        self._sockaddr: Optional[tuple] = None
        self._family = socket.AF_INET

    @property
    def address(self) -> Optional[str]:
        """Resolved IP address, or None before resolve()."""
        if self._sockaddr is None:
            return None
        return self._sockaddr[0]

    def resolve(self) -> str:
        """Resolve the hostname and keep the first address.

        Returns:
            The resolved IP address.

        Raises:
            ResolutionError: If the name yields no address.
        """
        try:
            infos = socket.getaddrinfo(self.host, self.port, type=socket.SOCK_DGRAM)
        except (socket.gaierror, UnicodeError) as e:
            raise ResolutionError(self.host, str(e)) from e

        if not infos:
            raise ResolutionError(self.host)

        family, _, _, _, sockaddr = infos[0]
        self._family = family
        self._sockaddr = sockaddr
        logger.debug("Resolved %s to %s", self.host, sockaddr[0])
        return sockaddr[0]

    def connect(self, timeout: float = DEFAULT_CONNECT_TIMEOUT) -> None:
        """Open the UDP association to the resolved address.

        Raises:
            TransportError: On timeout or any other socket failure.
        """
        if self._sockaddr is None:
            self.resolve()

        try:
            self._sock = socket.socket(self._family, socket.SOCK_DGRAM)
            self._sock.settimeout(timeout)
            self._sock.connect(self._sockaddr)
        except TimeoutError as e:
            self.close()
            raise TransportError(f"cannot access the server: {e}", timeout=True) from e
        except OSError as e:
            self.close()
            raise TransportError(f"cannot access the server: {e}") from e

        logger.debug("Connected to %s:%d", self._sockaddr[0], self.port)

    def send(self, data: bytes) -> int:
        """Send one datagram.

        Raises:
            WriteError: On timeout or any other socket failure.
        """
        sock = self._require_socket()
        try:
            sent = sock.send(data)
        except TimeoutError as e:
            raise WriteError(e, timeout=True) from e
        except OSError as e:
            raise WriteError(e) from e

        logger.debug("Sent %d bytes to %s", sent, self.address)
        return sent

    def receive(self, buffer: Union[bytearray, memoryview], deadline: Deadline) -> int:
        """Receive one datagram into buffer before the deadline.

        Returns:
            Number of bytes written to buffer.

        Raises:
            ReadError: On timeout or any other socket failure.
        """
        sock = self._require_socket()
        # A zero timeout would put the socket in non-blocking mode
        remaining = deadline.remaining
        if remaining <= 0:
            raise ReadError("deadline already passed", timeout=True)

        try:
            sock.settimeout(remaining)
            size = sock.recv_into(buffer)
        except TimeoutError as e:
            raise ReadError(e, timeout=True) from e
        except OSError as e:
            raise ReadError(e) from e

        logger.debug("Received %d bytes from %s", size, self.address)
        return size

    def _require_socket(self) -> socket.socket:
        if self._sock is None:
            raise TransportError("socket is not connected")
        return self._sock

    def close(self) -> None:
        """Close the UDP socket."""
        if self._sock:
            try:
                self._sock.close()
            except OSError:
                pass
            self._sock = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
