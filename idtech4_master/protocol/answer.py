"""Cursor over a master server response datagram.

Response layout (multi-byte integers little-endian):

    header:uint16 | "servers" 00 | { addr[4] port:uint16 }*
"""

import struct
from ipaddress import IPv4Address
from typing import Optional, Union

from .errors import TruncatedBuffer
from .server import SERVER_RECORD_SIZE, ServerEntry


_SHORT = struct.Struct("<H")
_RECORD = struct.Struct("<4sH")

BytesLike = Union[bytes, bytearray, memoryview]


class ResponseDecoder:
    """Forward-only reader over the valid part of a receive buffer.

    The buffer may be larger than the datagram that was received; only the
    first ``length`` bytes are readable. A read either consumes exactly the
    bytes it decodes or raises TruncatedBuffer and leaves the position as it
    was.
    """

    def __init__(self, buffer: BytesLike, length: Optional[int] = None):
        """Initialize the decoder.

        Args:
            buffer: Receive buffer.
            length: Number of valid bytes at the start of buffer.
                Default: the whole buffer.

        Raises:
            ValueError: If length is negative or larger than the buffer.
        """
        self._buffer = memoryview(buffer).cast("B")
        if length is None:
            length = len(self._buffer)
        if not 0 <= length <= len(self._buffer):
            raise ValueError(
                f"length {length} out of range for a {len(self._buffer)}-byte buffer"
            )
        self._length = length
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def length(self) -> int:
        return self._length

    @property
    def remaining(self) -> int:
        """Number of unread valid bytes."""
        return self._length - self._position

    def _take(self, size: int) -> memoryview:
        if self.remaining < size:
            raise TruncatedBuffer(self._position, size, self._length)
        start = self._position
        self._position += size
        return self._buffer[start:self._position]

    def read_byte(self) -> int:
        return self._take(1)[0]

    def read_short(self) -> int:
        """Read an unsigned 16-bit little-endian integer."""
        return _SHORT.unpack(self._take(2))[0]

    def read_string(self) -> str:
        """Read a NUL-terminated string.

        Any byte value of 0 or 255 ends the string; the terminator is consumed
        but not returned. '%' is replaced with '.'.

        Raises:
            TruncatedBuffer: If the buffer ends before a terminator. The
                position is not moved in that case.
        """
        chars = []
        index = self._position
        while True:
            if index >= self._length:
                raise TruncatedBuffer(self._position, index - self._position + 1, self._length)
            c = self._buffer[index]
            index += 1
            if c <= 0 or c >= 255:
                break
            if c == 0x25:  # '%'
                c = 0x2E  # '.'
            chars.append(chr(c))
        self._position = index
        return "".join(chars)

    def read_address(self) -> IPv4Address:
        return IPv4Address(self._take(4).tobytes())

    def read_server(self) -> ServerEntry:
        """Read one 6-byte address record."""
        addr, port = _RECORD.unpack(self._take(SERVER_RECORD_SIZE))
        return ServerEntry(ip=IPv4Address(addr), port=port)
