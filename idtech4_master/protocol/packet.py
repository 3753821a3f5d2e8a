"""Outbound packet builder for the idTech4 master server protocol.

Request layout (multi-byte integers little-endian):

    FF FF | "getServers" 00 | protocol:uint32 | mod 00 | 00 00 00
"""

import struct

from .variants import ProtocolVariant


# Connectionless (out-of-band) packet marker
OOB_MARKER = b"\xff\xff"

GET_SERVERS_COMMAND = "getServers"

# Encoding for strings on the wire
WIRE_ENCODING = "utf-8"

_LONG = struct.Struct("<I")


class PacketEncoder:
    """Append-only builder for a single outbound datagram."""

    def __init__(self):
        self._buf = bytearray()

    def write_marker(self) -> None:
        """Write the two-byte connectionless packet marker."""
        self._buf.extend(OOB_MARKER)

    def write_byte(self, value: int) -> None:
        self._buf.append(value)

    def write_long(self, value: int) -> None:
        """Write an unsigned 32-bit little-endian integer."""
        self._buf.extend(_LONG.pack(value))

    def write_string(self, text: str) -> None:
        """Write text followed by a NUL terminator."""
        self._buf.extend(text.encode(WIRE_ENCODING))
        self._buf.append(0)

    def to_bytes(self) -> bytes:
        return bytes(self._buf)

    def __len__(self) -> int:
        return len(self._buf)


def build_request(variant: ProtocolVariant, mod: str = "") -> bytes:
    """Build a getServers request.

    Args:
        variant: Protocol dialect, selects the version constant.
        mod: Mod name filter. Empty string lists servers of every mod.

    Returns:
        The encoded request datagram.
    """
    pkt = PacketEncoder()
    pkt.write_marker()
    pkt.write_string(GET_SERVERS_COMMAND)
    pkt.write_long(variant.challenge)
    pkt.write_string(mod)
    # Reserved filter fields, unused by this client
    pkt.write_byte(0)
    pkt.write_byte(0)
    pkt.write_byte(0)
    return pkt.to_bytes()
