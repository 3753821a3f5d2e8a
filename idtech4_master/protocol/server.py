"""Server entry decoded from a master server list."""

from dataclasses import dataclass
from ipaddress import IPv4Address
from typing import Any


# Size of one list record: 4 address bytes + 2 port bytes
SERVER_RECORD_SIZE = 6


@dataclass(frozen=True)
class ServerEntry:
    """A game server address announced by the master server."""
    ip: IPv4Address
    port: int

    @property
    def address(self) -> tuple[str, int]:
        """(host, port) tuple usable with the socket module."""
        return str(self.ip), self.port

    def to_dict(self) -> dict[str, Any]:
        return {"ip": str(self.ip), "port": self.port}

    def __str__(self) -> str:
        return f"{self.ip}:{self.port}"
