"""idTech4 protocol variants.

The variants share one wire format and differ only in the version constant
sent with the request and in the master server they register with.
"""

from enum import IntEnum


DOOM3_MASTER_HOST = "idnet.ua-corp.com"
QUAKE4_MASTER_HOST = "q4master.idsoftware.com"

# Default UDP port of idTech4 master servers
DEFAULT_MASTER_PORT = 27650


class ProtocolVariant(IntEnum):
    """Supported protocol dialects, keyed by their command line selector."""
    DOOM3_PREY = 0
    QUAKE4 = 1
    DHEWM3 = 2

    @property
    def challenge(self) -> int:
        """32-bit protocol version sent in the getServers request."""
        return _CHALLENGES[self]

    @property
    def default_host(self) -> str:
        return _DEFAULT_HOSTS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_selector(cls, value: int) -> tuple["ProtocolVariant", bool]:
        """Map a numeric selector to a variant.

        Unknown selectors fall back to DOOM3_PREY instead of failing.

        Returns:
            (variant, coerced) where coerced is True if the fallback was used.
        """
        try:
            return cls(value), False
        except ValueError:
            return cls.DOOM3_PREY, True


_CHALLENGES = {
    ProtocolVariant.DOOM3_PREY: (1 << 16) + 41,
    ProtocolVariant.QUAKE4: 131157,  # 0x00020055
    ProtocolVariant.DHEWM3: (1 << 16) + 42,
}

_DEFAULT_HOSTS = {
    ProtocolVariant.DOOM3_PREY: DOOM3_MASTER_HOST,
    ProtocolVariant.QUAKE4: QUAKE4_MASTER_HOST,
    ProtocolVariant.DHEWM3: DOOM3_MASTER_HOST,
}

_LABELS = {
    ProtocolVariant.DOOM3_PREY: "Doom 3 / Prey",
    ProtocolVariant.QUAKE4: "Quake 4",
    ProtocolVariant.DHEWM3: "DHEWM3",
}
