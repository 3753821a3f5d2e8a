"""Transport module - UDP communication with master servers."""

from .deadline import Deadline
from .udp_client import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    MasterServerSocket,
)

__all__ = [
    "Deadline",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_READ_TIMEOUT",
    "MasterServerSocket",
]
