"""Protocol module - idTech4 master server wire format."""

from .answer import ResponseDecoder
from .errors import (
    EmptyResponse,
    MalformedResponse,
    MasterQueryError,
    NetworkError,
    ReadError,
    ResolutionError,
    TransportError,
    TruncatedBuffer,
    UnexpectedResponseType,
    WriteError,
)
from .packet import PacketEncoder, build_request
from .server import SERVER_RECORD_SIZE, ServerEntry
from .variants import DEFAULT_MASTER_PORT, ProtocolVariant

__all__ = [
    "ResponseDecoder",
    "EmptyResponse",
    "MalformedResponse",
    "MasterQueryError",
    "NetworkError",
    "ReadError",
    "ResolutionError",
    "TransportError",
    "TruncatedBuffer",
    "UnexpectedResponseType",
    "WriteError",
    "PacketEncoder",
    "build_request",
    "SERVER_RECORD_SIZE",
    "ServerEntry",
    "DEFAULT_MASTER_PORT",
    "ProtocolVariant",
]
