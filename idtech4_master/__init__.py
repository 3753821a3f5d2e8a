"""Query client for idTech4 master servers (Doom 3, Prey, Quake 4, dhewm3)."""

__version__ = "0.1.0"

from .protocol import (
    MasterQueryError,
    ProtocolVariant,
    ResponseDecoder,
    ServerEntry,
    build_request,
)
from .query import MasterServerQuery, QueryConfig, QueryResult, query_master_server

__all__ = [
    "__version__",
    "MasterQueryError",
    "ProtocolVariant",
    "ResponseDecoder",
    "ServerEntry",
    "build_request",
    "MasterServerQuery",
    "QueryConfig",
    "QueryResult",
    "query_master_server",
]
