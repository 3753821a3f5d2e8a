"""Query module - master server exchange."""

from .master_query import (
    RESPONSE_BUFFER_SIZE,
    MasterServerQuery,
    QueryConfig,
    QueryResult,
    decode_server_list,
    query_master_server,
)

__all__ = [
    "RESPONSE_BUFFER_SIZE",
    "MasterServerQuery",
    "QueryConfig",
    "QueryResult",
    "decode_server_list",
    "query_master_server",
]
