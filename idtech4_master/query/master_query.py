"""Master server query - one request, one reply.

Coordinates the full exchange:
1. Resolve the master server hostname
2. Build the getServers request
3. Open the UDP association (connect timeout)
4. Send the request
5. Receive one datagram (read deadline)
6. Decode the header and the server list
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..protocol.answer import BytesLike, ResponseDecoder
from ..protocol.errors import (
    EmptyResponse,
    MalformedResponse,
    TruncatedBuffer,
    UnexpectedResponseType,
)
from ..protocol.packet import build_request
from ..protocol.server import ServerEntry
from ..protocol.variants import DEFAULT_MASTER_PORT, ProtocolVariant
from ..transport.deadline import Deadline
from ..transport.udp_client import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    MasterServerSocket,
)


logger = logging.getLogger(__name__)

# Receive buffer capacity in bytes
RESPONSE_BUFFER_SIZE = 8196

SERVERS_RESPONSE = "servers"

SocketFactory = Callable[[str, int], MasterServerSocket]


@dataclass(frozen=True)
class QueryConfig:
    """Settings for a single master server query."""
    host: str = ""
    port: int = DEFAULT_MASTER_PORT
    mod: str = ""
    variant: ProtocolVariant = ProtocolVariant.DOOM3_PREY
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    buffer_size: int = RESPONSE_BUFFER_SIZE

    def __post_init__(self):
        if not self.host:
            object.__setattr__(self, "host", self.variant.default_host)


@dataclass
class QueryResult:
    """Outcome of a successful master server query."""
    host: str
    port: int
    variant: ProtocolVariant
    mod: str = ""
    address: Optional[str] = None
    servers: list[ServerEntry] = field(default_factory=list)
    duration_ms: int = 0

    @property
    def count(self) -> int:
        return len(self.servers)


def decode_server_list(buffer: BytesLike, length: Optional[int] = None) -> list[ServerEntry]:
    """Decode a getServers response.

    Header failures are fatal. Records are read until fewer than 6 bytes
    remain; the list has no count field, so running out of data is its end.

    Args:
        buffer: Received bytes (may be larger than the datagram).
        length: Number of valid bytes in buffer. Default: len(buffer).

    Returns:
        Server entries in the order they appear in the response.

    Raises:
        MalformedResponse: If the header short cannot be read.
        UnexpectedResponseType: If the header string is missing or not "servers".
    """
    answer = ResponseDecoder(buffer, length)

    try:
        answer.read_short()
    except TruncatedBuffer as e:
        raise MalformedResponse(e) from e

    try:
        response_type = answer.read_string()
    except TruncatedBuffer as e:
        raise UnexpectedResponseType(None, e) from e
    if response_type != SERVERS_RESPONSE:
        raise UnexpectedResponseType(response_type)

    servers = []
    while True:
        try:
            servers.append(answer.read_server())
        except TruncatedBuffer:
            break

    if answer.remaining:
        logger.debug("Dropped %d trailing bytes of a partial record", answer.remaining)
    logger.debug("Decoded %d server records", len(servers))
    return servers


class MasterServerQuery:
    """Queries one master server for its list of game servers."""

    def __init__(
        self,
        config: QueryConfig,
        socket_factory: Optional[SocketFactory] = None,
    ):
        """Initialize the query.

        Args:
            config: Query settings.
            socket_factory: Callable(host, port) returning the transport.
                Default: MasterServerSocket.
        """
        self.config = config
        self.socket_factory = socket_factory or MasterServerSocket

    def execute(self) -> QueryResult:
        """Run the exchange.

        Returns:
            QueryResult with the decoded server list.

        Raises:
            MasterQueryError: Any resolution, transport or header failure.
                No partial result is returned.
        """
        config = self.config
        start_time = time.monotonic()
        result = QueryResult(
            host=config.host,
            port=config.port,
            variant=config.variant,
            mod=config.mod,
        )

        with self.socket_factory(config.host, config.port) as sock:
            result.address = sock.resolve()

            request = build_request(config.variant, config.mod)
            logger.debug(
                "Querying %s (%s:%d) protocol=%s mod=%r",
                config.host, result.address, config.port, config.variant.label, config.mod,
            )

            sock.connect(timeout=config.connect_timeout)
            sock.send(request)

            buffer = bytearray(config.buffer_size)
            size = sock.receive(buffer, Deadline(config.read_timeout).start())

        if size <= 0:
            raise EmptyResponse()

        result.servers = decode_server_list(buffer, size)
        result.duration_ms = int((time.monotonic() - start_time) * 1000)
        return result


def query_master_server(
    config: QueryConfig,
    socket_factory: Optional[SocketFactory] = None,
) -> list[ServerEntry]:
    """Query a master server and return its server list."""
    return MasterServerQuery(config, socket_factory).execute().servers
