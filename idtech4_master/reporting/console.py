"""Plain text rendering of master server queries."""

from typing import Optional, TextIO

import click

from ..query.master_query import QueryConfig, QueryResult


TOOL_NAME = "iDTech4 MasterServer Query Tool"

_RULE = "=" * 26

COERCED_PROTOCOL_NOTE = "Unknown choice, reverting to Doom3 / Prey."


class ConsoleReporter:
    """Prints settings, the server list and errors as plain text."""

    def __init__(self, file: Optional[TextIO] = None):
        self.file = file

    def _echo(self, message: str = "", err: bool = False) -> None:
        click.echo(message, file=self.file, err=err)

    def print_banner(self, config: QueryConfig, protocol_coerced: bool = False) -> None:
        """Print the settings block shown before the query runs."""
        protocol = config.variant.label
        if protocol_coerced:
            protocol = COERCED_PROTOCOL_NOTE

        self._echo(_RULE)
        self._echo(TOOL_NAME)
        self._echo()
        self._echo("Settings:")
        self._echo(f"- MasterServer Address: {config.host}")
        self._echo(f"- Port: {config.port}")
        self._echo(f"- Protocol: {protocol}")
        if config.mod:
            self._echo(f"- Mod: {config.mod}")
        self._echo(_RULE)

    def print_result(self, result: QueryResult) -> None:
        """Print one IP:Port line per server, then the total."""
        for server in result.servers:
            self._echo(str(server))
        self._echo(f"There are {result.count} servers found.")

    def print_error(self, error: object) -> None:
        self._echo(f"Error: {error}", err=True)
