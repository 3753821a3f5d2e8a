"""CLI entry point for the idTech4 master server query tool.

Usage:
    idtech4-master [--ip HOST] [--port PORT] [--mod MOD] [--protocol 0|1|2]
    python -m idtech4_master [options]

Every option can also be set through an IDTECH4_MASTER_<OPTION> environment
variable, e.g. IDTECH4_MASTER_PROTOCOL=1.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config.loader import build_query_config, load_config_file
from .protocol.errors import MasterQueryError
from .query.master_query import MasterServerQuery
from .reporting.console import ConsoleReporter
from .reporting.json_reporter import JsonReporter


ENVVAR_PREFIX = "IDTECH4_MASTER"

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, keeping stdout for the server list."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--ip", "--host", "host", default=None,
              help="Address of a custom idTech4 master server. "
                   "Default: idnet.ua-corp.com, or q4master.idsoftware.com for Quake 4.")
@click.option("--port", type=click.IntRange(1, 65535), default=None,
              help="Port of the master server. Default: 27650.")
@click.option("--mod", default=None,
              help="Only list servers running this mod.")
@click.option("--protocol", type=int, default=None,
              help="Protocol to query with (0: Doom 3 & Prey, 1: Quake 4, 2: dhewm3). "
                   "Default: 0.")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="YAML file with default settings.")
@click.option("--connect-timeout", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Seconds to wait for the UDP association. Default: 2.")
@click.option("--timeout", "read_timeout", type=click.FloatRange(min=0, min_open=True),
              default=None, help="Seconds to wait for the reply. Default: 3.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.option("--save-report", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Also write a JSON report to this file.")
@click.option("-v", "--verbose", is_flag=True, help="Log protocol details to stderr.")
@click.version_option(__version__, prog_name="idtech4-master")
def cli(
    host: Optional[str],
    port: Optional[int],
    mod: Optional[str],
    protocol: Optional[int],
    config_path: Optional[Path],
    connect_timeout: Optional[float],
    read_timeout: Optional[float],
    as_json: bool,
    save_report: Optional[Path],
    verbose: bool,
):
    """Query an idTech4 master server for its list of game servers."""
    configure_logging(verbose)

    file_settings = None
    if config_path is not None:
        try:
            file_settings = load_config_file(config_path)
        except (FileNotFoundError, ValueError) as e:
            raise click.BadParameter(str(e), param_hint="--config") from e

    loaded = build_query_config(
        file_settings,
        host=host,
        port=port,
        mod=mod,
        protocol=protocol,
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
    )
    config = loaded.query

    console = ConsoleReporter()
    json_reporter = JsonReporter()

    if not as_json:
        console.print_banner(config, protocol_coerced=loaded.protocol_coerced)

    start_time = time.monotonic()
    result = None
    error = None
    try:
        result = MasterServerQuery(config).execute()
    except MasterQueryError as e:
        logger.debug("Query failed", exc_info=True)
        error = str(e)

    if as_json or save_report:
        duration_ms = int((time.monotonic() - start_time) * 1000)
        report = json_reporter.generate(config, result, error=error, duration_ms=duration_ms)
        if as_json:
            click.echo(json_reporter.to_json_string(report))
        if save_report:
            saved_path = json_reporter.save(report, save_report)
            logger.info("Report saved: %s", saved_path)

    if error is not None:
        if not as_json:
            console.print_error(error)
        sys.exit(1)

    if not as_json:
        console.print_result(result)


def main():
    """Main CLI entry point."""
    cli(auto_envvar_prefix=ENVVAR_PREFIX)


if __name__ == "__main__":
    main()
