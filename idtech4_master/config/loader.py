"""Configuration loading for master server queries.

Settings come from three layers, lowest precedence first: built-in defaults,
an optional YAML file, and command line options. The merged settings are
turned into one immutable QueryConfig.

Example file:

    host: idnet.ua-corp.com
    port: 27650
    protocol: 2
    mod: base
    read_timeout: 5
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..protocol.variants import DEFAULT_MASTER_PORT, ProtocolVariant
from ..query.master_query import QueryConfig
from ..transport.udp_client import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT


logger = logging.getLogger(__name__)

_FIELD_TYPES = {
    "host": (str,),
    "port": (int,),
    "mod": (str,),
    "protocol": (int,),
    "connect_timeout": (int, float),
    "read_timeout": (int, float),
}

CONFIG_KEYS = frozenset(_FIELD_TYPES)


@dataclass(frozen=True)
class LoadedConfig:
    """A QueryConfig plus notes about how it was derived."""
    query: QueryConfig
    protocol_coerced: bool = False
    requested_protocol: Optional[int] = None


def load_config_file(file_path: Union[str, Path]) -> dict[str, Any]:
    """Load settings from a YAML file.

    Args:
        file_path: Path to the YAML file.

    Returns:
        Mapping of validated settings.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the YAML is malformed or holds unknown or mistyped keys.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty config file: {file_path}")

    logger.debug("Loaded config file %s", file_path)
    return parse_config_data(data, source=str(file_path))


def parse_config_data(data: Any, source: str = "<inline>") -> dict[str, Any]:
    """Validate an already loaded settings mapping."""
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data).__name__}")

    unknown = sorted(str(k) for k in data if k not in CONFIG_KEYS)
    if unknown:
        raise ValueError(f"Unknown config keys in {source}: {', '.join(unknown)}")

    settings = {}
    for key, value in data.items():
        if value is None:
            continue
        # bool is an int subclass but never a valid setting
        if isinstance(value, bool) or not isinstance(value, _FIELD_TYPES[key]):
            raise ValueError(
                f"'{key}' has invalid type {type(value).__name__} in {source}"
            )
        settings[key] = value

    port = settings.get("port")
    if port is not None and not 1 <= port <= 65535:
        raise ValueError(f"'port' must be between 1 and 65535 in {source}")

    for key in ("connect_timeout", "read_timeout"):
        if key in settings and settings[key] <= 0:
            raise ValueError(f"'{key}' must be positive in {source}")

    return settings


def build_query_config(
    file_settings: Optional[dict[str, Any]] = None,
    **overrides: Any,
) -> LoadedConfig:
    """Merge file settings and command line overrides into a QueryConfig.

    Overrides set to None are ignored, so unset options fall through to the
    file and then to the defaults. An unknown protocol selector falls back to
    Doom 3 / Prey and is reported through LoadedConfig.protocol_coerced.
    """
    settings = dict(file_settings or {})
    settings.update({k: v for k, v in overrides.items() if v is not None})

    requested = settings.get("protocol", int(ProtocolVariant.DOOM3_PREY))
    variant, coerced = ProtocolVariant.from_selector(requested)
    if coerced:
        logger.info("Unknown protocol %r, reverting to %s", requested, variant.label)

    query = QueryConfig(
        host=settings.get("host", ""),
        port=settings.get("port", DEFAULT_MASTER_PORT),
        mod=settings.get("mod", ""),
        variant=variant,
        connect_timeout=float(settings.get("connect_timeout", DEFAULT_CONNECT_TIMEOUT)),
        read_timeout=float(settings.get("read_timeout", DEFAULT_READ_TIMEOUT)),
    )
    return LoadedConfig(query=query, protocol_coerced=coerced, requested_protocol=requested)
