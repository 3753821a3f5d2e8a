"""Config module - YAML file and option merging."""

from .loader import (
    CONFIG_KEYS,
    LoadedConfig,
    build_query_config,
    load_config_file,
    parse_config_data,
)

__all__ = [
    "CONFIG_KEYS",
    "LoadedConfig",
    "build_query_config",
    "load_config_file",
    "parse_config_data",
]
