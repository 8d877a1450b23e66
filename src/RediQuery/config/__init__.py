from __future__ import annotations

"""Public configuration API for RediQuery."""

from RediQuery.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
    parse_yaml,
)
from RediQuery.config.connection import ConnectionConfig
from RediQuery.config.runtime import RuntimeConfig
from RediQuery.config.search import SearchConfig

__all__ = [
    "AppConfig",
    "ConnectionConfig",
    "RuntimeConfig",
    "SearchConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
    "parse_yaml",
]
