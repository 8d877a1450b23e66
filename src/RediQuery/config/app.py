from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from RediQuery.config.connection import ConnectionConfig, check_connection, load_connection
from RediQuery.config.runtime import RuntimeConfig, check_runtime, load_runtime
from RediQuery.config.search import SearchConfig, check_search, load_search


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    redis: ConnectionConfig = field(default_factory=ConnectionConfig)
    search: SearchConfig = field(default_factory=SearchConfig)


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse a normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    redis = load_connection(raw)
    search = load_search(raw)

    check_runtime(runtime)
    check_connection(redis)
    check_search(search)

    return AppConfig(runtime=runtime, redis=redis, search=search)


def load_config(path: Path) -> AppConfig:
    """Load a YAML config file without default merge.

    A missing file yields the built-in defaults.
    """
    if not path.exists():
        return AppConfig()
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(
    config_path: Path,
    default_path: Path = Path("config/default.yml"),
) -> AppConfig:
    """Load config by deep-merging ``config_path`` over ``default_path``."""
    base = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path == default_path:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
