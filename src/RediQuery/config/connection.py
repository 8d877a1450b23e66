"""Redis connection configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from RediQuery.config.common import (
    expect_float,
    expect_int,
    expect_str,
    get_section,
    get_value,
)


@dataclass(frozen=True, slots=True)
class ConnectionConfig:
    """Store validated settings for the Redis connection.

    The password itself never appears in the YAML file; ``password_env`` names
    the environment variable it is read from.
    """

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password_env: str = "REDIS_PASSWORD"
    password: str | None = None
    socket_timeout: float | None = None


def load_connection(raw: Mapping[str, Any]) -> ConnectionConfig:
    """Load the ``redis`` section; every key is optional.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed connection configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "redis", required=False)
    defaults = ConnectionConfig()
    password_env = expect_str(
        get_value(section, "redis.password_env", defaults.password_env), "redis.password_env"
    )
    timeout = get_value(section, "redis.socket_timeout", None)
    return ConnectionConfig(
        host=expect_str(get_value(section, "redis.host", defaults.host), "redis.host"),
        port=expect_int(get_value(section, "redis.port", defaults.port), "redis.port"),
        db=expect_int(get_value(section, "redis.db", defaults.db), "redis.db"),
        password_env=password_env,
        password=_load_password_from_env(password_env),
        socket_timeout=None if timeout is None else expect_float(timeout, "redis.socket_timeout"),
    )


def check_connection(config: ConnectionConfig) -> None:
    """Validate connection constraints.

    Raises:
        ValueError: If values are out of range.
    """
    if not config.host.strip():
        raise ValueError("redis.host must not be empty")
    if not 0 < config.port < 65536:
        raise ValueError("redis.port must be between 1 and 65535")
    if config.db < 0:
        raise ValueError("redis.db must be >= 0")
    if config.socket_timeout is not None and config.socket_timeout <= 0:
        raise ValueError("redis.socket_timeout must be positive")


def _load_password_from_env(password_env: str) -> str | None:
    """Read the password from the environment; empty means no auth."""
    if not password_env.strip():
        return None
    return os.getenv(password_env, "").strip() or None
