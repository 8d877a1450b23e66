"""Command transports for RediQuery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from RediQuery.transport.base import Transport

if TYPE_CHECKING:
    from RediQuery.config import ConnectionConfig


def create_transport(config: ConnectionConfig) -> Transport:
    """Create the Redis transport for the given connection settings."""
    from RediQuery.transport.redis import RedisTransport

    return RedisTransport.from_config(config)


__all__ = ["Transport", "create_transport"]
