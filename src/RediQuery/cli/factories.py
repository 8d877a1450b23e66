"""Factory functions for CLI component creation.

Centralizes client construction so tests can substitute the transport.
"""

from __future__ import annotations

from RediQuery.client import SearchClient
from RediQuery.config import AppConfig
from RediQuery.transport import create_transport
from RediQuery.utils.log import log


def create_client(config: AppConfig) -> SearchClient:
    """Create a search client bound to the configured Redis server.

    Args:
        config: Application configuration.

    Returns:
        SearchClient using the configured default score.
    """
    log.debug(
        "Connecting to redis: host=%s port=%s db=%s auth=%s",
        config.redis.host,
        config.redis.port,
        config.redis.db,
        config.redis.password is not None,
    )
    return SearchClient(
        transport=create_transport(config.redis),
        default_score=config.search.default_score,
    )
