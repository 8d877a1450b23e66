"""Redis transport.

Sends ``FT.*`` commands through redis-py. Responsible only for issuing
commands and surfacing engine errors; building arguments and parsing replies
are handled elsewhere.
"""

from __future__ import annotations

from typing import Any, Sequence

import redis
from redis.exceptions import ResponseError

from RediQuery.config import ConnectionConfig
from RediQuery.core.errors import ProtocolError
from RediQuery.utils.log import log


def _command_name(tokens: Sequence[Any]) -> str | None:
    return str(tokens[0]) if tokens else None


class RedisTransport:
    """Low-level command transport over a `redis.Redis` client.

    Replies are decoded to ``str``. No retries are performed: connection and
    timeout errors from redis-py propagate unchanged.
    """

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> RedisTransport:
        """Build a transport with a new redis-py client.

        Args:
            config: Connection settings.

        Returns:
            Transport bound to a lazily connecting client.
        """
        client = redis.Redis(
            host=config.host,
            port=config.port,
            db=config.db,
            password=config.password,
            socket_timeout=config.socket_timeout,
            decode_responses=True,
        )
        return cls(client)

    def close(self) -> None:
        """Close the client and release pooled connections."""
        self._client.close()

    def __enter__(self) -> RedisTransport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def execute(self, tokens: Sequence[str]) -> Any:
        """Execute one command.

        Args:
            tokens: Command name followed by its arguments.

        Returns:
            Raw reply from the server.

        Raises:
            ProtocolError: If the engine returned an error reply.
        """
        command = _command_name(tokens)
        log.debug("redis execute: command=%s tokens=%d", command, len(tokens))
        try:
            return self._client.execute_command(*tokens)
        except ResponseError as e:
            log.warning("redis error reply: command=%s error=%s", command, e)
            raise ProtocolError(str(e), command=command) from e

    def execute_many(self, commands: Sequence[Sequence[str]]) -> list[Any]:
        """Execute commands inside one MULTI/EXEC transaction.

        Engine errors do not abort the batch: each failing command's slot in
        the result holds a `ProtocolError`.

        Args:
            commands: Token lists, one per command.

        Returns:
            Replies in command order.
        """
        if not commands:
            return []
        log.debug("redis pipeline: commands=%d", len(commands))
        pipe = self._client.pipeline(transaction=True)
        for tokens in commands:
            pipe.execute_command(*tokens)
        replies = pipe.execute(raise_on_error=False)

        results: list[Any] = []
        for tokens, reply in zip(commands, replies):
            if isinstance(reply, ResponseError):
                command = _command_name(tokens)
                log.warning("redis error reply in pipeline: command=%s error=%s", command, reply)
                reply = ProtocolError(str(reply), command=command)
            results.append(reply)
        return results
