"""Transport protocol consumed by the search client."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from RediQuery.core.errors import ProtocolError


class Transport(Protocol):
    """Executes raw commands against the search engine.

    Implementations raise `ProtocolError` when the engine replies with an
    error. Connection failures propagate as the implementation's own errors.
    """

    def execute(self, tokens: Sequence[str]) -> Any:
        """Run one command and return its raw reply."""
        raise NotImplementedError

    def execute_many(self, commands: Sequence[Sequence[str]]) -> list[Any | ProtocolError]:
        """Run commands atomically, returning each reply or its `ProtocolError`."""
        raise NotImplementedError

    def close(self) -> None:
        """Release the underlying connection."""
        raise NotImplementedError
