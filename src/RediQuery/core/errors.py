"""Error types raised by the RediQuery client."""

from __future__ import annotations


class RediQueryError(Exception):
    """Base class for all errors raised by RediQuery."""


class InvalidOperation(RediQueryError, ValueError):
    """An operation kind outside the known set was passed to the builder."""


class MalformedReply(RediQueryError, ValueError):
    """A reply does not have the shape the parser expects."""


class ProtocolError(RediQueryError, RuntimeError):
    """The search engine rejected a command.

    Attributes:
        message: Raw error text returned by the engine, unmodified.
        command: Command name that produced the error (e.g. ``FT.ADD``), if known.
    """

    def __init__(self, message: str, *, command: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.command = command

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProtocolError):
            return NotImplemented
        return (self.message, self.command) == (other.message, other.command)

    def __hash__(self) -> int:
        return hash((self.message, self.command))
