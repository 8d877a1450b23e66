"""RediQuery: a RediSearch client.

The core is the option compiler (`RediQuery.core.options`) and the reply
parser (`RediQuery.core.parser`); `SearchClient` wires both to a transport.
"""

from __future__ import annotations

from RediQuery.client import SearchClient
from RediQuery.core.errors import InvalidOperation, MalformedReply, ProtocolError, RediQueryError
from RediQuery.core.options import OperationKind, build_args, parse_args

__all__ = [
    "InvalidOperation",
    "MalformedReply",
    "OperationKind",
    "ProtocolError",
    "RediQueryError",
    "SearchClient",
    "build_args",
    "parse_args",
]

__version__ = "0.1.0"
