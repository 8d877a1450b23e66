"""RediSearch option compiler.

Compiles a per-call options mapping into the flat, positional token list that
an ``FT.*`` command expects after its fixed arguments.

Rules
- Flags are boolean options. A truthy flag emits its upper-cased name once;
  a missing or falsy flag emits nothing.
- Params are list options. A present param emits its upper-cased name followed
  by every value, in the order the caller supplied them.
- Output is always flags first, then params, each in the declared order below.
  The iteration order of the caller's mapping never affects the result.
- Keys that are not declared for an operation are ignored.

Example
    build_args(OperationKind.SEARCH, {"limit": ["0", "10"], "withscores": True})
    -> ["WITHSCORES", "LIMIT", "0", "10"]
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Final, Iterable, Mapping, Sequence

from RediQuery.core.errors import InvalidOperation


class OperationKind(Enum):
    """Commands whose trailing options are compiled by `build_args`."""

    CREATE = "create"
    ADD = "add"
    SEARCH = "search"
    AGGREGATE = "aggregate"
    SUGADD = "sugadd"
    SUGGET = "sugget"


FLAGS: Final[Mapping[OperationKind, tuple[str, ...]]] = MappingProxyType({
    OperationKind.CREATE: ("nooffsets", "nofreqs", "nohl", "nofields"),
    OperationKind.ADD: ("nosave", "replace", "partial"),
    OperationKind.SEARCH: ("nocontent", "inorder", "nostopwords", "withscores", "verbatim"),
    OperationKind.AGGREGATE: (),
    OperationKind.SUGADD: ("incr",),
    OperationKind.SUGGET: ("withscores", "withpayloads", "fuzzy"),
})

PARAMS: Final[Mapping[OperationKind, tuple[str, ...]]] = MappingProxyType({
    OperationKind.CREATE: ("stopwords",),
    OperationKind.ADD: ("language",),
    OperationKind.SEARCH: (
        "return", "limit", "infields", "inkeys", "slop", "filter",
        "geofilter", "language", "expander", "scorer", "sortby",
    ),
    OperationKind.AGGREGATE: ("groupby", "sortby", "apply", "limit"),
    OperationKind.SUGADD: ("payload",),
    OperationKind.SUGGET: ("max",),
})


def _resolve_kind(kind: Any) -> OperationKind:
    if isinstance(kind, OperationKind):
        return kind
    raise InvalidOperation(f"Unsupported operation kind: {kind!r}")


def _keyify(name: str) -> str:
    return name.upper()


def _token(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)


def _values(value: Any) -> list[str]:
    """Normalize a param value into a list of string tokens.

    Strings and bytes are single tokens, never split into characters.
    """
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Iterable):
        return [_token(value)]
    return [_token(v) for v in value]


def option_names(kind: OperationKind) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Return the declared (flags, params) names for an operation.

    Raises:
        InvalidOperation: If ``kind`` is not an `OperationKind`.
    """
    kind = _resolve_kind(kind)
    return FLAGS[kind], PARAMS[kind]


def build_args(kind: OperationKind, options: Mapping[str, Any] | None = None) -> list[str]:
    """Compile options into protocol tokens for ``kind``.

    Args:
        kind: Operation whose flag/param table applies.
        options: Option name -> value. Flags take booleans, params take a
            sequence of tokens (a single scalar is treated as one token).

    Returns:
        Flag tokens followed by param runs, in declared order.

    Raises:
        InvalidOperation: If ``kind`` is not an `OperationKind`.
    """
    flags, params = option_names(kind)
    options = options or {}

    tokens: list[str] = [_keyify(name) for name in flags if options.get(name)]
    for name in params:
        if name in options:
            tokens.append(_keyify(name))
            tokens.extend(_values(options[name]))
    return tokens


def parse_args(kind: OperationKind, tokens: Sequence[str]) -> dict[str, Any]:
    """Recover the options mapping from tokens produced by `build_args`.

    Flags come back as ``True`` and params as lists of value tokens. A param's
    values run until the next declared param name, so a value spelled exactly
    like a declared param name (case-insensitive) cannot be recovered.

    Args:
        kind: Operation the tokens were built for.
        tokens: Token list, without the command's fixed leading arguments.

    Returns:
        Mapping of lower-case option names to values.

    Raises:
        InvalidOperation: If ``kind`` is not an `OperationKind`.
        ValueError: If the tokens do not follow the flags-then-params layout.
    """
    flags, params = option_names(kind)
    flag_set = {_keyify(name) for name in flags}
    param_set = {_keyify(name) for name in params}

    options: dict[str, Any] = {}
    current: list[str] | None = None
    for token in tokens:
        upper = str(token).upper()
        if current is None and upper in flag_set:
            options[upper.lower()] = True
        elif upper in param_set:
            current = []
            options[upper.lower()] = current
        elif current is not None:
            current.append(token)
        else:
            raise ValueError(f"Unexpected token for {kind.value}: {token!r}")
    return options
