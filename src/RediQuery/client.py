"""RediSearch command client.

Each method assembles one ``FT.*`` command from its fixed arguments and the
compiled options, runs it through the transport and reshapes the reply.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from RediQuery.core import parser
from RediQuery.core.errors import MalformedReply, ProtocolError, RediQueryError
from RediQuery.core.models import Record
from RediQuery.core.options import OperationKind, build_args
from RediQuery.transport.base import Transport
from RediQuery.utils.log import log

DEFAULT_SCORE = "1.0"

Document = tuple[str, Sequence[str]]
"""``(id, [field, value, ...])`` pair used by `SearchClient.add_multi`."""


def _is_ok(reply: Any) -> bool:
    return reply in ("OK", b"OK", True)


def _expect_ok(reply: Any, command: str) -> None:
    if not _is_ok(reply):
        raise MalformedReply(f"{command} returned {reply!r}, expected OK")


@dataclass(slots=True)
class SearchClient:
    """Client for the RediSearch ``FT.*`` command family.

    Engine error replies raise `ProtocolError` with the engine's message
    unchanged. Options are passed as keyword arguments named after the
    protocol option in lower case, e.g. ``withscores=True`` or
    ``limit=["0", "10"]``. Options the command does not know are ignored.
    """

    transport: Transport
    default_score: str = DEFAULT_SCORE

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> SearchClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _command(self, tokens: list[Any]) -> Any:
        reply = self.transport.execute(tokens)
        log.debug("%s reply received: type=%s", tokens[0], type(reply).__name__)
        return reply

    def _score(self, score: Any) -> str:
        return self.default_score if score is None else str(score)

    # --- Index management ---

    def create(self, index: str, schema: Sequence[str], **opts: Any) -> None:
        """Create an index with the given schema.

        Args:
            index: Index name.
            schema: Flat field definitions, e.g. ``["title", "TEXT", "WEIGHT", "5.0"]``.
            **opts: CREATE options (``nooffsets``, ``nofreqs``, ``nohl``,
                ``nofields``, ``stopwords``).

        Raises:
            ProtocolError: E.g. when the index already exists.
        """
        tokens = ["FT.CREATE", index, *build_args(OperationKind.CREATE, opts), "SCHEMA", *schema]
        _expect_ok(self._command(tokens), "FT.CREATE")

    def drop(self, index: str) -> None:
        """Delete the index and all documents associated with it."""
        _expect_ok(self._command(["FT.DROP", index]), "FT.DROP")

    def exists(self, index: str) -> bool:
        """Return True if the index exists."""
        try:
            data = self.info(index)
        except ProtocolError:
            return False
        return data.get("index_name") == str(index)

    def info(self, index: str) -> Record:
        """Return information and statistics on the index."""
        return parser.info(self._command(["FT.INFO", index]))

    # --- Documents ---

    def _add_tokens(
        self,
        index: str,
        doc_id: str,
        fields: Sequence[str],
        score: str | float | None,
        opts: dict[str, Any],
    ) -> list[Any]:
        return [
            "FT.ADD", index, doc_id, self._score(score),
            *build_args(OperationKind.ADD, opts),
            "FIELDS", *fields,
        ]

    def add(
        self,
        index: str,
        doc_id: str,
        fields: Sequence[str],
        score: str | float | None = None,
        **opts: Any,
    ) -> None:
        """Add a document to the index.

        Args:
            index: Index name.
            doc_id: Document id.
            fields: Flat ``[field, value, ...]`` list.
            score: Document score; defaults to `default_score`.
            **opts: ADD options (``nosave``, ``replace``, ``partial``, ``language``).

        Raises:
            ProtocolError: E.g. when the document already exists.
        """
        _expect_ok(self._command(self._add_tokens(index, doc_id, fields, score, opts)), "FT.ADD")

    def add_multi(
        self,
        index: str,
        docs: Iterable[Document],
        score: str | float | None = None,
        **opts: Any,
    ) -> list[RediQueryError | None]:
        """Add several documents in one MULTI/EXEC transaction.

        Returns:
            One entry per document: None on success, the `ProtocolError` the
            engine returned for that document, or a `MalformedReply` when its
            status was not ``OK``.
        """
        commands = [self._add_tokens(index, doc_id, fields, score, opts) for doc_id, fields in docs]
        results: list[RediQueryError | None] = []
        for reply in self.transport.execute_many(commands):
            if isinstance(reply, ProtocolError):
                results.append(reply)
            elif _is_ok(reply):
                results.append(None)
            else:
                results.append(MalformedReply(f"FT.ADD returned {reply!r}, expected OK"))
        log.debug("FT.ADD batch: docs=%d failed=%d", len(results), sum(r is not None for r in results))
        return results

    def add_hash(self, index: str, doc_id: str, score: str | float | None = None, **opts: Any) -> None:
        """Index an existing Redis hash as a document.

        Raises:
            ProtocolError: E.g. when the hash cannot be loaded.
        """
        tokens = ["FT.ADDHASH", index, doc_id, self._score(score), *build_args(OperationKind.ADD, opts)]
        _expect_ok(self._command(tokens), "FT.ADDHASH")

    def get(self, index: str, doc_id: str) -> Record | None:
        """Return the full contents of a document, or None if it does not exist."""
        return parser.member(self._command(["FT.GET", index, doc_id]), doc_id)

    def mget(self, index: str, doc_ids: Sequence[str]) -> list[Record]:
        """Return the contents of the documents that exist among ``doc_ids``."""
        doc_ids = list(doc_ids)
        return parser.mget(self._command(["FT.MGET", index, *doc_ids]), doc_ids)

    def delete(self, index: str, doc_id: str) -> int:
        """Delete a document and its hash. Returns 1 if removed, otherwise 0."""
        return self._command(["FT.DEL", index, doc_id, "DD"])

    # --- Queries ---

    def search(self, index: str, query: str, **opts: Any) -> list[Record]:
        """Search the index.

        Args:
            index: Index name.
            query: Query string, passed through unchanged.
            **opts: SEARCH options, e.g. ``nocontent=True``,
                ``withscores=True``, ``limit=["0", "10"]``.

        Returns:
            One record per hit. Records contain ``id`` and, depending on the
            options, ``score`` and the document fields.
        """
        tokens = ["FT.SEARCH", index, query, *build_args(OperationKind.SEARCH, opts)]
        return parser.search(self._command(tokens), opts)

    def aggregate(self, index: str, query: str, **opts: Any) -> Any:
        """Run an aggregation query and return the raw reply."""
        tokens = ["FT.AGGREGATE", index, query, *build_args(OperationKind.AGGREGATE, opts)]
        return self._command(tokens)

    def explain(self, index: str, query: str) -> str:
        """Return the execution plan for a query."""
        return self._command(["FT.EXPLAIN", index, query])

    def tag_vals(self, index: str, field: str) -> list[str]:
        """Return the distinct tags indexed in a tag field."""
        return self._command(["FT.TAGVALS", index, field])

    # --- Suggestions ---

    def add_suggestion(self, key: str, string: str, score: str | float | None = None, **opts: Any) -> int:
        """Add a string to an auto-complete dictionary. Returns the dictionary size."""
        tokens = ["FT.SUGADD", key, string, self._score(score), *build_args(OperationKind.SUGADD, opts)]
        return self._command(tokens)

    def get_suggestion(self, key: str, prefix: str, **opts: Any) -> list[Record]:
        """Return completion suggestions for a prefix.

        Each suggestion is ``{"string": ...}``, plus ``score`` / ``payload``
        when ``withscores`` / ``withpayloads`` are set.
        """
        tokens = ["FT.SUGGET", key, prefix, *build_args(OperationKind.SUGGET, opts)]
        return parser.suggestions(self._command(tokens), opts)

    def delete_suggestion(self, key: str, string: str) -> int:
        """Remove a string from a suggestion dictionary. Returns 1 if removed, otherwise 0."""
        return self._command(["FT.SUGDEL", key, string])

    def suggestion_length(self, key: str) -> int:
        """Return the size of a suggestion dictionary."""
        return self._command(["FT.SUGLEN", key])
