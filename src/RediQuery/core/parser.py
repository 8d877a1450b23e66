"""RediSearch reply parser.

Reshapes the flat, loosely typed arrays returned by ``FT.*`` commands into
records (``dict`` of field name -> value with an ``id`` key).

Search replies carry no type markers. The number of elements per hit depends
on the request options (``WITHSCORES`` / ``NOCONTENT``), so `search` needs the
same options mapping the request was built from. Each hit is first classified
into one of the tagged variants in `RediQuery.core.models` and then rendered.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from RediQuery.core.errors import MalformedReply
from RediQuery.core.models import (
    ContentOnly,
    ContentWithScore,
    IdOnly,
    Record,
    ScoreOnly,
    SearchHit,
)


def _is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def pair_fields(fields: Sequence[Any]) -> Record:
    """Pair a flat ``[name, value, name, value, ...]`` sequence into a dict.

    Later duplicate names overwrite earlier ones.

    Args:
        fields: Flat field/value sequence.

    Returns:
        Mapping of field name to value.

    Raises:
        MalformedReply: If ``fields`` is not a list, has an odd length or
            has a name that cannot be used as a key.
    """
    if not _is_list(fields):
        raise MalformedReply(f"Expected a field list, got {type(fields).__name__}")
    if len(fields) % 2:
        raise MalformedReply(f"Field list has odd length {len(fields)}: {list(fields)!r}")
    try:
        return {fields[i]: fields[i + 1] for i in range(0, len(fields), 2)}
    except TypeError as e:
        raise MalformedReply(f"Field list has an unhashable name: {list(fields)!r}") from e


def member(fields: Sequence[Any] | None, doc_id: Any) -> Record | None:
    """Build a document record, or None when the document is missing.

    Args:
        fields: Flat field/value sequence, or None for a missing document.
        doc_id: Document id to store under ``"id"``.

    Returns:
        Record including ``"id"``, or None.
    """
    if fields is None:
        return None
    record = pair_fields(fields)
    record["id"] = doc_id
    return record


def chunk_size(options: Mapping[str, Any] | None) -> int:
    """Return the number of reply elements per search hit for ``options``."""
    options = options or {}
    size = 2
    if options.get("withscores"):
        size += 1
    if options.get("nocontent"):
        size -= 1
    return size


def classify(chunk: Sequence[Any]) -> SearchHit:
    """Classify one search hit by its length and the type of its second element.

    A missing document (``None`` in place of the field list) is classified as
    `IdOnly` or `ScoreOnly` so the hit is still reported.

    Raises:
        MalformedReply: If the chunk matches none of the known shapes.
    """
    if not chunk or _is_list(chunk[0]):
        raise MalformedReply(f"Unexpected search hit shape: {list(chunk)!r}")
    if len(chunk) == 3:
        doc_id, score, fields = chunk
        if _is_list(score) or not (fields is None or _is_list(fields)):
            raise MalformedReply(f"Unexpected search hit shape: {list(chunk)!r}")
        if fields is None:
            return ScoreOnly(id=doc_id, score=score)
        return ContentWithScore(id=doc_id, score=score, fields=fields)
    if len(chunk) == 2:
        doc_id, second = chunk
        if _is_list(second):
            return ContentOnly(id=doc_id, fields=second)
        if second is None:
            return IdOnly(id=doc_id)
        return ScoreOnly(id=doc_id, score=second)
    if len(chunk) == 1:
        return IdOnly(id=chunk[0])
    raise MalformedReply(f"Unexpected search hit shape: {list(chunk)!r}")


def _render_content_with_score(hit: ContentWithScore) -> Record:
    record = pair_fields(hit.fields)
    record["id"] = hit.id
    record["score"] = hit.score
    return record


def _render_content_only(hit: ContentOnly) -> Record:
    return member(hit.fields, hit.id)


def _render_score_only(hit: ScoreOnly) -> Record:
    return {"id": hit.id, "score": hit.score}


def _render_id_only(hit: IdOnly) -> Record:
    return {"id": hit.id}


_RENDERERS: dict[type, Callable[[Any], Record]] = {
    ContentWithScore: _render_content_with_score,
    ContentOnly: _render_content_only,
    ScoreOnly: _render_score_only,
    IdOnly: _render_id_only,
}


def render(hit: SearchHit) -> Record:
    """Convert a classified search hit into a record."""
    return _RENDERERS[type(hit)](hit)


def search(reply: Sequence[Any], options: Mapping[str, Any] | None = None) -> list[Record]:
    """Parse an ``FT.SEARCH`` reply.

    Args:
        reply: Raw reply: total count followed by per-hit elements.
        options: The options the request was built from.

    Returns:
        One record per hit, in reply order. Empty when the engine reports no
        matches.

    Raises:
        MalformedReply: If the reply is not a non-empty list, or the hit
            elements do not divide evenly into chunks.
    """
    if not _is_list(reply) or not reply:
        raise MalformedReply(f"Expected a non-empty search reply, got {reply!r}")
    if list(reply) == [0]:
        return []

    results = list(reply[1:])
    size = chunk_size(options)
    if len(results) % size:
        raise MalformedReply(
            f"Search reply has {len(results)} hit elements, not a multiple of {size}"
        )
    return [render(classify(results[i:i + size])) for i in range(0, len(results), size)]


def info(reply: Sequence[Any]) -> Record:
    """Parse an ``FT.INFO`` reply, pairing the nested ``gc_stats`` list once."""
    data = pair_fields(reply)
    if _is_list(data.get("gc_stats")):
        data["gc_stats"] = pair_fields(data["gc_stats"])
    return data


def mget(reply: Sequence[Any], ids: Sequence[Any]) -> list[Record]:
    """Parse an ``FT.MGET`` reply, dropping documents that do not exist.

    Raises:
        MalformedReply: If the reply length does not match ``ids``.
    """
    if not _is_list(reply) or len(reply) != len(ids):
        raise MalformedReply(f"Expected {len(ids)} documents in MGET reply, got {reply!r}")
    records = (member(fields, doc_id) for fields, doc_id in zip(reply, ids))
    return [record for record in records if record is not None]


def suggestions(reply: Sequence[Any] | None, options: Mapping[str, Any] | None = None) -> list[Record]:
    """Parse an ``FT.SUGGET`` reply into ``{"string", "score", "payload"}`` records.

    ``score`` and ``payload`` are present only when the matching option was set.

    Raises:
        MalformedReply: If the elements do not divide evenly by the stride.
    """
    if reply is None:
        return []
    if not _is_list(reply):
        raise MalformedReply(f"Expected a suggestion list, got {reply!r}")
    options = options or {}
    keys = ["string"]
    if options.get("withscores"):
        keys.append("score")
    if options.get("withpayloads"):
        keys.append("payload")

    stride = len(keys)
    if len(reply) % stride:
        raise MalformedReply(
            f"Suggestion reply has {len(reply)} elements, not a multiple of {stride}"
        )
    return [dict(zip(keys, reply[i:i + stride])) for i in range(0, len(reply), stride)]
