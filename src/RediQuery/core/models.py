from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Union

Record = Dict[str, Any]
"""A parsed document: field name -> value, always with an ``id`` key."""


@dataclass(frozen=True, slots=True)
class ContentWithScore:
    """Search hit requested with scores and content: ``[id, score, fields]``."""

    id: str
    score: str
    fields: Optional[Sequence[Any]]


@dataclass(frozen=True, slots=True)
class ContentOnly:
    """Search hit with content but no score: ``[id, fields]``."""

    id: str
    fields: Sequence[Any]


@dataclass(frozen=True, slots=True)
class ScoreOnly:
    """Search hit with a score and no content (``NOCONTENT WITHSCORES``)."""

    id: str
    score: str


@dataclass(frozen=True, slots=True)
class IdOnly:
    """Bare document id (``NOCONTENT``)."""

    id: str


SearchHit = Union[ContentWithScore, ContentOnly, ScoreOnly, IdOnly]
