"""Search defaults applied by the client and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from RediQuery.config.common import expect_int, expect_score, get_section, get_value


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search defaults.

    Attributes:
        default_score: Score token sent with FT.ADD / FT.ADDHASH / FT.SUGADD
            when the caller does not pass one.
        default_limit: Page size used by the CLI ``search`` command.
    """

    default_score: str = "1.0"
    default_limit: int = 10


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load the ``search`` section; every key is optional."""
    section = get_section(raw, "search", required=False)
    defaults = SearchConfig()
    return SearchConfig(
        default_score=expect_score(
            get_value(section, "search.default_score", defaults.default_score),
            "search.default_score",
        ),
        default_limit=expect_int(
            get_value(section, "search.default_limit", defaults.default_limit),
            "search.default_limit",
        ),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search defaults.

    Raises:
        ValueError: If values are out of range.
    """
    if float(config.default_score) < 0:
        raise ValueError("search.default_score must be >= 0")
    if config.default_limit <= 0:
        raise ValueError("search.default_limit must be positive")
