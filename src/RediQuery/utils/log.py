"""RediQuery logging.

Library modules only emit records through `log` and never attach handlers.
The CLI calls `configure_logging` once per command, which sends records to
stderr (so JSON on stdout stays parseable) and optionally to a per-command
file. Lines look like ``10-19 14:02:11 [DEBG] FT.SEARCH reply received``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final


LOG_FORMAT: Final = "%(asctime)s [%(levelabbr)s] %(message)s"
DATE_FORMAT: Final = "%m-%d %H:%M:%S"

_SHORT_NAMES: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}

log = logging.getLogger("RediQuery")
log.addHandler(logging.NullHandler())


class ShortLevelFormatter(logging.Formatter):
    """Formatter that exposes a four-letter ``levelabbr`` to `LOG_FORMAT`."""

    def __init__(self) -> None:
        super().__init__(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _SHORT_NAMES.get(record.levelno, record.levelname[:4])
        return super().format(record)


def resolve_level(name: str | None) -> int:
    """Map a level name such as ``"debug"`` to its number, falling back to INFO."""
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def log_file_path(log_dir: str | Path, action: str, now: datetime | None = None) -> Path:
    """Return ``<log_dir>/<action>/<action>_<mmddHHMMSS>.log``, creating the directory."""
    stamp = (now or datetime.now()).strftime("%m%d%H%M%S")
    directory = Path(log_dir or "log") / action
    directory.mkdir(parents=True, exist_ok=True)
    return directory / f"{action}_{stamp}.log"


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(ShortLevelFormatter())
    return handler


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> None:
    """Attach console and optional file handlers to `log`.

    Replaces any handlers from a previous call. The file, when enabled,
    always records DEBUG.

    Args:
        level: Console level name (e.g. INFO, DEBUG).
        action: CLI command name; required for a log file.
        log_to_file: Whether to also write ``<log_dir>/<action>/...log``.
        log_dir: Base directory for log files.
    """
    console_level = resolve_level(level)
    handlers = [_handler(logging.StreamHandler(), console_level)]
    if log_to_file and action:
        path = log_file_path(log_dir, action)
        handlers.append(_handler(logging.FileHandler(path, encoding="utf-8"), logging.DEBUG))

    log.handlers[:] = handlers
    log.setLevel(min(handler.level for handler in handlers))
    log.propagate = False
