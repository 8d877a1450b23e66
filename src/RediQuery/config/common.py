from __future__ import annotations

"""Shared helpers for reading and type-checking config sections."""

from typing import Any, Mapping

_MISSING = object()


def get_section(raw: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    """Return a top-level config section.

    Args:
        raw: Root configuration mapping.
        key: Section name (e.g. ``redis``).
        required: Whether a missing section is an error.

    Returns:
        The section mapping, or an empty mapping for a missing optional section.

    Raises:
        ValueError: If a required section is missing.
        TypeError: If the section is not a mapping.
    """
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {key}")
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def get_value(section: Mapping[str, Any], config_key: str, default: Any = _MISSING) -> Any:
    """Return ``section[field]`` where ``field`` is the last part of ``config_key``.

    Args:
        section: Section mapping.
        config_key: Dotted key path, used for lookup and error messages.
        default: Value for a missing key. When omitted the key is required.

    Raises:
        ValueError: If the key is required and missing.
    """
    field = config_key.rsplit(".", 1)[-1]
    if field in section:
        return section[field]
    if default is _MISSING:
        raise ValueError(f"Missing required config: {config_key}")
    return default


def expect_str(value: Any, config_key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_int(value: Any, config_key: str) -> int:
    """Validate an integer, rejecting booleans."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{config_key} must be an integer")
    return value


def expect_float(value: Any, config_key: str) -> float:
    """Validate a number (int or float) and return it as float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{config_key} must be a number")
    return float(value)


def expect_score(value: Any, config_key: str) -> str:
    """Validate a document/suggestion score and return its protocol token.

    Scores are sent as strings; YAML may give them as numbers.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"{config_key} must be a number or numeric string")
    try:
        float(value)
    except ValueError:
        raise ValueError(f"{config_key} must be numeric, got {value!r}") from None
    return str(value)
