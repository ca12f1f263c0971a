"""Shared helpers for normalizing and rendering config values."""

from __future__ import annotations


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def format_scalar(value: object) -> str:
    """Render a parsed scalar the way it would be written in a config document."""

    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def describe_value_type(value: object) -> str:
    """Return a short type label for diagnostics (`boolean`, `integer`, `string`, `section`)."""

    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, dict):
        return "section"
    return "string"
