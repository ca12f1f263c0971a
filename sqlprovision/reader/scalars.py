"""Scalar inference for leaf values.

Inference is total: every raw value maps to exactly one of `bool`, `int`, or
`str`. Rules are tried in order and the first match wins, so `auto` is never
handed to the integer rule and `true`/`false` never become strings.
"""

from __future__ import annotations

from collections.abc import Callable
import re
import sys

ConfigValue = bool | int | str

AUTO = "auto"

_DIGITS_PATTERN = re.compile(r"[0-9]+")


def _is_integer_text(raw: str) -> bool:
    """Return whether `raw` is a digit run that `int()` will accept."""

    if _DIGITS_PATTERN.fullmatch(raw) is None:
        return False
    # Interpreters without the conversion limit report no limit.
    get_limit = getattr(sys, "get_int_max_str_digits", None)
    digit_limit = get_limit() if get_limit is not None else 0
    return digit_limit == 0 or len(raw) <= digit_limit


_ScalarRule = tuple[Callable[[str], bool], Callable[[str], ConfigValue]]

_SCALAR_RULES: tuple[_ScalarRule, ...] = (
    (lambda raw: raw == "true", lambda raw: True),
    (lambda raw: raw == "false", lambda raw: False),
    (lambda raw: raw == AUTO, lambda raw: AUTO),
    (_is_integer_text, int),
)


def infer_scalar(raw: str) -> ConfigValue:
    """Infer the typed value of one leaf's raw text.

    Args:
        raw: Leaf value text as produced by the scanner.

    Returns:
        `True`/`False` for the exact lowercase literals, the `AUTO` sentinel
        string for `auto`, an `int` for a run of ASCII digits (`"007"` -> `7`),
        and otherwise the raw text unchanged. Digit runs longer than the
        interpreter allows `int()` to convert also stay text.
    """

    for matches, convert in _SCALAR_RULES:
        if matches(raw):
            return convert(raw)
    return raw


def is_auto(value: object) -> bool:
    """Return whether a parsed value is the `auto` sentinel."""

    return isinstance(value, str) and value == AUTO
