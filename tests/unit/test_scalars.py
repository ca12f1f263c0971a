"""Unit tests for leaf scalar inference."""

from __future__ import annotations

import sys

import pytest

from sqlprovision.reader import parse_document
from sqlprovision.reader.scalars import AUTO, infer_scalar, is_auto


def test_infer_scalar_maps_exact_boolean_literals() -> None:
    """Only lowercase `true`/`false` should become booleans."""

    assert infer_scalar("true") is True
    assert infer_scalar("false") is False


@pytest.mark.parametrize("raw", ["True", "FALSE", "yes", "on", "1 "])
def test_infer_scalar_keeps_other_boolean_like_tokens_as_strings(raw: str) -> None:
    """Boolean-looking tokens outside the exact literals should stay strings."""

    assert infer_scalar(raw) == raw
    assert isinstance(infer_scalar(raw), str)


def test_infer_scalar_preserves_auto_sentinel() -> None:
    """`auto` should stay the literal sentinel string."""

    value = infer_scalar("auto")

    assert value == AUTO
    assert isinstance(value, str)
    assert is_auto(value)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("0", 0), ("3", 3), ("042", 42), ("007", 7), ("16384", 16384)],
)
def test_infer_scalar_parses_ascii_digit_runs(raw: str, expected: int) -> None:
    """Plain digit runs should parse as decimal integers, ignoring leading zeros."""

    value = infer_scalar(raw)

    assert value == expected
    assert type(value) is int


@pytest.mark.parametrize("raw", ["-1", "+2", "1.5", "1_000", "12a", "٣", "²"])
def test_infer_scalar_keeps_non_plain_numbers_as_strings(raw: str) -> None:
    """Signs, decimals, separators, and non-ASCII digits should not parse as integers."""

    assert infer_scalar(raw) == raw


@pytest.mark.parametrize(
    "raw",
    ["ftp://example.com/iso", "", '"quoted"', "Sunday 01:00", "D:\\SQL", "auto mode"],
)
def test_infer_scalar_returns_other_values_verbatim(raw: str) -> None:
    """All remaining values should be returned unchanged."""

    assert infer_scalar(raw) == raw


def test_is_auto_rejects_non_sentinel_values() -> None:
    """Only the exact `auto` string should be treated as the sentinel."""

    assert not is_auto("AUTO")
    assert not is_auto(4)
    assert not is_auto(True)


def test_infer_scalar_keeps_digit_runs_beyond_conversion_limit_as_strings(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Digit runs too long for `int()` should fall through to the verbatim rule."""

    monkeypatch.setattr(
        sys, "get_int_max_str_digits", lambda: 4300, raising=False
    )
    long_digits = "9" * 5000

    assert infer_scalar(long_digits) == long_digits
    assert infer_scalar("1" * 4300) == int("1" * 4300)


def test_parse_document_keeps_overlong_digit_leaf_as_text(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A leaf with a very long digit run should parse without raising."""

    monkeypatch.setattr(
        sys, "get_int_max_str_digits", lambda: 4300, raising=False
    )
    long_digits = "1" * 5000

    document = parse_document("sql_config:\n  big: " + long_digits)

    assert document == {"sql_config": {"big": long_digits}}
