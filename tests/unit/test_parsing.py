"""Unit tests for shared value normalization and rendering helpers."""

import pytest

from sqlprovision.parsing import (
    describe_value_type,
    format_scalar,
    normalize_optional_string,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(2019) == "2019"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, "true"), (False, "false"), (7, "7"), ("auto", "auto")],
)
def test_format_scalar_renders_document_literals(value: object, expected: str) -> None:
    """Rendering should write booleans in their lowercase document form."""

    assert format_scalar(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, "boolean"), (3, "integer"), ("x", "string"), ({}, "section")],
)
def test_describe_value_type_labels(value: object, expected: str) -> None:
    """Type labels should distinguish booleans from integers."""

    assert describe_value_type(value) == expected
