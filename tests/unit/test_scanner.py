"""Unit tests for config line classification."""

from __future__ import annotations

import pytest

from sqlprovision.reader.scanner import (
    LeafDepth,
    LineKind,
    classify_line,
    scan_lines,
    split_lines,
)


@pytest.mark.parametrize(
    ("raw_line", "expected_kind"),
    [
        ("", LineKind.BLANK),
        ("    ", LineKind.BLANK),
        ("# comment", LineKind.COMMENT),
        ("    # indented comment", LineKind.COMMENT),
        ("ftp:", LineKind.SECTION),
        ("ftp:   ", LineKind.SECTION),
        ("  options:", LineKind.SUBSECTION),
        ("  url: ftp://example.com", LineKind.LEAF),
        ("    retries: 3", LineKind.LEAF),
        ("      deep: value", LineKind.LEAF),
    ],
)
def test_classify_line_recognizes_supported_shapes(
    raw_line: str, expected_kind: LineKind
) -> None:
    """Classification should follow indentation width and trimmed line shape."""

    assert classify_line(raw_line, 1).kind is expected_kind


@pytest.mark.parametrize(
    "raw_line",
    [
        "url: ftp://example.com",
        " one_space: value",
        "   three_spaces: value",
        " odd:",
        "   odd:",
        "  - list item",
        "  bad-key: value",
        "  dotted.key: value",
        "  'quoted': value",
        "no separator here",
    ],
)
def test_classify_line_marks_other_shapes_unrecognized(raw_line: str) -> None:
    """Lines outside the supported shapes should degrade to unrecognized records."""

    assert classify_line(raw_line, 7).kind is LineKind.UNRECOGNIZED


def test_classify_line_extracts_names_values_and_depth() -> None:
    """Leaf records should carry key, trimmed raw value, and advisory depth."""

    direct = classify_line("  url:   ftp://example.com/iso   ", 2)
    nested = classify_line("    full_backup: Sunday 01:00", 5)

    assert direct.name == "url"
    assert direct.raw_value == "ftp://example.com/iso"
    assert direct.depth is LeafDepth.DIRECT
    assert direct.indent == 2
    assert nested.name == "full_backup"
    assert nested.raw_value == "Sunday 01:00"
    assert nested.depth is LeafDepth.NESTED
    assert nested.line_number == 5


def test_classify_line_keeps_empty_and_unprocessed_values() -> None:
    """Values should be kept verbatim: no dequoting and no inline comment stripping."""

    empty = classify_line("    key:", 1)
    quoted = classify_line('  name: "quoted value" # note', 1)
    compact = classify_line("  port:1433", 1)

    assert empty.kind is LineKind.LEAF
    assert empty.raw_value == ""
    assert quoted.raw_value == '"quoted value" # note'
    assert compact.raw_value == "1433"


def test_subsection_header_takes_priority_over_empty_direct_leaf() -> None:
    """A two-space `name:` line should be a sub-section header, not an empty leaf."""

    record = classify_line("  user_databases:", 3)

    assert record.kind is LineKind.SUBSECTION
    assert record.name == "user_databases"
    assert record.raw_value is None
    assert record.depth is None


def test_split_lines_normalizes_crlf_line_endings() -> None:
    """CRLF and LF documents should split into identical physical lines."""

    assert split_lines("a:\r\n  b: 1\r\n") == split_lines("a:\n  b: 1\n")
    assert split_lines("a:\r\n  b: 1") == ["a:", "  b: 1"]


def test_scan_lines_is_lazy_and_numbers_lines_from_one() -> None:
    """Scanning should yield records one at a time with 1-based line numbers."""

    records = scan_lines("ftp:\n  url: x\n")

    first = next(records)
    assert first.kind is LineKind.SECTION
    assert first.line_number == 1
    assert [record.line_number for record in records] == [2, 3]


def test_skip_records_are_flagged() -> None:
    """Blank, comment, and unrecognized records should never affect structure."""

    kinds = {record.kind: record.is_skip for record in scan_lines("\n# c\n  - x\nftp:\n")}

    assert kinds == {
        LineKind.BLANK: True,
        LineKind.COMMENT: True,
        LineKind.UNRECOGNIZED: True,
        LineKind.SECTION: False,
    }
