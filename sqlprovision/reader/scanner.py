"""Line scanner for the provisioning config micro-format.

Responsibilities:
- Split raw document text into physical lines with `\\n` or `\\r\\n` endings.
- Classify every line by indentation and shape into a `LineRecord`.

Key types:
- `LineKind`: classification outcome for one physical line.
- `LeafDepth`: advisory depth tag carried by key/value leaves.
- `LineRecord`: one classified line, yielded lazily by `scan_lines`.

The scanner never raises. Lines matching no recognized shape are yielded as
`LineKind.UNRECOGNIZED` so callers can choose to drop or report them.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
import re

SECTION_INDENT = 0
SUBSECTION_INDENT = 2
NESTED_LEAF_MIN_INDENT = 4

_HEADER_PATTERN = re.compile(r"(\w+):")
_LEAF_PATTERN = re.compile(r"(\w+):\s*(.*)")


class LineKind(Enum):
    """Classification outcome for one physical line."""

    BLANK = "blank"
    COMMENT = "comment"
    SECTION = "section"
    SUBSECTION = "subsection"
    LEAF = "leaf"
    UNRECOGNIZED = "unrecognized"


class LeafDepth(Enum):
    """Indentation depth a leaf was written at."""

    DIRECT = "direct"
    NESTED = "nested"


_SKIP_KINDS = frozenset({LineKind.BLANK, LineKind.COMMENT, LineKind.UNRECOGNIZED})


@dataclass(frozen=True, slots=True)
class LineRecord:
    """One classified physical line.

    Attributes:
        line_number: 1-based physical line number.
        indent: Count of leading whitespace characters in the raw line.
        kind: Line classification.
        text: Line content trimmed of surrounding whitespace.
        name: Header or key name for `SECTION`, `SUBSECTION`, and `LEAF` lines.
        raw_value: Leaf value text after the `:` separator, trailing whitespace removed.
        depth: Leaf depth tag, `None` for non-leaf lines.
    """

    line_number: int
    indent: int
    kind: LineKind
    text: str
    name: str | None = None
    raw_value: str | None = None
    depth: LeafDepth | None = None

    @property
    def is_skip(self) -> bool:
        """Return whether this record never affects document structure."""

        return self.kind in _SKIP_KINDS


def split_lines(text: str) -> list[str]:
    """Split document text on `\\n`, normalizing `\\r\\n` endings first."""

    normalized = text.replace("\r\n", "\n")
    if normalized.endswith("\r"):
        normalized = normalized[:-1]
    return normalized.split("\n")


def classify_line(raw_line: str, line_number: int) -> LineRecord:
    """Classify one physical line by indentation width and trimmed shape."""

    stripped = raw_line.strip()
    indent = len(raw_line) - len(raw_line.lstrip())

    if not stripped:
        return LineRecord(line_number, indent, LineKind.BLANK, stripped)
    if stripped.startswith("#"):
        return LineRecord(line_number, indent, LineKind.COMMENT, stripped)

    header = _HEADER_PATTERN.fullmatch(stripped)
    if header is not None and indent == SECTION_INDENT:
        return LineRecord(
            line_number, indent, LineKind.SECTION, stripped, name=header.group(1)
        )
    if header is not None and indent == SUBSECTION_INDENT:
        return LineRecord(
            line_number, indent, LineKind.SUBSECTION, stripped, name=header.group(1)
        )

    leaf = _LEAF_PATTERN.fullmatch(stripped)
    if leaf is not None and indent >= NESTED_LEAF_MIN_INDENT:
        return _leaf_record(line_number, indent, stripped, leaf, LeafDepth.NESTED)
    if leaf is not None and indent == SUBSECTION_INDENT:
        return _leaf_record(line_number, indent, stripped, leaf, LeafDepth.DIRECT)

    return LineRecord(line_number, indent, LineKind.UNRECOGNIZED, stripped)


def scan_lines(text: str) -> Iterator[LineRecord]:
    """Yield one classified record per physical line of `text`, in order."""

    for line_number, raw_line in enumerate(split_lines(text), start=1):
        yield classify_line(raw_line, line_number)


def _leaf_record(
    line_number: int,
    indent: int,
    stripped: str,
    match: re.Match[str],
    depth: LeafDepth,
) -> LineRecord:
    """Build a leaf record from a matched `key: value` line."""

    return LineRecord(
        line_number,
        indent,
        LineKind.LEAF,
        stripped,
        name=match.group(1),
        raw_value=match.group(2).rstrip(),
        depth=depth,
    )
