"""Structural assembler for scanned config lines.

Responsibilities:
- Consume `LineRecord` values in one forward pass.
- Track the enclosing section/sub-section as an explicit state value.
- Build the nested section -> (sub-section) -> key -> value mapping.

Key types:
- `NoSection`, `InSection`, `InSubSection`: assembler states.
- `IgnoredLine`: a line that was dropped without affecting the result.
- `DocumentAssembler`: stateful builder driven by `feed`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from ..errors import MalformedLineError
from .scalars import ConfigValue, infer_scalar
from .scanner import LineKind, LineRecord

Scope = dict[str, "ConfigValue | Scope"]
ConfigDocument = dict[str, Scope]

REASON_UNRECOGNIZED = "unrecognized"
REASON_ORPHAN_SUBSECTION = "orphan-subsection"
REASON_ORPHAN_LEAF = "orphan-leaf"

_REASON_DESCRIPTIONS = {
    REASON_UNRECOGNIZED: "line does not match a section, sub-section, or key/value shape",
    REASON_ORPHAN_SUBSECTION: "sub-section header appears before any section header",
    REASON_ORPHAN_LEAF: "key/value line appears before any section header",
}


@dataclass(frozen=True, slots=True)
class NoSection:
    """No section header has been read yet."""


@dataclass(frozen=True, slots=True)
class InSection:
    """Leaves land directly in `section`."""

    section: str


@dataclass(frozen=True, slots=True)
class InSubSection:
    """Leaves land in sub-scope `subsection` of `section`."""

    section: str
    subsection: str


AssemblerState = NoSection | InSection | InSubSection


@dataclass(frozen=True, slots=True)
class IgnoredLine:
    """A line dropped by the assembler.

    Attributes:
        line_number: 1-based physical line number.
        text: Trimmed line content.
        reason: One of `unrecognized`, `orphan-subsection`, `orphan-leaf`.
    """

    line_number: int
    text: str
    reason: str

    @property
    def description(self) -> str:
        """Return a human-readable explanation for the drop reason."""

        return _REASON_DESCRIPTIONS.get(self.reason, self.reason)


class DocumentAssembler:
    """Build a config document from classified lines.

    Placement of a leaf depends only on the current state: inside an open
    sub-section it lands in the sub-scope, otherwise in the open section. The
    leaf's depth tag is not consulted.

    In strict mode, unrecognized lines and orphan constructs raise
    `MalformedLineError` instead of being recorded in `ignored`.
    """

    def __init__(self, *, strict: bool = False) -> None:
        """Initialize an empty document and the `NoSection` state."""

        self._strict = strict
        self._document: ConfigDocument = {}
        self._state: AssemblerState = NoSection()
        self._ignored: list[IgnoredLine] = []

    @property
    def state(self) -> AssemblerState:
        """Return the current assembler state."""

        return self._state

    @property
    def document(self) -> ConfigDocument:
        """Return the document built so far."""

        return self._document

    @property
    def ignored(self) -> list[IgnoredLine]:
        """Return lines dropped so far, in input order."""

        return list(self._ignored)

    def feed(self, record: LineRecord) -> None:
        """Apply one classified line to the document and advance the state."""

        if record.kind is LineKind.SECTION:
            self._open_section(record)
        elif record.kind is LineKind.SUBSECTION:
            self._open_subsection(record)
        elif record.kind is LineKind.LEAF:
            self._insert_leaf(record)
        elif record.kind is LineKind.UNRECOGNIZED:
            self._ignore(record, REASON_UNRECOGNIZED)

    def feed_all(self, records: Iterable[LineRecord]) -> ConfigDocument:
        """Feed every record in order and return the finished document."""

        for record in records:
            self.feed(record)
        return self._document

    def _open_section(self, record: LineRecord) -> None:
        """Reset or create the named section and make it current."""

        name = _record_name(record)
        self._document[name] = {}
        self._state = InSection(section=name)

    def _open_subsection(self, record: LineRecord) -> None:
        """Reset or create a sub-scope inside the current section."""

        state = self._state
        if isinstance(state, NoSection):
            self._ignore(record, REASON_ORPHAN_SUBSECTION)
            return

        name = _record_name(record)
        self._document[state.section][name] = {}
        self._state = InSubSection(section=state.section, subsection=name)

    def _insert_leaf(self, record: LineRecord) -> None:
        """Insert one typed leaf into the scope selected by the current state."""

        state = self._state
        if isinstance(state, NoSection):
            self._ignore(record, REASON_ORPHAN_LEAF)
            return

        section = self._document[state.section]
        if isinstance(state, InSubSection):
            target = section[state.subsection]
        else:
            target = section
        target[_record_name(record)] = infer_scalar(record.raw_value or "")

    def _ignore(self, record: LineRecord, reason: str) -> None:
        """Record a dropped line, or raise when running in strict mode."""

        if self._strict:
            raise MalformedLineError(
                line_number=record.line_number,
                text=record.text,
                reason=_REASON_DESCRIPTIONS[reason],
            )
        logger.debug(
            "Ignoring config line {line_number} ({reason}): {text}",
            line_number=record.line_number,
            reason=reason,
            text=record.text,
        )
        self._ignored.append(
            IgnoredLine(line_number=record.line_number, text=record.text, reason=reason)
        )


def assemble(records: Iterable[LineRecord], *, strict: bool = False) -> ConfigDocument:
    """Build a config document from classified lines in one forward pass."""

    return DocumentAssembler(strict=strict).feed_all(records)


def _record_name(record: LineRecord) -> str:
    """Return the header/key name of a structural record."""

    if record.name is None:
        raise ValueError(f"Line {record.line_number} has no header or key name.")
    return record.name
