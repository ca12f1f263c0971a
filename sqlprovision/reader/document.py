"""Document-level entry points for the config reader.

Responsibilities:
- Load document text from disk, mapping read failures to `DocumentUnavailableError`.
- Run the scanner and assembler over in-memory text.
- Resolve dotted lookup paths against a parsed document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..errors import DocumentUnavailableError
from .assembler import ConfigDocument, DocumentAssembler, IgnoredLine, Scope, assemble
from .scalars import ConfigValue
from .scanner import scan_lines

_PATH_SEPARATOR = "."


@dataclass(frozen=True, slots=True)
class ParseReport:
    """Parsed document plus the lines dropped while building it.

    Attributes:
        document: Parsed section mapping.
        ignored: Dropped lines in input order.
    """

    document: ConfigDocument
    ignored: tuple[IgnoredLine, ...] = field(default_factory=tuple)

    @property
    def is_clean(self) -> bool:
        """Return whether every non-blank, non-comment line contributed."""

        return not self.ignored


def parse_document(text: str, *, strict: bool = False) -> ConfigDocument:
    """Parse config document text into a section mapping.

    Args:
        text: Full document contents with `\\n` or `\\r\\n` line endings.
        strict: Raise `MalformedLineError` on unrecognized or orphan lines
            instead of dropping them.

    Returns:
        Mapping of section name to section scope.
    """

    return assemble(scan_lines(text), strict=strict)


def inspect_document(text: str) -> ParseReport:
    """Parse permissively and report every line that was dropped."""

    assembler = DocumentAssembler()
    document = assembler.feed_all(scan_lines(text))
    return ParseReport(document=document, ignored=tuple(assembler.ignored))


def read_document(path: Path | str) -> str:
    """Read document text from disk.

    Raises:
        DocumentUnavailableError: If the file is missing, unreadable, or not UTF-8 text.
    """

    document_path = Path(path)
    try:
        return document_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        raise DocumentUnavailableError(document_path, reason) from exc


def load_document(path: Path | str, *, strict: bool = False) -> ConfigDocument:
    """Read and parse the document stored at `path`."""

    return parse_document(read_document(path), strict=strict)


def lookup(document: ConfigDocument, dotted_path: str) -> ConfigValue | Scope | None:
    """Resolve `section.key` or `section.sub.key` against a parsed document.

    Returns `None` when any segment is absent or descends into a scalar.
    """

    current: ConfigValue | Scope = document
    for segment in dotted_path.split(_PATH_SEPARATOR):
        if not isinstance(current, dict) or segment not in current:
            return None
        current = current[segment]
    return current
