"""Reader for the provisioning config micro-format.

The reader turns a two-level indented `key: value` document into nested
dictionaries with `bool`, `int`, and `str` leaves. It is not a YAML parser:
only section headers, sub-section headers, and `key: value` leaves are
recognized, and every other line is dropped.
"""

from .assembler import (
    ConfigDocument,
    DocumentAssembler,
    IgnoredLine,
    InSection,
    InSubSection,
    NoSection,
    Scope,
    assemble,
)
from .document import (
    ParseReport,
    inspect_document,
    load_document,
    lookup,
    parse_document,
    read_document,
)
from .scalars import AUTO, ConfigValue, infer_scalar, is_auto
from .scanner import LeafDepth, LineKind, LineRecord, scan_lines

__all__ = [
    "AUTO",
    "ConfigDocument",
    "ConfigValue",
    "DocumentAssembler",
    "IgnoredLine",
    "InSection",
    "InSubSection",
    "LeafDepth",
    "LineKind",
    "LineRecord",
    "NoSection",
    "ParseReport",
    "Scope",
    "assemble",
    "infer_scalar",
    "inspect_document",
    "is_auto",
    "load_document",
    "lookup",
    "parse_document",
    "read_document",
    "scan_lines",
]
