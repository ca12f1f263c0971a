"""Domain exceptions for document reading, config extraction, and CLI diagnostics."""

from __future__ import annotations

from pathlib import Path


class DocumentUnavailableError(RuntimeError):
    """Raised when the backing configuration document cannot be read at all."""

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        """Initialize an unavailable-document error naming the failing path."""

        self.path = Path(path)
        self.reason = reason
        message = f"Configuration document `{self.path}` could not be read"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedLineError(ValueError):
    """Raised in strict mode when a line is unrecognized or has no enclosing scope."""

    def __init__(self, *, line_number: int, text: str, reason: str) -> None:
        """Initialize a line-scoped parse error."""

        super().__init__(f"line {line_number}: {reason}: `{text}`")
        self.line_number = line_number
        self.text = text
        self.reason = reason


class ConfigFieldError(ValueError):
    """Raised when a required config field is absent or carries the wrong type."""

    def __init__(self, path: str, detail: str) -> None:
        """Initialize a field-scoped config error for one dotted path."""

        super().__init__(f"`{path}` {detail}")
        self.path = path
        self.detail = detail


class CommandStageError(RuntimeError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
