"""Command-line interface for sqlprovision.

Responsibilities:
- Expose user-facing commands for reading and checking provisioning configs.
- Map reader and settings failures to stage-aware diagnostics.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Annotated, TypeVar

import typer

from .cli_rendering import (
    OUTPUT_FORMATS,
    echo_ignored_lines,
    echo_summary,
    echo_value,
    exit_with_command_error,
    render_document,
)
from .config import ConfigLoader, ProvisioningConfig
from .errors import (
    CommandStageError,
    ConfigFieldError,
    DocumentUnavailableError,
    MalformedLineError,
)
from .reader import (
    ConfigDocument,
    ParseReport,
    inspect_document,
    lookup,
    parse_document,
    read_document,
)
from .telemetry.logger import RunLogger

CONFIG_ENV_VAR = "SQLPROVISION_CONFIG"

_StageResult = TypeVar("_StageResult")

app = typer.Typer(
    name="sqlprovision",
    no_args_is_help=True,
    help="Read and check SQL Server provisioning config documents.",
)

ConfigPathArgument = Annotated[
    Path,
    typer.Argument(
        envvar=CONFIG_ENV_VAR,
        help=f"Path to the config document (defaults to `${CONFIG_ENV_VAR}`).",
    ),
]
StrictOption = Annotated[
    bool,
    typer.Option(
        "--strict",
        help="Fail on unrecognized lines and keys outside any section.",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Log every dropped line at debug level."),
]


def _run_stage(
    run_logger: RunLogger,
    stage: str,
    action: Callable[[], _StageResult],
    **context: object,
) -> _StageResult:
    """Run one named stage and emit start/complete/failure events."""

    run_logger.log_stage_start(stage, **context)
    try:
        result = action()
    except Exception as exc:
        run_logger.log_stage_failure(stage, type(exc).__name__)
        raise
    run_logger.log_stage_complete(stage, **context)
    return result


def _read_text(config_path: Path) -> str:
    """Read the config document and map read failures to stage errors."""

    try:
        return read_document(config_path)
    except DocumentUnavailableError as exc:
        raise CommandStageError(
            stage="read",
            detail=str(exc),
            hint=f"Pass an existing UTF-8 file or set `{CONFIG_ENV_VAR}`.",
        ) from exc


def _parse_strict(text: str, config_path: Path) -> ConfigDocument:
    """Parse in strict mode and map line errors to stage errors."""

    try:
        return parse_document(text, strict=True)
    except MalformedLineError as exc:
        raise CommandStageError(
            stage="parse",
            detail=f"Invalid config document `{config_path}`: {exc}",
            hint="Fix the line or rerun without `--strict` to skip it.",
        ) from exc


def _parse_permissive(text: str, run_logger: RunLogger) -> ConfigDocument:
    """Parse permissively and log each dropped line as a warning."""

    report: ParseReport = inspect_document(text)
    for item in report.ignored:
        run_logger.log_stage_warning(
            "parse", "line-ignored", line=item.line_number, reason=item.reason
        )
    return report.document


def _load_command_document(
    config_path: Path, strict: bool, run_logger: RunLogger
) -> ConfigDocument:
    """Run the `read` and `parse` stages for one command."""

    text = _run_stage(
        run_logger, "read", lambda: _read_text(config_path), path=config_path
    )
    if strict:
        return _run_stage(run_logger, "parse", lambda: _parse_strict(text, config_path))
    return _run_stage(run_logger, "parse", lambda: _parse_permissive(text, run_logger))


def _build_settings(document: ConfigDocument, config_path: Path) -> ProvisioningConfig:
    """Extract typed settings and map field errors to stage errors."""

    try:
        return ConfigLoader.from_document(document)
    except ConfigFieldError as exc:
        raise CommandStageError(
            stage="validate",
            detail=f"Invalid config document `{config_path}`: {exc}",
            hint=f"Add or fix `{exc.path}` in the config document.",
        ) from exc


@app.command("parse")
def parse_command(
    config_path: ConfigPathArgument,
    output_format: Annotated[
        str,
        typer.Option("--format", help="Output format: `json` or `yaml`."),
    ] = "json",
    strict: StrictOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Print the parsed document."""

    try:
        if output_format not in OUTPUT_FORMATS:
            raise CommandStageError(
                stage="options",
                detail=f"Unsupported output format `{output_format}`.",
                hint="Use `--format json` or `--format yaml`.",
            )
        run_logger = RunLogger(verbose=verbose)
        document = _load_command_document(config_path, strict, run_logger)
        rendered = render_document(document, output_format)
    except Exception as exc:
        exit_with_command_error("parse", exc)

    typer.echo(rendered)


@app.command("lint")
def lint_command(
    config_path: ConfigPathArgument,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with code 1 when any line was dropped."),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """List lines that do not contribute to the parsed document."""

    try:
        run_logger = RunLogger(verbose=verbose)
        text = _run_stage(
            run_logger, "read", lambda: _read_text(config_path), path=config_path
        )
        report = _run_stage(run_logger, "parse", lambda: inspect_document(text))
    except Exception as exc:
        exit_with_command_error("lint", exc)

    if report.is_clean:
        typer.echo("No ignored lines.")
        return

    echo_ignored_lines(report.ignored)
    typer.echo(f"Ignored lines: {len(report.ignored)}")
    if strict:
        raise typer.Exit(code=1)


@app.command("validate")
def validate_command(
    config_path: ConfigPathArgument,
    strict: StrictOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Check required settings and print a summary with secrets masked."""

    try:
        run_logger = RunLogger(verbose=verbose)
        document = _load_command_document(config_path, strict, run_logger)
        settings = _run_stage(
            run_logger, "validate", lambda: _build_settings(document, config_path)
        )
    except Exception as exc:
        exit_with_command_error("validate", exc)

    echo_summary(settings.as_summary())


@app.command("get")
def get_command(
    key: Annotated[str, typer.Argument(help="Dotted path, for example `ftp.url`.")],
    config_path: ConfigPathArgument,
    strict: StrictOption = False,
) -> None:
    """Print the value stored at one dotted path."""

    try:
        run_logger = RunLogger()
        document = _load_command_document(config_path, strict, run_logger)
        value = lookup(document, key)
        if value is None:
            raise CommandStageError(
                stage="lookup",
                detail=f"No value at `{key}` in `{config_path}`.",
                hint="Run `sqlprovision parse` to see the available keys.",
            )
    except Exception as exc:
        exit_with_command_error("get", exc)

    echo_value(value)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
