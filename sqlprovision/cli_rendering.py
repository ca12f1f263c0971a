"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
parsed documents, dropped-line reports, and settings summaries.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer
import yaml

from .errors import CommandStageError
from .parsing import format_scalar
from .reader import ConfigDocument, IgnoredLine

OUTPUT_FORMATS = ("json", "yaml")


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def render_document(document: ConfigDocument, output_format: str) -> str:
    """Serialize a parsed document as JSON or YAML text."""

    if output_format == "json":
        return json.dumps(document, ensure_ascii=False, indent=2, sort_keys=True)
    if output_format == "yaml":
        return yaml.safe_dump(
            document, sort_keys=True, default_flow_style=False, allow_unicode=True
        ).rstrip("\n")
    supported = ", ".join(OUTPUT_FORMATS)
    raise ValueError(f"Unsupported output format `{output_format}`; supported: {supported}.")


def echo_ignored_lines(ignored: tuple[IgnoredLine, ...] | list[IgnoredLine]) -> None:
    """Print one deterministic row per dropped line."""

    for item in ignored:
        typer.echo(f"line {item.line_number}: {item.reason}: {item.text}")


def echo_summary(summary: dict[str, str]) -> None:
    """Print `key = value` rows in the summary's order."""

    for key, value in summary.items():
        typer.echo(f"{key} = {value}")


def echo_value(value: object) -> None:
    """Print one looked-up value: scalars as written, sections as JSON."""

    if isinstance(value, dict):
        typer.echo(json.dumps(value, ensure_ascii=False, indent=2, sort_keys=True))
        return
    typer.echo(format_scalar(value))
