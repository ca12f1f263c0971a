"""Shared pytest fixtures for the full sqlprovision test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from loguru import logger
import pytest

from tests.fixture_documents import PROVISIONING_DOCUMENT, write_document


@pytest.fixture(autouse=True)
def _reset_loguru_handlers() -> Iterator[None]:
    """Drop sinks added by CLI runs so later tests never write to closed streams."""

    yield
    logger.remove()
    logger.disable("sqlprovision")


@pytest.fixture
def provisioning_document_path(tmp_path: Path) -> Path:
    """Provide a complete provisioning document written to a temporary file."""

    return write_document(tmp_path, PROVISIONING_DOCUMENT)
