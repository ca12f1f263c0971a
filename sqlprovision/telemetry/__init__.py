"""Telemetry and observability helpers.

This package emits deterministic stage events for CLI commands.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
