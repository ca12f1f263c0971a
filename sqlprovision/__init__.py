"""Top-level package for sqlprovision.

This package reads the indented provisioning config document used to set up
SQL Server instances and maps it onto typed settings. The main entry points
are `parse_document`, `load_document`, and `ConfigLoader`.
"""

from loguru import logger

from .config import ConfigLoader, ProvisioningConfig
from .reader import load_document, parse_document

logger.disable(__name__)

__all__ = [
    "ConfigLoader",
    "ProvisioningConfig",
    "__version__",
    "load_document",
    "parse_document",
]

__version__ = "0.1.0"
