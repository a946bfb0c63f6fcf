"""Application configuration helpers."""

from __future__ import annotations

from .display import DisplayConfig, get_display_config, parse_date_format
from .errors import ConfigurationError
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "DisplayConfig",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_display_config",
    "get_storage_config",
    "parse_date_format",
]
