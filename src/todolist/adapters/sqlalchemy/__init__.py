"""SQLAlchemy adapter package for todolist."""

from __future__ import annotations

from .mappings import create_all_tables, event_table, metadata, setting_table
from .repositories import SqlAlchemyEventRepository, SqlAlchemySettingsRepository
from .unit_of_work import (
    SqlAlchemyUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyEventRepository",
    "SqlAlchemySettingsRepository",
    "SqlAlchemyUnitOfWork",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "event_table",
    "is_started",
    "metadata",
    "setting_table",
    "shutdown",
    "startup",
]
