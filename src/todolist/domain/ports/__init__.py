"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import EventRepository, Repository, SettingsRepository
from .unit_of_work import (
    RepositoryCollection,
    TodoRepositories,
    TodoUnitOfWork,
    UnitOfWork,
)

__all__ = [
    "EventRepository",
    "Repository",
    "RepositoryCollection",
    "SettingsRepository",
    "TodoRepositories",
    "TodoUnitOfWork",
    "UnitOfWork",
]
