"""Ports for persisting events and user settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from todolist.domain.events import Event

if TYPE_CHECKING:
    from uuid import UUID

    from todolist.domain.enums import DateFormat


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class EventRepository(Repository[Event], Protocol):
    """Persistence contract for events."""

    def get(self, event_id: UUID) -> Event | None: ...

    def list_all(self) -> list[Event]: ...

    def update(self, entity: Event) -> None: ...

    def remove(self, event_id: UUID) -> bool: ...


@runtime_checkable
class SettingsRepository(Protocol):
    """Persistence contract for scalar user settings."""

    def get_date_format(self) -> DateFormat | None: ...

    def set_date_format(self, date_format: DateFormat) -> None: ...
