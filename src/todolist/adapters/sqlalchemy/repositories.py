"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Final, cast

from sqlalchemy import delete, insert, select, update

from todolist.adapters.sqlalchemy.mappings import event_table, setting_table
from todolist.domain.dates import Date
from todolist.domain.enums import DateFormat
from todolist.domain.events import Event

if TYPE_CHECKING:
    import uuid
    from collections.abc import Mapping

    from sqlalchemy import CursorResult
    from sqlalchemy.orm import Session

log = logging.getLogger(__name__)

DATE_FORMAT_KEY: Final[str] = "date_format"


def _date_values(prefix: str, value: Date | None) -> dict[str, object]:
    if value is None:
        return {f"{prefix}_year": None, f"{prefix}_month": None, f"{prefix}_day": None}
    return {
        f"{prefix}_year": str(value.year),
        f"{prefix}_month": value.month,
        f"{prefix}_day": value.day,
    }


def _row_date(row: Mapping[str, Any], prefix: str) -> Date | None:
    year = row[f"{prefix}_year"]
    if year is None:
        return None
    return Date(row[f"{prefix}_month"], row[f"{prefix}_day"], int(year))


def _event_values(event: Event) -> dict[str, object]:
    return {
        "title": event.title,
        **_date_values("begin", event.begin_date),
        **_date_values("end", event.end_date),
        **_date_values("finished", event.finished_date),
    }


def _event_from_row(row: Mapping[str, Any]) -> Event:
    begin_date = _row_date(row, "begin")
    end_date = _row_date(row, "end")
    if begin_date is None or end_date is None:
        raise ValueError(f"Stored event {row['id']} is missing its schedule")
    return Event(
        id=row["id"],
        title=row["title"],
        _begin_date=begin_date,
        _end_date=end_date,
        _finished_date=_row_date(row, "finished"),
    )


class SqlAlchemyEventRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Event) -> None:
        self.session.execute(insert(event_table).values(id=entity.id, **_event_values(entity)))

    def get(self, event_id: uuid.UUID) -> Event | None:
        stmt = select(event_table).where(event_table.c.id == event_id)
        row = self.session.execute(stmt).mappings().one_or_none()
        return _event_from_row(row) if row is not None else None

    def list_all(self) -> list[Event]:
        # Text years do not sort chronologically in SQL.
        rows = self.session.execute(select(event_table)).mappings()
        events = [_event_from_row(row) for row in rows]
        return sorted(events, key=lambda e: (e.begin_date, e.title))

    def update(self, entity: Event) -> None:
        stmt = (
            update(event_table)
            .where(event_table.c.id == entity.id)
            .values(**_event_values(entity))
        )
        result = cast("CursorResult[Any]", self.session.execute(stmt))
        if result.rowcount == 0:
            raise LookupError(f"Event {entity.id} is not stored")

    def remove(self, event_id: uuid.UUID) -> bool:
        stmt = delete(event_table).where(event_table.c.id == event_id)
        result = cast("CursorResult[Any]", self.session.execute(stmt))
        return result.rowcount > 0


class SqlAlchemySettingsRepository:
    """Key/value settings; only the date format is stored today."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_date_format(self) -> DateFormat | None:
        value = self._get(DATE_FORMAT_KEY)
        if value is None:
            return None
        try:
            return DateFormat(value)
        except ValueError:
            log.warning("Ignoring unknown stored date format %r", value)
            return None

    def set_date_format(self, date_format: DateFormat) -> None:
        self._set(DATE_FORMAT_KEY, date_format.value)

    def _get(self, key: str) -> str | None:
        stmt = select(setting_table.c.value).where(setting_table.c.key == key)
        return self.session.execute(stmt).scalar_one_or_none()

    def _set(self, key: str, value: str) -> None:
        if self._get(key) is None:
            stmt = insert(setting_table).values(key=key, value=value)
        else:
            stmt = update(setting_table).where(setting_table.c.key == key).values(value=value)
        self.session.execute(stmt)


if TYPE_CHECKING:
    from todolist.domain.ports.persistence import EventRepository, SettingsRepository

    _session_stub = cast("Session", object())
    _event_repo: EventRepository = SqlAlchemyEventRepository(_session_stub)
    _settings_repo: SettingsRepository = SqlAlchemySettingsRepository(_session_stub)
