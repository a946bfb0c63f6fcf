"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date as python_date
from logging import getLogger
from typing import TYPE_CHECKING, Protocol
from uuid import UUID

from todolist.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from todolist.config.display import get_display_config
from todolist.domain.agenda import events_visible_on, overdue_events
from todolist.domain.date_text import parse_date
from todolist.domain.dates import Date
from todolist.domain.events import Event
from todolist.domain.ports.unit_of_work import TodoUnitOfWork

if TYPE_CHECKING:
    from todolist.domain.enums import DateFormat

UnitOfWorkFactory = Callable[[], TodoUnitOfWork]
DateInput = Date | str


log = getLogger(__name__)


class Clock(Protocol):
    def __call__(self) -> python_date: ...


class EventNotFoundError(LookupError):
    """Raised when no stored event matches the requested id."""


def _system_today() -> python_date:
    return python_date.today()


def _unit_of_work(factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if factory is not None:
        return factory
    if not is_started():
        startup()
    return SqlAlchemyUnitOfWork


def today(*, clock: Clock = _system_today) -> Date:
    return Date.from_python(clock())


def _stored_or_default_format(uow: TodoUnitOfWork) -> DateFormat:
    stored = uow.repositories.settings.get_date_format()
    return stored if stored is not None else get_display_config().date_format


def get_date_format(*, unit_of_work_factory: UnitOfWorkFactory | None = None) -> DateFormat:
    """Active date format: the stored setting, else the environment, else MDY."""

    with _unit_of_work(unit_of_work_factory)() as uow:
        return _stored_or_default_format(uow)


def set_date_format(
    date_format: DateFormat,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> None:
    with _unit_of_work(unit_of_work_factory)() as uow:
        uow.repositories.settings.set_date_format(date_format)
        uow.commit()
    log.info("Date format set to %s", date_format.label)


def read_date(value: DateInput, date_format: DateFormat) -> Date:
    """Return ``value`` as a ``Date``; text is parsed in ``date_format``."""

    if isinstance(value, Date):
        return value
    parsed = parse_date(value, date_format)
    if parsed is None:
        raise ValueError(f"Could not read {value!r} as a date in {date_format.label} format")
    return parsed


def _read_optional(value: DateInput | None, date_format: DateFormat) -> Date | None:
    return None if value is None else read_date(value, date_format)


def _require_event(uow: TodoUnitOfWork, event_id: UUID) -> Event:
    event = uow.repositories.events.get(event_id)
    if event is None:
        raise EventNotFoundError(f"No event with id {event_id}")
    return event


def resolve_event_id(
    reference: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> UUID:
    """Accept a full event id or an unambiguous prefix of one."""

    try:
        return UUID(reference)
    except ValueError:
        pass
    prefix = reference.strip().lower()
    if not prefix:
        raise EventNotFoundError("Empty event id")
    with _unit_of_work(unit_of_work_factory)() as uow:
        matches = [e.id for e in uow.repositories.events.list_all() if str(e.id).startswith(prefix)]
    if not matches:
        raise EventNotFoundError(f"No event id starts with {reference!r}")
    if len(matches) > 1:
        raise EventNotFoundError(f"Event id prefix {reference!r} is ambiguous")
    return matches[0]


def add_event(
    title: str,
    begin: DateInput,
    end: DateInput,
    *,
    date_format: DateFormat | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> Event:
    with _unit_of_work(unit_of_work_factory)() as uow:
        effective_format = date_format or _stored_or_default_format(uow)
        event = Event.scheduled(
            read_date(begin, effective_format),
            read_date(end, effective_format),
            title,
        )
        uow.repositories.events.add(event)
        uow.commit()
    log.info("Added event %s (%s .. %s)", event.id, event.begin_date, event.end_date)
    return event


def get_events(*, unit_of_work_factory: UnitOfWorkFactory | None = None) -> list[Event]:
    with _unit_of_work(unit_of_work_factory)() as uow:
        return uow.repositories.events.list_all()


def agenda(
    day: Date | None = None,
    *,
    clock: Clock = _system_today,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[Event]:
    """Events to show on ``day`` (today by default)."""

    events = get_events(unit_of_work_factory=unit_of_work_factory)
    return events_visible_on(events, day or today(clock=clock))


def overdue(
    as_of: Date | None = None,
    *,
    clock: Clock = _system_today,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[Event]:
    events = get_events(unit_of_work_factory=unit_of_work_factory)
    return overdue_events(events, as_of or today(clock=clock))


def _change_event(
    event_id: UUID,
    change: Callable[[Event, TodoUnitOfWork], None],
    unit_of_work_factory: UnitOfWorkFactory | None,
) -> Event:
    with _unit_of_work(unit_of_work_factory)() as uow:
        event = _require_event(uow, event_id)
        change(event, uow)
        uow.repositories.events.update(event)
        uow.commit()
    return event


def finish_event(
    event_id: UUID,
    on: Date | None = None,
    *,
    clock: Clock = _system_today,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> Event:
    finished_on = on or today(clock=clock)
    event = _change_event(
        event_id,
        lambda e, _uow: e.mark_finished(finished_on),
        unit_of_work_factory,
    )
    log.info("Finished event %s on %s", event.id, finished_on)
    return event


def unfinish_event(
    event_id: UUID,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> Event:
    event = _change_event(event_id, lambda e, _uow: e.mark_unfinished(), unit_of_work_factory)
    log.info("Reopened event %s", event.id)
    return event


def rename_event(
    event_id: UUID,
    title: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> Event:
    event = _change_event(event_id, lambda e, _uow: e.rename(title), unit_of_work_factory)
    log.info("Renamed event %s", event.id)
    return event


def move_event(
    event_id: UUID,
    *,
    begin: DateInput | None = None,
    end: DateInput | None = None,
    date_format: DateFormat | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> Event:
    """Move either bound; the other one follows when the move would invert the range."""

    def change(event: Event, uow: TodoUnitOfWork) -> None:
        effective_format = date_format or _stored_or_default_format(uow)
        new_begin = _read_optional(begin, effective_format)
        new_end = _read_optional(end, effective_format)
        if new_begin is not None and new_end is not None:
            event.reschedule(begin_date=new_begin, end_date=new_end)
        elif new_begin is not None:
            event.move_begin_date(new_begin)
        elif new_end is not None:
            event.move_end_date(new_end)

    event = _change_event(event_id, change, unit_of_work_factory)
    log.info("Moved event %s to %s .. %s", event.id, event.begin_date, event.end_date)
    return event


def remove_event(
    event_id: UUID,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> None:
    with _unit_of_work(unit_of_work_factory)() as uow:
        if not uow.repositories.events.remove(event_id):
            raise EventNotFoundError(f"No event with id {event_id}")
        uow.commit()
    log.info("Removed event %s", event_id)
