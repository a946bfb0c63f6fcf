"""Queries over collections of events."""

from __future__ import annotations

from typing import TYPE_CHECKING

from todolist.domain.enums import EventStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from todolist.domain.dates import Date
    from todolist.domain.events import Event


def events_visible_on(events: Iterable[Event], day: Date) -> list[Event]:
    """Events listed on ``day``, ordered by begin date, end date, then title."""

    visible = [event for event in events if event.is_visible_on(day)]
    return sorted(visible, key=lambda e: (e.begin_date, e.end_date, e.title))


def overdue_events(events: Iterable[Event], as_of: Date) -> list[Event]:
    overdue = [event for event in events if event.is_overdue(as_of)]
    return sorted(overdue, key=lambda e: (e.end_date, e.title))


def status_of(event: Event, as_of: Date) -> EventStatus:
    if event.is_finished:
        return EventStatus.FINISHED
    if event.is_overdue(as_of):
        return EventStatus.OVERDUE
    return EventStatus.OPEN


__all__ = ["events_visible_on", "overdue_events", "status_of"]
