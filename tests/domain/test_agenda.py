from __future__ import annotations

from tests.helpers.events import make_event
from todolist.domain.agenda import events_visible_on, overdue_events, status_of
from todolist.domain.dates import Date
from todolist.domain.enums import EventStatus

TODAY = Date(6, 15, 2024)


def test_events_visible_on_filters_and_orders() -> None:
    later = make_event("Later", begin=Date(6, 14, 2024), end=Date(6, 30, 2024))
    earlier = make_event("Earlier", begin=Date(6, 1, 2024), end=Date(6, 20, 2024))
    same_begin = make_event("Alpha", begin=Date(6, 1, 2024), end=Date(6, 20, 2024))
    finished_early = make_event(
        "Done", begin=Date(6, 1, 2024), end=Date(6, 30, 2024), finished=Date(6, 2, 2024)
    )
    future = make_event("Future", begin=Date(7, 1, 2024), end=Date(7, 2, 2024))

    result = events_visible_on([later, earlier, finished_early, future, same_begin], TODAY)

    assert [event.title for event in result] == ["Alpha", "Earlier", "Later"]


def test_overdue_events_are_ordered_by_end_date() -> None:
    recent = make_event("Recent", begin=Date(6, 1, 2024), end=Date(6, 14, 2024))
    old = make_event("Old", begin=Date(5, 1, 2024), end=Date(5, 2, 2024))
    done = make_event("Done", begin=Date(5, 1, 2024), end=Date(5, 2, 2024), finished=TODAY)
    upcoming = make_event("Upcoming", begin=Date(6, 1, 2024), end=Date(6, 30, 2024))

    result = overdue_events([recent, done, upcoming, old], TODAY)

    assert [event.title for event in result] == ["Old", "Recent"]


def test_status_of_event() -> None:
    assert status_of(make_event(end=TODAY, begin=TODAY), TODAY) is EventStatus.OPEN
    assert status_of(make_event(begin=Date(6, 1, 2024), end=Date(6, 2, 2024)), TODAY) is (
        EventStatus.OVERDUE
    )
    assert status_of(make_event(begin=TODAY, finished=TODAY), TODAY) is EventStatus.FINISHED
