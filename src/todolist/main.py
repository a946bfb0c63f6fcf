# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from todolist.app import (
    add_event,
    agenda,
    finish_event,
    get_date_format,
    move_event,
    overdue,
    read_date,
    remove_event,
    rename_event,
    resolve_event_id,
    set_date_format,
    today,
    unfinish_event,
)
from todolist.config import ConfigurationError, configure_logging, parse_date_format
from todolist.domain.agenda import status_of
from todolist.domain.day_count import days_between, shift_by_days
from todolist.domain.enums import DateFormat

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from todolist.domain.dates import Date
    from todolist.domain.events import Event

log = logging.getLogger(__name__)

SHORT_ID_LENGTH = 8


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Keep a dated to-do list")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Add an event")
    add.add_argument("title", type=str, help="Event title")
    add.add_argument("--begin", type=str, help="First day of the event (defaults to today)")
    add.add_argument("--end", type=str, help="Last day of the event (defaults to the begin date)")

    listing = subparsers.add_parser("list", help="List events shown on a day")
    listing.add_argument("--on", type=str, help="Day to list (defaults to today)")

    late = subparsers.add_parser("overdue", help="List unfinished events past their end date")
    late.add_argument("--as-of", type=str, help="Reference day (defaults to today)")

    finish = subparsers.add_parser("finish", help="Mark an event as done")
    finish.add_argument("event_id", type=str, help="Event id or unique id prefix")
    finish.add_argument("--on", type=str, help="Completion day (defaults to today)")

    unfinish = subparsers.add_parser("unfinish", help="Mark an event as not done")
    unfinish.add_argument("event_id", type=str, help="Event id or unique id prefix")

    rename = subparsers.add_parser("rename", help="Change an event title")
    rename.add_argument("event_id", type=str, help="Event id or unique id prefix")
    rename.add_argument("title", type=str, help="New title")

    move = subparsers.add_parser("move", help="Move an event's begin and/or end date")
    move.add_argument("event_id", type=str, help="Event id or unique id prefix")
    move.add_argument("--begin", type=str, help="New begin date")
    move.add_argument("--end", type=str, help="New end date")

    remove = subparsers.add_parser("remove", help="Delete an event")
    remove.add_argument("event_id", type=str, help="Event id or unique id prefix")

    fmt = subparsers.add_parser("format", help="Show or set the date format")
    fmt.add_argument(
        "date_format",
        nargs="?",
        type=str,
        help=f"One of {', '.join(member.value for member in DateFormat)}",
    )

    days = subparsers.add_parser("days", help="Count the days between two dates")
    days.add_argument("first", type=str)
    days.add_argument("second", type=str)

    shift = subparsers.add_parser("shift", help="Add a number of days to a date")
    shift.add_argument("date", type=str)
    shift.add_argument("days", type=int, help="Days to add (negative to go back)")

    return parser.parse_args(list(argv))


def _format_event(event: Event, reference: Date, date_format: DateFormat) -> str:
    status = status_of(event, reference)
    short_id = str(event.id)[:SHORT_ID_LENGTH]
    return (
        f"{short_id}  {event.begin_date.to_text(date_format)} - "
        f"{event.end_date.to_text(date_format)}  [{status.value}]  {event.title}"
    )


def _print_events(events: Sequence[Event], reference: Date, date_format: DateFormat) -> None:
    if not events:
        print("No events.")
        return
    for event in events:
        print(_format_event(event, reference, date_format))


def _run(args: argparse.Namespace) -> None:  # noqa: C901, PLR0912
    if args.command == "format":
        if args.date_format is None:
            current = get_date_format()
            print(f"{current.value} ({current.label})")
        else:
            set_date_format(parse_date_format(args.date_format))
        return

    date_format = get_date_format()

    def optional_date(value: str | None) -> Date | None:
        return read_date(value, date_format) if value is not None else None

    if args.command == "add":
        begin = optional_date(args.begin) or today()
        end = optional_date(args.end) or begin
        event = add_event(args.title, begin, end)
        print(f"Added {str(event.id)[:SHORT_ID_LENGTH]}  {event.title}")
    elif args.command == "list":
        day = optional_date(args.on) or today()
        _print_events(agenda(day), day, date_format)
    elif args.command == "overdue":
        as_of = optional_date(args.as_of) or today()
        _print_events(overdue(as_of), as_of, date_format)
    elif args.command == "finish":
        finish_event(resolve_event_id(args.event_id), optional_date(args.on))
    elif args.command == "unfinish":
        unfinish_event(resolve_event_id(args.event_id))
    elif args.command == "rename":
        rename_event(resolve_event_id(args.event_id), args.title)
    elif args.command == "move":
        if args.begin is None and args.end is None:
            raise ValueError("move needs --begin and/or --end")
        event = move_event(
            resolve_event_id(args.event_id),
            begin=optional_date(args.begin),
            end=optional_date(args.end),
        )
        print(
            f"{event.title}: {event.begin_date.to_text(date_format)} - "
            f"{event.end_date.to_text(date_format)}"
        )
    elif args.command == "remove":
        remove_event(resolve_event_id(args.event_id))
    elif args.command == "days":
        print(days_between(read_date(args.first, date_format), read_date(args.second, date_format)))
    elif args.command == "shift":
        print(shift_by_days(read_date(args.date, date_format), args.days).to_text(date_format))
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        _run(parsed_args)
    except (ValueError, LookupError, ConfigurationError):
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
