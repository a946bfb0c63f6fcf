"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class DateFormat(StrEnum):
    """Order in which the day, month and year fields appear in text."""

    MDY = "MDY"
    DMY = "DMY"
    YMD = "YMD"

    @property
    def label(self) -> str:
        match self:
            case DateFormat.MDY:
                return "MONTH/DAY/YEAR"
            case DateFormat.DMY:
                return "DAY/MONTH/YEAR"
            case DateFormat.YMD:
                return "YEAR/MONTH/DAY"


class Ordering(IntEnum):
    BEFORE = -1
    EQUAL = 0
    AFTER = 1


class EventStatus(StrEnum):
    OPEN = "open"
    OVERDUE = "overdue"
    FINISHED = "finished"
