"""Parse free-form date text typed by a user.

Malformed text is ordinary input here, so ``parse_date`` reports it by returning
``None`` instead of raising.
"""

from __future__ import annotations

import re
import sys
from typing import Final

from todolist.domain.calendar_rules import is_valid_date
from todolist.domain.dates import Date
from todolist.domain.enums import DateFormat

DEFAULT_SEPARATORS: Final[str] = "/-"

_INTEGER_TOKEN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_SIGNS: Final[str] = "+-"


def _tokenize(text: str, separators: str, *, keep_signs: bool) -> list[str]:
    chars: list[str] = []
    at_token_start = True
    for index, char in enumerate(text):
        next_char = text[index + 1 : index + 2]
        keeps_sign = keep_signs and char in _SIGNS and at_token_start and next_char.isdigit()
        if char in separators and not keeps_sign:
            chars.append(" ")
            at_token_start = True
        else:
            chars.append(char)
            at_token_start = char.isspace()
    return "".join(chars).split()


def _is_integer(token: str) -> bool:
    if not _INTEGER_TOKEN.fullmatch(token):
        return False
    # int() refuses longer decimal strings; 0 means no limit.
    limit = sys.get_int_max_str_digits()
    return limit == 0 or len(token.lstrip(_SIGNS)) <= limit


def _fields(values: tuple[int, int, int], date_format: DateFormat) -> tuple[int, int, int]:
    """Reorder three parsed integers into (month, day, year)."""

    first, second, third = values
    match date_format:
        case DateFormat.DMY:
            return second, first, third
        case DateFormat.MDY:
            return first, second, third
        case DateFormat.YMD:
            return second, third, first


def _date_from_tokens(tokens: list[str], date_format: DateFormat) -> Date | None:
    if len(tokens) != 3 or not all(_is_integer(token) for token in tokens):
        return None
    first, second, third = (int(token) for token in tokens)
    month, day, year = _fields((first, second, third), date_format)
    if not is_valid_date(month, day, year):
        return None
    return Date(month, day, year)


def parse_date(
    text: str,
    date_format: DateFormat,
    separators: str = DEFAULT_SEPARATORS,
) -> Date | None:
    """Return the date written in ``text`` or ``None`` if there is none.

    Every character of ``separators`` is treated like whitespace. A sign that
    starts a field is kept, so ``"1/2/-45"`` reads year -45; when that reading
    is not a date, the text is read again with every separator dropped, so
    ``"3--1--2024"`` is still March 1 2024. The text must hold exactly three
    integer fields, in the order ``date_format`` names, that form a real
    calendar day. Fields longer than the interpreter's integer digit limit
    (``sys.get_int_max_str_digits``) are not integers.
    """

    for keep_signs in (True, False):
        tokens = _tokenize(text, separators, keep_signs=keep_signs)
        parsed = _date_from_tokens(tokens, date_format)
        if parsed is not None:
            return parsed
    return None


__all__ = ["DEFAULT_SEPARATORS", "parse_date"]
