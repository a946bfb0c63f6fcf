"""Display preferences read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from todolist.domain.enums import DateFormat

from .errors import ConfigurationError

DATE_FORMAT_ENV_VAR: Final[str] = "TODOLIST_DATE_FORMAT"
DEFAULT_DATE_FORMAT: Final[DateFormat] = DateFormat.MDY


@dataclass(frozen=True, slots=True)
class DisplayConfig:
    date_format: DateFormat = DEFAULT_DATE_FORMAT


def parse_date_format(value: str) -> DateFormat:
    """Return the ``DateFormat`` named by ``value`` (case-insensitive)."""

    normalized = value.strip().upper()
    try:
        return DateFormat(normalized)
    except ValueError as exc:
        choices = ", ".join(member.value for member in DateFormat)
        raise ConfigurationError(
            f"Unknown date format {value!r}; expected one of: {choices}"
        ) from exc


def get_display_config() -> DisplayConfig:
    raw = os.getenv(DATE_FORMAT_ENV_VAR)
    if raw is None or not raw.strip():
        return DisplayConfig()
    return DisplayConfig(date_format=parse_date_format(raw))
