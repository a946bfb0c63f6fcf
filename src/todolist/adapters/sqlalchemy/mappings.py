"""SQLAlchemy table metadata for the to-do list."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any

from sqlalchemy import Column, Integer, MetaData, String, Table, Uuid

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)


def _date_columns(prefix: str, *, nullable: bool) -> list[Column[Any]]:
    # Years are unbounded, so they are stored as decimal text.
    return [
        Column(f"{prefix}_year", String, nullable=nullable),
        Column(f"{prefix}_month", Integer, nullable=nullable),
        Column(f"{prefix}_day", Integer, nullable=nullable),
    ]


event_table = Table(
    "event",
    metadata,
    Column("id", UUIDColumnType, primary_key=True),
    Column("title", String, nullable=False),
    *_date_columns("begin", nullable=False),
    *_date_columns("end", nullable=False),
    *_date_columns("finished", nullable=True),
)

setting_table = Table(
    "setting",
    metadata,
    Column("key", String, primary_key=True),
    Column("value", String, nullable=False),
)


def create_all_tables(engine: Engine) -> None:
    """Create any missing tables on ``engine``."""

    log.debug("Ensuring schema on %s", engine.url)
    metadata.create_all(engine, checkfirst=True)
