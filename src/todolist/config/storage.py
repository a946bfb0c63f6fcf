"""Where the to-do list database lives."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "todolist"
DEFAULT_DB_FILENAME: Final[str] = "todolist.db"
DATA_DIR_ENV_VAR: Final[str] = "TODOLIST_DATA_DIR"
DATABASE_URI_ENV_VAR: Final[str] = "DATABASE_URI"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Resolved data directory; the database file is created inside it on demand."""

    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME

    def database_uri(self) -> str:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite+pysqlite:///{self.data_dir / self.database_filename}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def _platform_data_home() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        return Path(base) if base else (Path.home() / "AppData" / "Local")
    base = os.getenv("XDG_DATA_HOME")
    return Path(base) if base else (Path.home() / ".local" / "share")


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv(DATA_DIR_ENV_VAR)
    data_dir = Path(env_dir) if env_dir else _platform_data_home() / APP_DIR_NAME
    return StorageConfig(data_dir=data_dir.expanduser().resolve())


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    """``DATABASE_URI`` if set, else a SQLite file in the data directory."""

    env_uri = os.getenv(DATABASE_URI_ENV_VAR)
    if env_uri:
        return DatabaseConfig(uri=env_uri)
    return DatabaseConfig(uri=(storage or get_storage_config()).database_uri())
