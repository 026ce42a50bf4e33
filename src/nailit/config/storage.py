"""Where the maintenance database lives."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "nailit"
DEFAULT_DB_FILENAME: Final[str] = "nailit.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Local SQLite location used when ``DATABASE_URI`` is not set."""

    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME

    def database_uri(self) -> str:
        data_dir = self.data_dir.expanduser().resolve()
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite+pysqlite:///{data_dir / self.database_filename}"


def _xdg_data_home() -> Path:
    base = os.getenv("XDG_DATA_HOME")
    return Path(base) if base else Path.home() / ".local" / "share"


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv("NAILIT_DATA_DIR")
    data_dir = Path(env_dir) if env_dir else _xdg_data_home() / APP_DIR_NAME
    return StorageConfig(data_dir=data_dir)


def get_database_uri(*, storage: StorageConfig | None = None) -> str:
    """``DATABASE_URI`` when set and non-blank, else the SQLite file under the data dir."""

    env_uri = (os.getenv("DATABASE_URI") or "").strip()
    if env_uri:
        return env_uri
    return (storage or get_storage_config()).database_uri()
