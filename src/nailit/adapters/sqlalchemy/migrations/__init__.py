"""Schema upgrades for the maintenance store."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Final

from alembic import command
from alembic.config import Config

from nailit.config.storage import get_database_uri

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

MIGRATIONS_PATH: Final[Path] = Path(__file__).resolve().parent
PROJECT_ROOT: Final[Path] = MIGRATIONS_PATH.parents[4]


def _script_location() -> Path:
    """``[tool.alembic] script_location`` from a source checkout, else this package."""

    try:
        with (PROJECT_ROOT / "pyproject.toml").open("rb") as pyproject_file:
            document = tomllib.load(pyproject_file)
    except FileNotFoundError:
        return MIGRATIONS_PATH

    configured = document.get("tool", {}).get("alembic", {}).get("script_location")
    if configured is None:
        return MIGRATIONS_PATH
    location = Path(configured)
    return location if location.is_absolute() else PROJECT_ROOT / location


def upgrade_head(*, engine: Engine | None = None) -> None:
    """Bring the schema to the latest revision.

    With ``engine`` the upgrade runs on one of its connections inside a single
    transaction; otherwise Alembic connects to ``get_database_uri()``.
    """

    config = Config()
    config.set_main_option("script_location", str(_script_location()))
    if engine is None:
        config.set_main_option("sqlalchemy.url", get_database_uri())
        command.upgrade(config, "head")
        return
    with engine.begin() as connection:
        config.attributes["connection"] = connection
        command.upgrade(config, "head")
