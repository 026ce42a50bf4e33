"""Alembic runtime hook for nailit migrations (online mode only)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from alembic import context
from sqlalchemy import create_engine, pool

from nailit.adapters.sqlalchemy.mappings import mapper_registry

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

log = logging.getLogger(__name__)

config = context.config
target_metadata = mapper_registry.metadata


def _run(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=True,
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations() -> None:
    connection = config.attributes.get("connection")
    if connection is not None:
        _run(connection)
        return

    url = config.get_main_option("sqlalchemy.url")
    if not url:
        raise RuntimeError("sqlalchemy.url is not configured for nailit migrations")
    engine = create_engine(url, poolclass=pool.NullPool, future=True)
    try:
        with engine.connect() as fresh_connection:
            log.debug("Running migrations against %s", engine.url.render_as_string())
            _run(fresh_connection)
    finally:
        engine.dispose()


run_migrations()
