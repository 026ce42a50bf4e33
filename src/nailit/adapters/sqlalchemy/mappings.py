"""SQLAlchemy mapping metadata for the NailIt domain model."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from functools import cache

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    Index,
    String,
    Table,
    TypeDecorator,
    UniqueConstraint,
    orm,
)
from sqlalchemy.orm import configure_mappers

from nailit.domain.model import Message, Owner, Project

log = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Owner/project/message links are plain columns without FOREIGN KEY constraints:
# dangling references must be storable so reconciliation can find them.

owner_table = Table(
    "owner",
    mapper_registry.metadata,
    Column("id", String, primary_key=True),
    Column("email", String, nullable=False),
    Column("name", String, nullable=True),
    Column("created_at", UTCDateTime(), nullable=False),
    UniqueConstraint("email", name="uq_owner_email"),
)

project_table = Table(
    "project",
    mapper_registry.metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("owner_id", String, nullable=False),
    Column("description", String, nullable=True),
    Column("created_at", UTCDateTime(), nullable=False),
    Index("ix_project_owner_id", "owner_id"),
)

message_table = Table(
    "email_message",
    mapper_registry.metadata,
    Column("id", String, primary_key=True),
    Column("external_message_id", String, nullable=False),
    Column("subject", String, nullable=True),
    Column("owner_id", String, nullable=False),
    Column("project_id", String, nullable=True),
    Column("created_at", UTCDateTime(), nullable=False),
    UniqueConstraint("external_message_id", name="uq_email_message_external_message_id"),
    Index("ix_email_message_owner_id", "owner_id"),
    Index("ix_email_message_project_id", "project_id"),
    Index("ix_email_message_created_at", "created_at"),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(Owner, owner_table)
    mapper_registry.map_imperatively(Project, project_table)
    mapper_registry.map_imperatively(Message, message_table)

    configure_mappers()
    return mapper_registry
