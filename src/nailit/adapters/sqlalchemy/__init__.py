"""SQLAlchemy adapter package for NailIt."""

from __future__ import annotations

from .mappings import (
    mapper_registry,
    message_table,
    owner_table,
    project_table,
    start_mappers,
)
from .repositories import (
    SqlAlchemyMessageRepository,
    SqlAlchemyOwnerRepository,
    SqlAlchemyProjectRepository,
)

__all__ = [
    "SqlAlchemyMessageRepository",
    "SqlAlchemyOwnerRepository",
    "SqlAlchemyProjectRepository",
    "mapper_registry",
    "message_table",
    "owner_table",
    "project_table",
    "start_mappers",
]
