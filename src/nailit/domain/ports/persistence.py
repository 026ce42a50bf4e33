"""Ports for persisting owners, projects and ingested messages."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from nailit.domain.model import Message, Owner, Project

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...

    def list_all(self) -> Sequence[TEntity]: ...


@runtime_checkable
class OwnerRepository(Repository[Owner], Protocol):
    """Persistence contract for owners, listed by email."""

    def get(self, owner_id: str) -> Owner | None: ...

    def get_by_email(self, email: str) -> Owner | None: ...


@runtime_checkable
class ProjectRepository(Repository[Project], Protocol):
    """Persistence contract for projects, listed by name."""

    def get(self, project_id: str) -> Project | None: ...

    def list_for_owner(self, owner_id: str) -> Sequence[Project]: ...

    def update_owner(self, project_id: str, owner_id: str) -> None: ...


@runtime_checkable
class MessageRepository(Repository[Message], Protocol):
    """Persistence contract for ingested messages, listed in creation order."""

    def update_owner(self, message_id: str, owner_id: str) -> None: ...

    def update_project(self, message_id: str, project_id: str | None) -> None: ...

    def count_for_project(self, project_id: str) -> int: ...
