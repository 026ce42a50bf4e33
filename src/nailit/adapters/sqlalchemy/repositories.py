"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, cast

from sqlalchemy import func, select, update
from sqlalchemy.exc import InterfaceError, OperationalError

from nailit.adapters.sqlalchemy.mappings import message_table, owner_table, project_table
from nailit.domain.errors import StoreUnavailable
from nailit.domain.model import Message, Owner, Project

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.orm import Session


def translate_store_errors[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Surface driver connectivity failures as ``StoreUnavailable``."""

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except (OperationalError, InterfaceError) as exc:
            raise StoreUnavailable(f"Store unavailable: {exc.orig}") from exc

    return wrapper


class SqlAlchemyOwnerRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Owner) -> None:
        self.session.add(entity)

    @translate_store_errors
    def get(self, owner_id: str) -> Owner | None:
        return self.session.get(Owner, owner_id)

    @translate_store_errors
    def get_by_email(self, email: str) -> Owner | None:
        stmt = select(Owner).where(owner_table.c.email == email)
        return self.session.execute(stmt).scalar_one_or_none()

    @translate_store_errors
    def list_all(self) -> list[Owner]:
        stmt = select(Owner).order_by(owner_table.c.email, owner_table.c.id)
        return list(self.session.execute(stmt).scalars())


class SqlAlchemyProjectRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Project) -> None:
        self.session.add(entity)

    @translate_store_errors
    def get(self, project_id: str) -> Project | None:
        return self.session.get(Project, project_id)

    @translate_store_errors
    def list_all(self) -> list[Project]:
        stmt = select(Project).order_by(project_table.c.name, project_table.c.id)
        return list(self.session.execute(stmt).scalars())

    @translate_store_errors
    def list_for_owner(self, owner_id: str) -> list[Project]:
        stmt = (
            select(Project)
            .where(project_table.c.owner_id == owner_id)
            .order_by(project_table.c.name, project_table.c.id)
        )
        return list(self.session.execute(stmt).scalars())

    @translate_store_errors
    def update_owner(self, project_id: str, owner_id: str) -> None:
        stmt = update(Project).where(project_table.c.id == project_id).values(owner_id=owner_id)
        self.session.execute(stmt)


class SqlAlchemyMessageRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Message) -> None:
        self.session.add(entity)

    @translate_store_errors
    def list_all(self) -> list[Message]:
        stmt = select(Message).order_by(message_table.c.created_at, message_table.c.id)
        return list(self.session.execute(stmt).scalars())

    @translate_store_errors
    def update_owner(self, message_id: str, owner_id: str) -> None:
        stmt = update(Message).where(message_table.c.id == message_id).values(owner_id=owner_id)
        self.session.execute(stmt)

    @translate_store_errors
    def update_project(self, message_id: str, project_id: str | None) -> None:
        stmt = (
            update(Message).where(message_table.c.id == message_id).values(project_id=project_id)
        )
        self.session.execute(stmt)

    @translate_store_errors
    def count_for_project(self, project_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(message_table)
            .where(message_table.c.project_id == project_id)
        )
        return int(self.session.execute(stmt).scalar_one())


if TYPE_CHECKING:
    from nailit.domain.ports.persistence import (
        MessageRepository,
        OwnerRepository,
        ProjectRepository,
    )

    _session_stub = cast("Session", object())
    _owner_repo: OwnerRepository = SqlAlchemyOwnerRepository(_session_stub)
    _project_repo: ProjectRepository = SqlAlchemyProjectRepository(_session_stub)
    _message_repo: MessageRepository = SqlAlchemyMessageRepository(_session_stub)
