from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import text

from nailit.adapters.sqlalchemy.repositories import (
    SqlAlchemyMessageRepository,
    SqlAlchemyOwnerRepository,
    SqlAlchemyProjectRepository,
)
from nailit.domain.errors import StoreUnavailable
from nailit.domain.model import Message
from nailit.domain.reconciliation import ReconcileOptions, ReferenceReconciler
from tests.helpers.maintenance import make_message, make_owner, make_project

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.engine import Engine
    from sqlalchemy.orm import Session

    from nailit.adapters.sqlalchemy.unit_of_work import SqlAlchemyMaintenanceUnitOfWork


def test_owner_repository_lookups(sqlite_session: Session) -> None:
    repo = SqlAlchemyOwnerRepository(sqlite_session)
    repo.add(make_owner("U2", email="zoe@example.com"))
    repo.add(make_owner("U1", email="adam@example.com"))
    sqlite_session.commit()

    assert [owner.id for owner in repo.list_all()] == ["U1", "U2"]
    owner = repo.get_by_email("zoe@example.com")
    assert owner is not None
    assert owner.id == "U2"
    assert repo.get("U-missing") is None


def test_project_repository_lists_and_reassigns(sqlite_session: Session) -> None:
    repo = SqlAlchemyProjectRepository(sqlite_session)
    repo.add(make_project("P2", owner_id="U1", name="Kitchen"))
    repo.add(make_project("P1", owner_id="U1", name="Bathroom"))
    repo.add(make_project("P3", owner_id="U2", name="Attic"))
    sqlite_session.commit()

    assert [project.id for project in repo.list_all()] == ["P3", "P1", "P2"]
    assert [project.id for project in repo.list_for_owner("U1")] == ["P1", "P2"]

    repo.update_owner("P3", "U1")
    sqlite_session.commit()
    sqlite_session.expire_all()

    project = repo.get("P3")
    assert project is not None
    assert project.owner_id == "U1"


def test_message_repository_stores_dangling_references(sqlite_session: Session) -> None:
    repo = SqlAlchemyMessageRepository(sqlite_session)
    repo.add(make_message("M1", owner_id="U-never-existed", project_id="P-never-existed"))
    sqlite_session.commit()

    (message,) = repo.list_all()
    assert message.owner_id == "U-never-existed"
    assert message.project_id == "P-never-existed"


def test_message_repository_orders_by_creation_then_id(sqlite_session: Session) -> None:
    repo = SqlAlchemyMessageRepository(sqlite_session)
    repo.add(make_message("M3", minute=1))
    repo.add(make_message("M2", minute=0))
    repo.add(make_message("M1", minute=1))
    sqlite_session.commit()

    assert [message.id for message in repo.list_all()] == ["M2", "M1", "M3"]


def test_message_repository_updates_single_fields(sqlite_session: Session) -> None:
    repo = SqlAlchemyMessageRepository(sqlite_session)
    repo.add(make_message("M1", owner_id="U-old", project_id="P-old"))
    repo.add(make_message("M2", owner_id="U-old", project_id="P-old", minute=1))
    sqlite_session.commit()

    repo.update_owner("M1", "U1")
    repo.update_project("M1", None)
    sqlite_session.commit()
    sqlite_session.expire_all()

    first = sqlite_session.get(Message, "M1")
    second = sqlite_session.get(Message, "M2")
    assert first is not None
    assert second is not None
    assert (first.owner_id, first.project_id) == ("U1", None)
    assert (second.owner_id, second.project_id) == ("U-old", "P-old")


def test_message_repository_counts_per_project(sqlite_session: Session) -> None:
    repo = SqlAlchemyMessageRepository(sqlite_session)
    repo.add(make_message("M1", project_id="P1"))
    repo.add(make_message("M2", project_id="P1", minute=1))
    repo.add(make_message("M3", project_id="P2", minute=2))
    sqlite_session.commit()

    assert repo.count_for_project("P1") == 2
    assert repo.count_for_project("P-missing") == 0


def test_missing_table_surfaces_as_store_unavailable(
    sqlite_engine: Engine,
    sqlite_unit_of_work: Callable[[], SqlAlchemyMaintenanceUnitOfWork],
) -> None:
    with sqlite_unit_of_work() as uow:
        uow.repositories.owners.add(make_owner("U1"))
        uow.commit()
    with sqlite_engine.begin() as connection:
        connection.execute(text("DROP TABLE email_message"))

    with pytest.raises(StoreUnavailable, match="no such table"):
        ReferenceReconciler(sqlite_unit_of_work).reconcile(ReconcileOptions(target_owner_id="U1"))


def test_commit_failure_surfaces_as_store_unavailable(
    sqlite_engine: Engine,
    sqlite_unit_of_work: Callable[[], SqlAlchemyMaintenanceUnitOfWork],
) -> None:
    with sqlite_engine.begin() as connection:
        connection.execute(text("DROP TABLE owner"))

    with pytest.raises(StoreUnavailable), sqlite_unit_of_work() as uow:
        uow.repositories.owners.add(make_owner("U1"))
        uow.commit()
