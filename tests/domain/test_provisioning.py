from __future__ import annotations

import pytest

from nailit.domain.provisioning import provision_owner
from tests.helpers.maintenance import make_owner, make_project, scenario_store


def test_provision_creates_owner_with_normalized_email() -> None:
    store, factory = scenario_store()

    result = provision_owner(unit_of_work_factory=factory, email="  Jane@Example.COM ", name="Jane")

    assert result.created
    assert result.owner.email == "jane@example.com"
    assert result.owner.name == "Jane"
    assert result.project is None
    assert list(store.owners) == [result.owner.id]
    assert factory.last.committed


def test_provision_returns_existing_owner_without_commit() -> None:
    store, factory = scenario_store(owners=[make_owner("U1", email="jane@example.com")])

    result = provision_owner(unit_of_work_factory=factory, email="JANE@example.com")

    assert not result.created
    assert result.owner.id == "U1"
    assert len(store.owners) == 1
    assert not factory.last.committed


def test_provision_creates_starter_project_once() -> None:
    store, factory = scenario_store(owners=[make_owner("U1", email="jane@example.com")])

    first = provision_owner(
        unit_of_work_factory=factory,
        email="jane@example.com",
        project_name="Basement",
    )
    second = provision_owner(
        unit_of_work_factory=factory,
        email="jane@example.com",
        project_name="Basement",
    )

    assert first.project_created
    assert not second.project_created
    assert first.project is not None
    assert second.project == first.project
    assert len(store.projects) == 1


def test_provision_reuses_project_with_matching_name() -> None:
    _, factory = scenario_store(
        owners=[make_owner("U1", email="jane@example.com")],
        projects=[make_project("P1", owner_id="U1", name="Basement")],
    )

    result = provision_owner(
        unit_of_work_factory=factory,
        email="jane@example.com",
        project_name="Basement",
    )

    assert result.project is not None
    assert result.project.id == "P1"
    assert not factory.last.committed


@pytest.mark.parametrize(
    ("email", "project_name"),
    [("not-an-email", None), ("jane@example.com", "   ")],
)
def test_provision_rejects_invalid_input(email: str, project_name: str | None) -> None:
    store, factory = scenario_store()

    with pytest.raises(ValueError):  # noqa: PT011
        provision_owner(unit_of_work_factory=factory, email=email, project_name=project_name)

    assert factory.created == []
    assert store.owners == {}
