"""Point-in-time capture of the store used for one reconciliation run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from nailit.domain.model import MessageRef, OwnerRef, ProjectRef

if TYPE_CHECKING:
    from nailit.domain.ports.unit_of_work import MaintenanceRepositories


@dataclass(frozen=True, slots=True)
class ValidEntitySets:
    owner_ids: frozenset[str]
    project_ids: frozenset[str]

    def has_owner(self, owner_id: str) -> bool:
        return owner_id in self.owner_ids

    def has_project(self, project_id: str) -> bool:
        return project_id in self.project_ids


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Owners, projects and messages as they were when the run started."""

    owners: tuple[OwnerRef, ...]
    projects: tuple[ProjectRef, ...]
    messages: tuple[MessageRef, ...]
    valid: ValidEntitySets


def take_snapshot(repositories: MaintenanceRepositories) -> Snapshot:
    """Read the full owner, project and message sets once.

    Messages are re-sorted into creation order here so that downstream stages
    never depend on the iteration order of a particular store.
    """

    owners = tuple(
        sorted(
            (OwnerRef.from_owner(owner) for owner in repositories.owners.list_all()),
            key=lambda ref: (ref.email, ref.id),
        )
    )
    projects = tuple(
        sorted(
            (ProjectRef.from_project(project) for project in repositories.projects.list_all()),
            key=lambda ref: (ref.name, ref.id),
        )
    )
    messages = tuple(
        sorted(
            (MessageRef.from_message(message) for message in repositories.messages.list_all()),
            key=lambda ref: ref.creation_order,
        )
    )
    return Snapshot(
        owners=owners,
        projects=projects,
        messages=messages,
        valid=ValidEntitySets(
            owner_ids=frozenset(owner.id for owner in owners),
            project_ids=frozenset(project.id for project in projects),
        ),
    )
