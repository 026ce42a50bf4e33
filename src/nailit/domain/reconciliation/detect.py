"""Detection of dangling owner/project references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nailit.domain.model import MessageRef, ProjectRef

    from .snapshot import Snapshot


@dataclass(frozen=True, slots=True)
class Findings:
    invalid_owner_refs: tuple[MessageRef, ...]
    invalid_project_refs: tuple[MessageRef, ...]
    orphaned_projects: tuple[ProjectRef, ...]

    @property
    def invalid_owner_ids(self) -> frozenset[str]:
        return frozenset(message.id for message in self.invalid_owner_refs)

    @property
    def invalid_project_ids(self) -> frozenset[str]:
        return frozenset(message.id for message in self.invalid_project_refs)


def find_orphaned_references(snapshot: Snapshot) -> Findings:
    """Return messages (and projects) whose references do not resolve in ``snapshot``."""

    valid = snapshot.valid
    invalid_owner: list[MessageRef] = []
    invalid_project: list[MessageRef] = []
    for message in snapshot.messages:
        if not valid.has_owner(message.owner_id):
            invalid_owner.append(message)
        if message.project_id is not None and not valid.has_project(message.project_id):
            invalid_project.append(message)

    orphaned_projects = tuple(
        project for project in snapshot.projects if not valid.has_owner(project.owner_id)
    )
    return Findings(
        invalid_owner_refs=tuple(invalid_owner),
        invalid_project_refs=tuple(invalid_project),
        orphaned_projects=orphaned_projects,
    )
