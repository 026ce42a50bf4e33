"""Project ownership transfer.

Moves projects to a chosen owner, typically after a homeowner signed in again
through OAuth and received a fresh account id while their projects still point
at the old one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from nailit.domain.errors import InvalidTarget
from nailit.domain.model import OwnerRef, ProjectRef

if TYPE_CHECKING:
    from collections.abc import Callable

    from nailit.domain.ports.unit_of_work import MaintenanceUnitOfWork

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProjectTransfer:
    project: ProjectRef
    previous_owner_id: str
    message_count: int


@dataclass(frozen=True, slots=True)
class TransferResult:
    """Outcome of a project ownership transfer."""

    target: OwnerRef
    transfers: tuple[ProjectTransfer, ...]
    dry_run: bool

    @property
    def transferred(self) -> int:
        return 0 if self.dry_run else len(self.transfers)


def transfer_projects(
    *,
    unit_of_work_factory: Callable[[], MaintenanceUnitOfWork],
    target_owner_id: str,
    name_contains: str | None = None,
    dry_run: bool = False,
) -> TransferResult:
    """Reassign projects not owned by ``target_owner_id`` to that owner.

    ``name_contains`` narrows the selection with a case-insensitive substring
    match on the project name. Projects already owned by the target are skipped,
    so repeating a transfer is a no-op.
    """

    needle = name_contains.casefold() if name_contains else None
    with unit_of_work_factory() as uow:
        repositories = uow.repositories
        target = repositories.owners.get(target_owner_id)
        if target is None:
            raise InvalidTarget(
                "owner",
                target_owner_id,
                (owner.id for owner in repositories.owners.list_all()),
            )

        selected = [
            ProjectRef.from_project(project)
            for project in repositories.projects.list_all()
            if project.owner_id != target_owner_id
            and (needle is None or needle in project.name.casefold())
        ]
        selected.sort(key=lambda ref: (ref.name, ref.id))

        transfers: list[ProjectTransfer] = []
        for project in selected:
            transfers.append(
                ProjectTransfer(
                    project=project,
                    previous_owner_id=project.owner_id,
                    message_count=repositories.messages.count_for_project(project.id),
                )
            )
            if dry_run:
                continue
            repositories.projects.update_owner(project.id, target_owner_id)
            log.info(
                "Transferred project %r (%s) from owner %s to %s",
                project.name,
                project.id,
                project.owner_id,
                target_owner_id,
            )

        if transfers and not dry_run:
            uow.commit()

        return TransferResult(
            target=OwnerRef.from_owner(target),
            transfers=tuple(transfers),
            dry_run=dry_run,
        )
