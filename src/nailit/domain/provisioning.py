"""Idempotent owner provisioning for development and test stores."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from nailit.domain.model import Owner, OwnerRef, Project, ProjectRef, normalize_email

if TYPE_CHECKING:
    from collections.abc import Callable

    from nailit.domain.ports.unit_of_work import MaintenanceUnitOfWork

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProvisionResult:
    owner: OwnerRef
    created: bool
    project: ProjectRef | None = None
    project_created: bool = False


def provision_owner(
    *,
    unit_of_work_factory: Callable[[], MaintenanceUnitOfWork],
    email: str,
    name: str | None = None,
    project_name: str | None = None,
    project_description: str | None = None,
) -> ProvisionResult:
    """Return the owner for ``email``, creating it (and a starter project) if needed."""

    normalized = normalize_email(email)
    if project_name is not None and not project_name.strip():
        raise ValueError("Project name must not be blank")

    with unit_of_work_factory() as uow:
        repositories = uow.repositories
        owner = repositories.owners.get_by_email(normalized)
        created = owner is None
        if owner is None:
            owner = Owner(email=normalized, name=name)
            repositories.owners.add(owner)
            log.info("Created owner %s (%s)", owner.email, owner.id)
        else:
            log.info("Owner %s already exists (%s)", owner.email, owner.id)

        project: Project | None = None
        project_created = False
        if project_name is not None:
            wanted = project_name.strip()
            project = next(
                (p for p in repositories.projects.list_for_owner(owner.id) if p.name == wanted),
                None,
            )
            if project is None:
                project = Project(
                    name=wanted,
                    owner_id=owner.id,
                    description=project_description,
                )
                repositories.projects.add(project)
                project_created = True
                log.info("Created project %r (%s) for %s", project.name, project.id, owner.email)

        if created or project_created:
            uow.commit()

        return ProvisionResult(
            owner=OwnerRef.from_owner(owner),
            created=created,
            project=ProjectRef.from_project(project) if project is not None else None,
            project_created=project_created,
        )
