"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import MessageRepository, OwnerRepository, ProjectRepository, Repository
from .unit_of_work import (
    MaintenanceRepositories,
    MaintenanceUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "MaintenanceRepositories",
    "MaintenanceUnitOfWork",
    "MessageRepository",
    "OwnerRepository",
    "ProjectRepository",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
]
