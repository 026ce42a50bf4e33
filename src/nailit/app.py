"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from nailit.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyMaintenanceUnitOfWork,
    is_started,
    startup,
)
from nailit.domain.ownership import TransferResult, transfer_projects
from nailit.domain.ports.unit_of_work import MaintenanceUnitOfWork
from nailit.domain.provisioning import ProvisionResult, provision_owner
from nailit.domain.reconciliation import ReferenceReconciler

if TYPE_CHECKING:
    from nailit.domain.reconciliation import ReconcileOptions, ReconciliationReport

UnitOfWorkFactory = Callable[[], MaintenanceUnitOfWork]


log = getLogger(__name__)


def _resolve_unit_of_work(factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if factory is not None:
        return factory
    if not is_started():
        startup()
    return SqlAlchemyMaintenanceUnitOfWork


def analyze_message_references(
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ReconciliationReport:
    """Report dangling owner/project references on stored messages."""

    reconciler = ReferenceReconciler(_resolve_unit_of_work(unit_of_work_factory))
    return reconciler.analyze()


def reconcile_message_references(
    options: ReconcileOptions,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ReconciliationReport:
    """Repair dangling message references according to ``options``."""

    reconciler = ReferenceReconciler(_resolve_unit_of_work(unit_of_work_factory))
    return reconciler.reconcile(options)


def transfer_project_ownership(
    *,
    target_owner_id: str,
    name_contains: str | None = None,
    dry_run: bool = False,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> TransferResult:
    """Move matching projects to ``target_owner_id``."""

    log.info(
        "Starting project transfer: target=%s, name_contains=%s, dry_run=%s",
        target_owner_id,
        name_contains,
        dry_run,
    )
    result = transfer_projects(
        unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory),
        target_owner_id=target_owner_id,
        name_contains=name_contains,
        dry_run=dry_run,
    )
    log.info(
        "Finished project transfer: selected=%s, transferred=%s",
        len(result.transfers),
        result.transferred,
    )
    return result


def create_owner(
    *,
    email: str,
    name: str | None = None,
    project_name: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ProvisionResult:
    """Create an owner (and optional starter project) unless it already exists."""

    return provision_owner(
        unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory),
        email=email,
        name=name,
        project_name=project_name,
    )
