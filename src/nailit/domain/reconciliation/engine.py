"""Orchestrator for message reference reconciliation.

Every run opens its own unit of work from the factory, reads a full snapshot
before any write and applies repairs sequentially from that snapshot. Messages
created after the snapshot are not visited.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from nailit.domain.errors import InvalidTarget

from .apply import apply_repairs, plan_repairs
from .contracts import (
    ReconcileOptions,
    ReconciliationReport,
    ReferenceField,
    RepairStatus,
    RunMode,
)
from .detect import Findings, find_orphaned_references
from .snapshot import Snapshot, take_snapshot

if TYPE_CHECKING:
    from collections.abc import Callable

    from nailit.domain.ports.unit_of_work import MaintenanceUnitOfWork

    from .contracts import RepairOutcome

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ReferenceReconciler:
    """Detect and repair dangling owner/project references on messages."""

    unit_of_work_factory: Callable[[], MaintenanceUnitOfWork]

    def analyze(self) -> ReconciliationReport:
        """Report dangling references without writing anything."""

        with self.unit_of_work_factory() as uow:
            snapshot = take_snapshot(uow.repositories)
        findings = find_orphaned_references(snapshot)
        _log_findings(snapshot, findings)
        return _build_report(RunMode.REPORT, snapshot, findings)

    def reconcile(self, options: ReconcileOptions | None = None) -> ReconciliationReport:
        """Repair dangling references according to ``options``.

        Raises ``InvalidTarget`` before any write when a supplied target does not
        exist in the snapshot. Store failures propagate unchanged.
        """

        effective = options or ReconcileOptions()
        mode = RunMode.DRY_RUN if effective.dry_run else RunMode.FIX
        log.info(
            "Starting reference reconciliation: mode=%s, target_owner=%s, target_project=%s",
            mode,
            effective.target_owner_id,
            effective.target_project_id,
        )

        with self.unit_of_work_factory() as uow:
            snapshot = take_snapshot(uow.repositories)
            _validate_targets(snapshot, effective)
            findings = find_orphaned_references(snapshot)
            _log_findings(snapshot, findings)
            repairs = plan_repairs(snapshot, findings, effective)
            outcomes = apply_repairs(
                repairs,
                uow.repositories.messages,
                dry_run=effective.dry_run,
            )
            if any(outcome.status is RepairStatus.APPLIED for outcome in outcomes):
                uow.commit()

        report = _build_report(mode, snapshot, findings, outcomes)
        log.info(
            "Finished reference reconciliation: fixed=%s, would_fix=%s, unfixed=%s",
            report.fixed_count,
            report.would_fix_count,
            len(report.unfixed),
        )
        return report


def _validate_targets(snapshot: Snapshot, options: ReconcileOptions) -> None:
    valid = snapshot.valid
    if options.target_owner_id is not None and not valid.has_owner(options.target_owner_id):
        raise InvalidTarget(
            ReferenceField.OWNER,
            options.target_owner_id,
            (owner.id for owner in snapshot.owners),
        )
    if options.target_project_id is not None and not valid.has_project(
        options.target_project_id
    ):
        raise InvalidTarget(
            ReferenceField.PROJECT,
            options.target_project_id,
            (project.id for project in snapshot.projects),
        )


def _log_findings(snapshot: Snapshot, findings: Findings) -> None:
    log.info(
        "Scanned %s messages against %s owners and %s projects: "
        "invalid_owner=%s, invalid_project=%s, orphaned_projects=%s",
        len(snapshot.messages),
        len(snapshot.owners),
        len(snapshot.projects),
        len(findings.invalid_owner_refs),
        len(findings.invalid_project_refs),
        len(findings.orphaned_projects),
    )


def _build_report(
    mode: RunMode,
    snapshot: Snapshot,
    findings: Findings,
    outcomes: tuple[RepairOutcome, ...] = (),
) -> ReconciliationReport:
    return ReconciliationReport(
        mode=mode,
        total_messages=len(snapshot.messages),
        valid_owners=snapshot.owners,
        valid_projects=snapshot.projects,
        invalid_owner_refs=findings.invalid_owner_refs,
        invalid_project_refs=findings.invalid_project_refs,
        orphaned_projects=findings.orphaned_projects,
        outcomes=outcomes,
    )
