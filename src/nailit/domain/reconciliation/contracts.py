"""Shared reconciliation contract components.

This module holds the value types passed between the snapshot, detection,
repair and reporting stages:
- run options and run mode
- repair actions/statuses and per-message outcomes
- the final report returned to callers
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nailit.domain.model import MessageRef, OwnerRef, ProjectRef


class ReferenceField(StrEnum):
    """Foreign key on a message that reconciliation inspects."""

    OWNER = "owner"
    PROJECT = "project"


class RunMode(StrEnum):
    """How a reconciliation run treats the store."""

    REPORT = "report"
    DRY_RUN = "dry_run"
    FIX = "fix"


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconcileOptions:
    """Operator-selected repair policy for one run."""

    dry_run: bool = False
    target_owner_id: str | None = None
    target_project_id: str | None = None


class RepairAction(StrEnum):
    """Policy decision for one dangling reference."""

    REASSIGN = "reassign"
    CLEAR = "clear"
    UNFIXABLE = "unfixable"


class RepairStatus(StrEnum):
    """What happened to a planned repair."""

    APPLIED = "applied"
    WOULD_APPLY = "would_apply"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True, kw_only=True)
class PlannedRepair:
    """Repair decided from the snapshot, before touching the store."""

    message: MessageRef
    field: ReferenceField
    action: RepairAction
    new_value: str | None = None
    reason: str | None = None

    @property
    def old_value(self) -> str | None:
        if self.field is ReferenceField.OWNER:
            return self.message.owner_id
        return self.message.project_id


@dataclass(frozen=True, slots=True)
class RepairOutcome:
    repair: PlannedRepair
    status: RepairStatus


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconciliationReport:
    """Result of ``analyze`` or ``reconcile``; lists follow creation/name order."""

    mode: RunMode
    total_messages: int
    valid_owners: tuple[OwnerRef, ...]
    valid_projects: tuple[ProjectRef, ...]
    invalid_owner_refs: tuple[MessageRef, ...]
    invalid_project_refs: tuple[MessageRef, ...]
    orphaned_projects: tuple[ProjectRef, ...] = ()
    outcomes: tuple[RepairOutcome, ...] = ()

    @property
    def has_issues(self) -> bool:
        return bool(self.invalid_owner_refs or self.invalid_project_refs)

    @property
    def fixed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is RepairStatus.APPLIED)

    @property
    def would_fix_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is RepairStatus.WOULD_APPLY)

    @property
    def unfixed(self) -> tuple[MessageRef, ...]:
        return tuple(
            outcome.repair.message
            for outcome in self.outcomes
            if outcome.status is RepairStatus.SKIPPED
        )
