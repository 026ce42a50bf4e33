"""Repair planning and application for dangling message references.

Responsibilities of this stage:
- turn findings plus operator options into per-message repairs
- write repairs through the message repository, one update per field
- leave commit/rollback to the caller's unit of work

Owner repairs have no safe default and stay unfixed without a target.
Project repairs fall back to clearing the reference.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .contracts import (
    PlannedRepair,
    ReferenceField,
    RepairAction,
    RepairOutcome,
    RepairStatus,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nailit.domain.model import MessageRef
    from nailit.domain.ports.persistence import MessageRepository

    from .contracts import ReconcileOptions
    from .detect import Findings
    from .snapshot import Snapshot

log = logging.getLogger(__name__)

MISSING_OWNER_TARGET = "missing target"


def plan_repairs(
    snapshot: Snapshot,
    findings: Findings,
    options: ReconcileOptions,
) -> tuple[PlannedRepair, ...]:
    """Return repairs in message creation order, owner before project per message."""

    invalid_owner_ids = findings.invalid_owner_ids
    invalid_project_ids = findings.invalid_project_ids
    repairs: list[PlannedRepair] = []
    for message in snapshot.messages:
        if message.id in invalid_owner_ids:
            repairs.append(_plan_owner_repair(message, options.target_owner_id))
        if message.id in invalid_project_ids:
            repairs.append(_plan_project_repair(message, options.target_project_id))
    return tuple(repairs)


def _plan_owner_repair(message: MessageRef, target_owner_id: str | None) -> PlannedRepair:
    if target_owner_id is None:
        return PlannedRepair(
            message=message,
            field=ReferenceField.OWNER,
            action=RepairAction.UNFIXABLE,
            reason=MISSING_OWNER_TARGET,
        )
    return PlannedRepair(
        message=message,
        field=ReferenceField.OWNER,
        action=RepairAction.REASSIGN,
        new_value=target_owner_id,
    )


def _plan_project_repair(message: MessageRef, target_project_id: str | None) -> PlannedRepair:
    if target_project_id is None:
        return PlannedRepair(
            message=message,
            field=ReferenceField.PROJECT,
            action=RepairAction.CLEAR,
        )
    return PlannedRepair(
        message=message,
        field=ReferenceField.PROJECT,
        action=RepairAction.REASSIGN,
        new_value=target_project_id,
    )


def apply_repairs(
    repairs: Iterable[PlannedRepair],
    messages: MessageRepository,
    *,
    dry_run: bool,
) -> tuple[RepairOutcome, ...]:
    """Execute ``repairs`` sequentially; unfixable repairs are recorded, not raised."""

    outcomes: list[RepairOutcome] = []
    for repair in repairs:
        if repair.action is RepairAction.UNFIXABLE:
            log.warning(
                "Cannot repair %s reference on message %s: %s",
                repair.field,
                repair.message.external_message_id,
                repair.reason,
            )
            outcomes.append(RepairOutcome(repair, RepairStatus.SKIPPED))
            continue
        if dry_run:
            outcomes.append(RepairOutcome(repair, RepairStatus.WOULD_APPLY))
            continue
        _write(repair, messages)
        log.info(
            "Repaired %s reference on message %s: %s -> %s",
            repair.field,
            repair.message.external_message_id,
            repair.old_value,
            repair.new_value,
        )
        outcomes.append(RepairOutcome(repair, RepairStatus.APPLIED))
    return tuple(outcomes)


def _write(repair: PlannedRepair, messages: MessageRepository) -> None:
    if repair.field is ReferenceField.OWNER:
        if repair.new_value is None:
            raise ValueError("Owner repairs require a target owner id")
        messages.update_owner(repair.message.id, repair.new_value)
    else:
        messages.update_project(repair.message.id, repair.new_value)
