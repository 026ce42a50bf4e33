"""Reconciliation of dangling owner/project references on ingested messages.

Layered flow of one run:
1) take a snapshot of owners, projects and messages
2) validate operator-supplied targets against the snapshot
3) detect messages whose references do not resolve
4) plan repairs (reassign, clear, or leave unfixable)
5) apply repairs sequentially and commit, unless this is a dry run
"""

from __future__ import annotations

from .contracts import (
    PlannedRepair,
    ReconcileOptions,
    ReconciliationReport,
    ReferenceField,
    RepairAction,
    RepairOutcome,
    RepairStatus,
    RunMode,
)
from .detect import Findings, find_orphaned_references
from .engine import ReferenceReconciler
from .snapshot import Snapshot, ValidEntitySets, take_snapshot

__all__ = [
    "Findings",
    "PlannedRepair",
    "ReconcileOptions",
    "ReconciliationReport",
    "ReferenceField",
    "ReferenceReconciler",
    "RepairAction",
    "RepairOutcome",
    "RepairStatus",
    "RunMode",
    "Snapshot",
    "ValidEntitySets",
    "find_orphaned_references",
    "take_snapshot",
]
