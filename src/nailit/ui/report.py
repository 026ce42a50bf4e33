"""Plain-text rendering of maintenance results for terminal output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nailit.config.maintenance import DEFAULT_SUBJECT_PREVIEW_LENGTH
from nailit.domain.reconciliation import RepairAction, RepairStatus, RunMode

if TYPE_CHECKING:
    from nailit.domain.model import MessageRef
    from nailit.domain.ownership import TransferResult
    from nailit.domain.provisioning import ProvisionResult
    from nailit.domain.reconciliation import ReconciliationReport, RepairOutcome

_MODE_LABELS = {
    RunMode.REPORT: "REPORT ONLY",
    RunMode.DRY_RUN: "DRY RUN",
    RunMode.FIX: "FIX",
}


def preview_subject(subject: str | None, length: int = DEFAULT_SUBJECT_PREVIEW_LENGTH) -> str:
    if not subject:
        return "(no subject)"
    if len(subject) <= length:
        return subject
    return subject[:length] + "..."


def render_reconciliation_report(
    report: ReconciliationReport,
    *,
    subject_preview_length: int = DEFAULT_SUBJECT_PREVIEW_LENGTH,
) -> str:
    """Render ``report`` as deterministic multi-line text."""

    lines = [
        "Email message reference reconciliation",
        f"Mode: {_MODE_LABELS[report.mode]}",
        "",
        "Store state:",
        f"   Valid owners: {len(report.valid_owners)}",
        f"   Valid projects: {len(report.valid_projects)}",
        f"   Email messages: {report.total_messages}",
        "",
        "Issues found:",
        f"   Invalid owner references: {len(report.invalid_owner_refs)}",
        f"   Invalid project references: {len(report.invalid_project_refs)}",
    ]

    if report.invalid_owner_refs:
        lines += ["", "Messages with invalid owner references:"]
        lines += [
            _detail(message, "owner_id", message.owner_id, subject_preview_length)
            for message in report.invalid_owner_refs
        ]

    if report.invalid_project_refs:
        lines += ["", "Messages with invalid project references:"]
        lines += [
            _detail(message, "project_id", message.project_id, subject_preview_length)
            for message in report.invalid_project_refs
        ]

    if report.orphaned_projects:
        lines += ["", "Projects whose owner no longer exists:"]
        lines += [
            f"   - {project.id}: {project.name} -> owner_id: {project.owner_id}"
            for project in report.orphaned_projects
        ]

    if report.has_issues or report.orphaned_projects:
        lines += ["", "Available targets:", "   Owners:"]
        lines += [f"     - {owner.id}: {owner.email}" for owner in report.valid_owners]
    if report.has_issues:
        lines.append("   Projects:")
        lines += [f"     - {project.id}: {project.name}" for project in report.valid_projects]

    if report.outcomes:
        lines += ["", "Repairs:"]
        lines += [_outcome_line(outcome) for outcome in report.outcomes]

    if report.mode is RunMode.FIX:
        lines += ["", f"Repair completed: {report.fixed_count} records fixed"]
    elif report.mode is RunMode.DRY_RUN:
        lines += ["", f"Dry run: {report.would_fix_count} records would be fixed"]
    if report.unfixed:
        lines.append(f"Unfixed records: {len(report.unfixed)}")

    if not report.has_issues and not report.orphaned_projects:
        lines += ["", "No dangling references found. All email messages have valid references."]
    elif not report.has_issues:
        lines += ["", "All email messages have valid references."]

    return "\n".join(lines)


def _detail(message: MessageRef, label: str, value: str | None, length: int) -> str:
    subject = preview_subject(message.subject, length)
    return f"   - {message.external_message_id}: {subject} -> {label}: {value}"


def _outcome_line(outcome: RepairOutcome) -> str:
    repair = outcome.repair
    ref = repair.message.external_message_id
    if outcome.status is RepairStatus.SKIPPED:
        return f"   Unfixable {repair.field} reference on {ref}: {repair.reason}"

    prefix = "Would fix" if outcome.status is RepairStatus.WOULD_APPLY else "Fixed"
    if repair.action is RepairAction.CLEAR:
        return f"   {prefix} {ref}: unassigned project {repair.old_value}"
    return f"   {prefix} {ref}: {repair.field} {repair.old_value} -> {repair.new_value}"


def render_transfer_result(result: TransferResult) -> str:
    lines = [f"Target owner: {result.target.email} ({result.target.id})"]
    if not result.transfers:
        lines.append("No projects to transfer.")
        return "\n".join(lines)

    verb = "Would transfer" if result.dry_run else "Transferred"
    lines += [
        f"   {verb} {transfer.project.name!r} ({transfer.project.id}) "
        f"from {transfer.previous_owner_id} with {transfer.message_count} emails"
        for transfer in result.transfers
    ]
    if result.dry_run:
        lines.append(f"Dry run: {len(result.transfers)} projects would be transferred")
    else:
        lines.append(f"Transfer completed: {result.transferred} projects transferred")
    return "\n".join(lines)


def render_provision_result(result: ProvisionResult) -> str:
    state = "Created" if result.created else "Existing"
    lines = [f"{state} owner: {result.owner.email} (ID: {result.owner.id})"]
    if result.project is not None:
        project_state = "Created" if result.project_created else "Existing"
        lines.append(f"{project_state} project: {result.project.name} (ID: {result.project.id})")
    return "\n".join(lines)


def render_failure_summary(command: str, error: Exception, *, mode: RunMode | None = None) -> str:
    """Summary printed to stdout when a command aborts; details go to stderr."""

    lines = [f"Command: {command}"]
    if mode is not None:
        lines.append(f"Mode: {_MODE_LABELS[mode]}")
    lines.append(f"Result: FAILED ({type(error).__name__})")
    if mode is RunMode.FIX:
        lines.append("Pending repairs were rolled back; re-run once the cause is fixed.")
    elif mode is not None:
        lines.append("No records were changed.")
    return "\n".join(lines)
