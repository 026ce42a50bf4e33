# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from nailit.app import (
    analyze_message_references,
    create_owner,
    reconcile_message_references,
    transfer_project_ownership,
)
from nailit.config import ConfigurationError, configure_logging, get_maintenance_config
from nailit.domain.errors import InvalidTarget
from nailit.domain.reconciliation import ReconcileOptions, RunMode
from nailit.ui.report import (
    render_failure_summary,
    render_provision_result,
    render_reconciliation_report,
    render_transfer_result,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from nailit.domain.reconciliation import ReconciliationReport

log = logging.getLogger(__name__)

_FIX_HINTS = (
    "To fix these issues, run:",
    "   # Dry run to see what would be changed:",
    "   nailit references --dry-run --fix",
    "",
    "   # Fix invalid owner references (pick a valid owner id):",
    "   nailit references --fix --target-user=<valid-owner-id>",
    "",
    "   # Fix invalid project references (pick a valid project id):",
    "   nailit references --fix --target-project=<valid-project-id>",
    "   # OR unassign invalid project references:",
    "   nailit references --fix",
)

_TRANSFER_HINTS = (
    "To move projects whose owner no longer exists, run:",
    "   nailit projects transfer --to-owner=<valid-owner-id> --dry-run",
    "   nailit projects transfer --to-owner=<valid-owner-id>",
)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="NailIt data maintenance")
    subparsers = parser.add_subparsers(dest="command", required=True)

    references = subparsers.add_parser(
        "references",
        help="Find and repair email messages with dangling owner/project references",
    )
    references.add_argument(
        "--fix",
        action="store_true",
        help="Repair dangling references instead of only reporting them",
    )
    references.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the repairs that would be made without writing",
    )
    references.add_argument(
        "--target-user",
        type=str,
        help="Existing owner id to assign to messages whose owner no longer exists",
    )
    references.add_argument(
        "--target-project",
        type=str,
        help="Existing project id for messages whose project no longer exists "
        "(default: unassign them)",
    )

    projects = subparsers.add_parser("projects", help="Project maintenance commands")
    projects_sub = projects.add_subparsers(dest="projects_command", required=True)
    transfer = projects_sub.add_parser("transfer", help="Transfer projects to an owner")
    transfer.add_argument(
        "--to-owner",
        type=str,
        required=True,
        help="Existing owner id that should own the projects",
    )
    transfer.add_argument(
        "--name-contains",
        type=str,
        help="Only transfer projects whose name contains this text (case-insensitive)",
    )
    transfer.add_argument(
        "--dry-run",
        action="store_true",
        help="List the projects that would be transferred without writing",
    )

    owner = subparsers.add_parser("owner", help="Owner management commands")
    owner_sub = owner.add_subparsers(dest="owner_command", required=True)
    owner_create = owner_sub.add_parser("create", help="Create an owner if it does not exist")
    owner_create.add_argument(
        "--email",
        type=str,
        required=True,
        help="Email address of the homeowner",
    )
    owner_create.add_argument(
        "--name",
        type=str,
        help="Optional display name",
    )
    owner_create.add_argument(
        "--project",
        type=str,
        help="Optional starter project to create for the owner",
    )

    return parser.parse_args(list(argv))


def _clean_target_id(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    if not stripped:
        raise ValueError("Target ids must not be blank")
    return stripped


def _build_reconcile_options(args: argparse.Namespace) -> ReconcileOptions | None:
    """Return options for ``reconcile``, or ``None`` when only a report is wanted."""

    target_owner = _clean_target_id(args.target_user)
    target_project = _clean_target_id(args.target_project)
    if not (args.fix or args.dry_run):
        if target_owner or target_project:
            log.warning("Targets are ignored without --fix or --dry-run")
        return None
    return ReconcileOptions(
        dry_run=args.dry_run,
        target_owner_id=target_owner,
        target_project_id=target_project,
    )


def _print_reconciliation(report: ReconciliationReport, preview_length: int) -> None:
    print(render_reconciliation_report(report, subject_preview_length=preview_length))
    if report.has_issues and report.mode is RunMode.REPORT:
        print()
        print("\n".join(_FIX_HINTS))
    if report.orphaned_projects:
        print()
        print("\n".join(_TRANSFER_HINTS))


def _run_mode(options: ReconcileOptions | None) -> RunMode:
    if options is None:
        return RunMode.REPORT
    return RunMode.DRY_RUN if options.dry_run else RunMode.FIX


def _command_name(args: argparse.Namespace) -> str:
    if args.command == "projects":
        return f"projects {args.projects_command}"
    if args.command == "owner":
        return f"owner {args.owner_command}"
    return str(args.command)


def _run(args: argparse.Namespace, options: ReconcileOptions | None, preview_length: int) -> None:
    if args.command == "references":
        if options is None:
            report = analyze_message_references()
        else:
            report = reconcile_message_references(options)
        _print_reconciliation(report, preview_length)
    elif args.command == "projects" and args.projects_command == "transfer":
        result = transfer_project_ownership(
            target_owner_id=args.to_owner,
            name_contains=args.name_contains,
            dry_run=args.dry_run,
        )
        print(render_transfer_result(result))
    elif args.command == "owner" and args.owner_command == "create":
        provisioned = create_owner(
            email=args.email,
            name=args.name,
            project_name=args.project,
        )
        print(render_provision_result(provisioned))
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        config = get_maintenance_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(2)
    configure_logging(config)

    options: ReconcileOptions | None = None
    try:
        parsed_args = _parse_args(args_list)
        if parsed_args.command == "references":
            options = _build_reconcile_options(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    mode = _run_mode(options) if parsed_args.command == "references" else None
    try:
        _run(parsed_args, options, config.subject_preview_length)
    except InvalidTarget as exc:
        log.error("Maintenance run aborted: %s", exc)  # noqa: TRY400
        print(render_failure_summary(_command_name(parsed_args), exc, mode=mode))
        print(f"Error: {exc}", file=sys.stderr)
        print(f"Valid {exc.kind} ids:", file=sys.stderr)
        for available_id in exc.available:
            print(f"   - {available_id}", file=sys.stderr)
        sys.exit(1)
    except Exception as exc:
        log.exception("Fatal error during maintenance run")
        print(render_failure_summary(_command_name(parsed_args), exc, mode=mode))
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
