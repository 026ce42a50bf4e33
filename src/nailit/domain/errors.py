"""Errors raised by maintenance operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class MaintenanceError(Exception):
    """Base class for failures that abort a maintenance run."""


class StoreUnavailable(MaintenanceError):
    """Raised when the underlying persistence layer cannot be reached."""


class InvalidTarget(MaintenanceError):
    """Raised when an operator-supplied target id does not resolve.

    ``available`` lists the ids that would have been accepted so callers can
    offer the operator a corrected retry.
    """

    def __init__(self, kind: str, target_id: str, available: Iterable[str]) -> None:
        self.kind = kind
        self.target_id = target_id
        self.available = tuple(available)
        super().__init__(f"Target {kind} id {target_id!r} is not valid")
