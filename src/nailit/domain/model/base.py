"""
Base building blocks:
string identity and creation timestamps shared by stored records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4


def new_id() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(eq=False, kw_only=True)
class Entity:
    """Identity exists immediately in the domain, before the row is persisted."""

    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
