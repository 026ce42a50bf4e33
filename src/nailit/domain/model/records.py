"""Homeowner-facing records: owners, renovation projects and ingested messages."""

from __future__ import annotations

from dataclasses import dataclass

from nailit.domain.model.base import Entity


def normalize_email(email: str) -> str:
    normalized = email.strip().lower()
    if "@" not in normalized:
        raise ValueError(f"Invalid email address: {email!r}")
    return normalized


@dataclass(eq=False, kw_only=True)
class Owner(Entity):
    """A homeowner account."""

    email: str
    name: str | None = None


@dataclass(eq=False, kw_only=True)
class Project(Entity):
    """A renovation project; ownership may be reassigned over time."""

    name: str
    owner_id: str
    description: str | None = None


@dataclass(eq=False, kw_only=True)
class Message(Entity):
    """An ingested contractor email.

    ``owner_id`` is required, ``project_id`` is optional. Neither is enforced by
    the store, so both can dangle after owners or projects are deleted.
    """

    external_message_id: str
    owner_id: str
    project_id: str | None = None
    subject: str | None = None
