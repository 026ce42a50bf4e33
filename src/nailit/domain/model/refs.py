"""Immutable point-in-time views of stored records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from nailit.domain.model.records import Message, Owner, Project


@dataclass(frozen=True, slots=True)
class OwnerRef:
    id: str
    email: str
    name: str | None = None

    @classmethod
    def from_owner(cls, owner: Owner) -> OwnerRef:
        return cls(id=owner.id, email=owner.email, name=owner.name)


@dataclass(frozen=True, slots=True)
class ProjectRef:
    id: str
    name: str
    owner_id: str

    @classmethod
    def from_project(cls, project: Project) -> ProjectRef:
        return cls(id=project.id, name=project.name, owner_id=project.owner_id)


@dataclass(frozen=True, slots=True)
class MessageRef:
    id: str
    external_message_id: str
    owner_id: str
    project_id: str | None
    subject: str | None
    created_at: datetime

    @classmethod
    def from_message(cls, message: Message) -> MessageRef:
        return cls(
            id=message.id,
            external_message_id=message.external_message_id,
            owner_id=message.owner_id,
            project_id=message.project_id,
            subject=message.subject,
            created_at=message.created_at,
        )

    @property
    def creation_order(self) -> tuple[datetime, str]:
        """Sort key for creation order.

        ``created_at`` is stamped with microsecond precision when the message is
        ingested and persisted unchanged, so it is the stored insertion sequence.
        Messages sharing a timestamp are ordered by id: arbitrary with respect to
        insertion, but identical on every run.
        """
        return (self.created_at, self.id)
