"""Domain model for NailIt maintenance."""

from __future__ import annotations

from .base import Entity, new_id, utcnow
from .records import Message, Owner, Project, normalize_email
from .refs import MessageRef, OwnerRef, ProjectRef

__all__ = [
    "Entity",
    "Message",
    "MessageRef",
    "Owner",
    "OwnerRef",
    "Project",
    "ProjectRef",
    "new_id",
    "normalize_email",
    "utcnow",
]
