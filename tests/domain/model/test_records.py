from __future__ import annotations

import pytest

from nailit.domain.model import Message, MessageRef, Owner, normalize_email


def test_normalize_email_strips_and_lowercases() -> None:
    assert normalize_email("  Mixed.Case@Example.COM\n") == "mixed.case@example.com"


def test_normalize_email_rejects_values_without_at_sign() -> None:
    with pytest.raises(ValueError, match="Invalid email"):
        normalize_email("nobody")


def test_entities_get_distinct_string_ids_and_aware_timestamps() -> None:
    first = Owner(email="a@example.com")
    second = Owner(email="a@example.com")

    assert isinstance(first.id, str)
    assert first.id != second.id
    assert first.created_at.tzinfo is not None


def test_message_project_reference_is_optional() -> None:
    message = Message(external_message_id="gmail-1", owner_id="U1")

    assert message.project_id is None
    assert MessageRef.from_message(message).creation_order == (message.created_at, message.id)
