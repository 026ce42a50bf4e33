from __future__ import annotations

import logging

import pytest

from nailit.config import (
    ConfigurationError,
    MaintenanceConfig,
    configure_logging,
    get_maintenance_config,
)
from nailit.config.maintenance import DEFAULT_SUBJECT_PREVIEW_LENGTH


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NAILIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NAILIT_SUBJECT_PREVIEW", raising=False)

    config = get_maintenance_config()

    assert config.log_level == logging.INFO
    assert config.subject_preview_length == DEFAULT_SUBJECT_PREVIEW_LENGTH


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NAILIT_LOG_LEVEL", " debug ")
    monkeypatch.setenv("NAILIT_SUBJECT_PREVIEW", "20")

    config = get_maintenance_config()

    assert config.log_level == logging.DEBUG
    assert config.subject_preview_length == 20


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("NAILIT_LOG_LEVEL", "LOUD"),
        ("NAILIT_SUBJECT_PREVIEW", "many"),
        ("NAILIT_SUBJECT_PREVIEW", "0"),
    ],
)
def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError):
        get_maintenance_config()


def test_configure_logging_applies_configured_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []

    def fake_basic_config(**kwargs: object) -> None:
        calls.append(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

    configure_logging(MaintenanceConfig(log_level=logging.WARNING))
    configure_logging()

    assert [call["level"] for call in calls] == [logging.WARNING, logging.INFO]
    assert calls[0]["force"] is False
