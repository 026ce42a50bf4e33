"""Operator-facing defaults for maintenance commands."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_SUBJECT_PREVIEW_LENGTH = 50

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True, slots=True)
class MaintenanceConfig:
    log_level: int = logging.INFO
    subject_preview_length: int = DEFAULT_SUBJECT_PREVIEW_LENGTH


def _parse_log_level(value: str) -> int:
    level = _LOG_LEVELS.get(value.strip().upper())
    if level is None:
        choices = ", ".join(_LOG_LEVELS)
        raise ConfigurationError(f"Invalid NAILIT_LOG_LEVEL {value!r} (expected one of {choices})")
    return level


def _parse_preview_length(value: str) -> int:
    try:
        length = int(value)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid NAILIT_SUBJECT_PREVIEW {value!r}") from exc
    if length < 1:
        raise ConfigurationError("NAILIT_SUBJECT_PREVIEW must be positive")
    return length


def get_maintenance_config() -> MaintenanceConfig:
    raw_level = os.getenv("NAILIT_LOG_LEVEL")
    raw_preview = os.getenv("NAILIT_SUBJECT_PREVIEW")
    return MaintenanceConfig(
        log_level=_parse_log_level(raw_level) if raw_level else logging.INFO,
        subject_preview_length=(
            _parse_preview_length(raw_preview) if raw_preview else DEFAULT_SUBJECT_PREVIEW_LENGTH
        ),
    )
