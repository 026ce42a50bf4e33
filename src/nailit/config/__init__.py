"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import configure_logging
from .maintenance import MaintenanceConfig, get_maintenance_config
from .storage import StorageConfig, get_database_uri, get_storage_config

__all__ = [
    "ConfigurationError",
    "MaintenanceConfig",
    "StorageConfig",
    "configure_logging",
    "get_database_uri",
    "get_maintenance_config",
    "get_storage_config",
]
