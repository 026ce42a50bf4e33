"""Root logger setup for the ``nailit`` console script."""

from __future__ import annotations

import logging

from .maintenance import MaintenanceConfig

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(config: MaintenanceConfig | None = None, *, force: bool = False) -> None:
    """Apply the level from ``config`` (INFO when omitted) to the root logger."""

    level = (config or MaintenanceConfig()).log_level
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
