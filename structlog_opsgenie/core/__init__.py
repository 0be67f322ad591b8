"""Core module — config, logging."""

from structlog_opsgenie.core.config import (
    LoggingConfig,
    OpsGenieConfig,
    Settings,
    get_settings,
    load_settings,
    reset_settings,
)
from structlog_opsgenie.core.logging import setup_logging

__all__ = [
    "LoggingConfig",
    "OpsGenieConfig",
    "Settings",
    "get_settings",
    "load_settings",
    "reset_settings",
    "setup_logging",
]
