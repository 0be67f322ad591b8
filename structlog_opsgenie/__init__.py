"""structlog processor that raises OpsGenie alerts for error-level events."""

from structlog_opsgenie.core import load_settings, setup_logging
from structlog_opsgenie.hook import (
    ENDPOINT_EU,
    ENDPOINT_US,
    HookConfig,
    OpsGenieHook,
    OpsGenieProcessor,
    Priority,
    Team,
)
from structlog_opsgenie.hook.factory import create_hook

__all__ = [
    "ENDPOINT_EU",
    "ENDPOINT_US",
    "HookConfig",
    "OpsGenieHook",
    "OpsGenieProcessor",
    "Priority",
    "Team",
    "create_hook",
    "load_settings",
    "setup_logging",
]
