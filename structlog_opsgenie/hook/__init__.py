"""OpsGenie hook — maps severe log events onto OpsGenie alerts."""

from structlog_opsgenie.hook.client import OpsGenieAlertClient
from structlog_opsgenie.hook.exceptions import (
    HookError,
    InvalidConfigurationError,
    MissingCredentialError,
    MissingEndpointError,
    SubmissionFailedError,
)
from structlog_opsgenie.hook.hook import LEVELS, OpsGenieHook, message_checksum
from structlog_opsgenie.hook.processor import OpsGenieProcessor
from structlog_opsgenie.hook.types import (
    ENDPOINT_EU,
    ENDPOINT_US,
    OVERRIDE_ALIAS,
    OVERRIDE_ENTITY,
    OVERRIDE_PREFIX,
    OVERRIDE_PRIORITY,
    OVERRIDE_SOURCE,
    OVERRIDE_TAGS,
    CreateAlertRequest,
    CreateAlertResult,
    HookConfig,
    LogEvent,
    Priority,
    Team,
)

__all__ = [
    "ENDPOINT_EU",
    "ENDPOINT_US",
    "LEVELS",
    "OVERRIDE_ALIAS",
    "OVERRIDE_ENTITY",
    "OVERRIDE_PREFIX",
    "OVERRIDE_PRIORITY",
    "OVERRIDE_SOURCE",
    "OVERRIDE_TAGS",
    "CreateAlertRequest",
    "CreateAlertResult",
    "HookConfig",
    "HookError",
    "InvalidConfigurationError",
    "LogEvent",
    "MissingCredentialError",
    "MissingEndpointError",
    "OpsGenieAlertClient",
    "OpsGenieHook",
    "OpsGenieProcessor",
    "Priority",
    "SubmissionFailedError",
    "Team",
    "message_checksum",
]
