"""OpsGenie hook — turns severe log events into OpsGenie alerts."""

from __future__ import annotations

import zlib
from collections.abc import Mapping
from typing import Any

import structlog

from structlog_opsgenie.hook.client import OpsGenieAlertClient
from structlog_opsgenie.hook.exceptions import (
    InvalidConfigurationError,
    MissingCredentialError,
    MissingEndpointError,
)
from structlog_opsgenie.hook.types import (
    ERROR_FIELD,
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
    is_valid_priority,
)

logger = structlog.get_logger(__name__)

# structlog's names for the Error / Fatal / Panic tier.
LEVELS: frozenset[str] = frozenset({"error", "critical", "exception"})


class OpsGenieHook:
    """Builds one OpsGenie alert per log event and submits it synchronously.

    The payload is resolved field by field from the event and the static
    ``HookConfig``:

    - alias: ``ogh:alias`` or the CRC-32 of the message
    - description: the message, then the ``error`` field if it holds an exception
    - teams: the default teams
    - tags: the default tags followed by ``ogh:tags``
    - details: every field outside the ``ogh:`` namespace, stringified
    - entity / source: ``ogh:entity`` / ``ogh:source`` or the defaults
    - priority: ``ogh:priority`` if it is P1..P5, else the default

    Overrides of the wrong type or with an unknown priority are ignored.
    The hook does not filter by level; the host only calls it for
    ``levels()``.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str,
        config: HookConfig | None = None,
        *,
        client: OpsGenieAlertClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        if not api_key:
            raise MissingCredentialError("api key must be specified")
        if not endpoint:
            raise MissingEndpointError("endpoint must be specified")

        self._config = _validate_config(config or HookConfig())
        self._client = client or OpsGenieAlertClient(api_key, endpoint, timeout=timeout)

    @property
    def config(self) -> HookConfig:
        return self._config

    @staticmethod
    def levels() -> frozenset[str]:
        """Log levels this hook wants to be called for."""
        return LEVELS

    def handle(self, event: LogEvent) -> CreateAlertResult:
        """Build the alert for *event* and submit it.

        Errors raised by the client propagate unchanged.
        """
        request = self.build_request(event)
        logger.debug(
            "opsgenie_alert_submitting",
            alias=request.alias,
            priority=request.priority.value,
        )
        return self._client.create(request)

    def build_request(self, event: LogEvent) -> CreateAlertRequest:
        return CreateAlertRequest(
            message=event.message,
            alias=self._alias(event),
            description=self._description(event),
            teams=self._teams(),
            tags=self._tags(event),
            details=self._details(event),
            entity=self._entity(event),
            source=self._source(event),
            priority=self._priority(event),
        )

    def close(self) -> None:
        self._client.close()

    # ── Field resolution ────────────────────────────────────────

    def _alias(self, event: LogEvent) -> str:
        override = _string_override(event.data, OVERRIDE_ALIAS)
        if override is not None:
            return override
        return message_checksum(event.message)

    def _description(self, event: LogEvent) -> str:
        description = event.message
        error = event.data.get(ERROR_FIELD)
        if isinstance(error, BaseException):
            description += "\n" + str(error)
        return description

    def _teams(self) -> list[Team]:
        return list(self._config.default_teams or ())

    def _tags(self, event: LogEvent) -> list[str]:
        # Always a fresh list; the configured defaults are shared by every call.
        tags = list(self._config.default_tags or ())
        override = _strings_override(event.data, OVERRIDE_TAGS)
        if override is not None:
            tags.extend(override)
        return tags

    def _details(self, event: LogEvent) -> dict[str, str]:
        return {
            key: str(value)
            for key, value in event.data.items()
            if not key.startswith(OVERRIDE_PREFIX)
        }

    def _entity(self, event: LogEvent) -> str:
        override = _string_override(event.data, OVERRIDE_ENTITY)
        return self._config.default_entity if override is None else override

    def _source(self, event: LogEvent) -> str:
        override = _string_override(event.data, OVERRIDE_SOURCE)
        return self._config.default_source if override is None else override

    def _priority(self, event: LogEvent) -> Priority:
        override = _priority_override(event.data, OVERRIDE_PRIORITY)
        if override is not None:
            return override
        return Priority(self._config.default_priority)


def message_checksum(message: str) -> str:
    """Lowercase hex CRC-32 (IEEE) of the UTF-8 message bytes.

    Used as the dedup alias; stable across calls but not collision-free.
    """
    return format(zlib.crc32(message.encode("utf-8")), "x")


def _validate_config(config: HookConfig) -> HookConfig:
    """Return *config* with empty sequences filled in and priority checked."""
    priority = config.default_priority or Priority.P3
    if not is_valid_priority(priority):
        raise InvalidConfigurationError(f"invalid priority: {config.default_priority!r}")

    return config.model_copy(
        update={
            "default_teams": tuple(config.default_teams or ()),
            "default_tags": tuple(config.default_tags or ()),
            "default_priority": Priority(priority),
        }
    )


# ── Typed override accessors ────────────────────────────────────
# Absent and wrong-typed overrides both come back as None.


def _string_override(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _strings_override(data: Mapping[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    return None


def _priority_override(data: Mapping[str, Any], key: str) -> Priority | None:
    value = data.get(key)
    if is_valid_priority(value):
        return Priority(value)
    return None
