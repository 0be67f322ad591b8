"""Domain types for the OpsGenie hook — config, log events, alert payloads."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator

# OpsGenie API base URLs.
ENDPOINT_EU = "https://api.eu.opsgenie.com"
ENDPOINT_US = "https://api.opsgenie.com"

# Log fields under this prefix tune the alert at runtime instead of being
# sent as details. "ogh" stands for "OpsGenie hook".
OVERRIDE_PREFIX = "ogh:"
OVERRIDE_ALIAS = OVERRIDE_PREFIX + "alias"
OVERRIDE_SOURCE = OVERRIDE_PREFIX + "source"
# Appended to the default tags, never replaces them.
OVERRIDE_TAGS = OVERRIDE_PREFIX + "tags"
OVERRIDE_ENTITY = OVERRIDE_PREFIX + "entity"
OVERRIDE_PRIORITY = OVERRIDE_PREFIX + "priority"

ERROR_FIELD = "error"

# Keys structlog adds on its own; they describe the log line, not the alert.
_HOST_KEYS = frozenset({"event", "level", "timestamp", "logger", "exc_info", "stack_info"})


class Priority(StrEnum):
    """OpsGenie alert priority, P1 being the most urgent."""

    P1 = "P1"
    P2 = "P2"
    P3 = "P3"
    P4 = "P4"
    P5 = "P5"


def is_valid_priority(value: object) -> bool:
    """Return True if *value* is one of the five OpsGenie priorities."""
    return isinstance(value, str) and value in Priority.__members__


class Team(BaseModel):
    """A team recipient, addressed by name or by id."""

    model_config = {"frozen": True}

    name: str = ""
    id: str = ""

    def to_responder(self) -> dict[str, str]:
        if self.id and not self.name:
            return {"type": "team", "id": self.id}
        return {"type": "team", "name": self.name}


class HookConfig(BaseModel):
    """Static alert defaults for the hook.

    ``default_priority`` falls back to P3 when empty and can be overridden
    per event with the ``ogh:priority`` field. The hook sanitizes this
    config when it is constructed; see ``OpsGenieHook``.
    """

    model_config = {"frozen": True}

    default_teams: tuple[Team, ...] | None = None
    default_tags: tuple[str, ...] | None = None
    default_entity: str = ""
    default_source: str = ""
    default_priority: str = ""

    @field_validator("default_teams", mode="before")
    @classmethod
    def _teams_from_names(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple({"name": t} if isinstance(t, str) else t for t in value)
        return value


@dataclass(frozen=True)
class LogEvent:
    """Read-only view of one structured log line."""

    message: str
    level: str
    data: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_event_dict(cls, method_name: str, event_dict: Mapping[str, Any]) -> LogEvent:
        """Split a structlog event dict into message, level and entry fields."""
        message = event_dict.get("event")
        return cls(
            message="" if message is None else str(message),
            level=normalize_level(method_name),
            data={k: v for k, v in event_dict.items() if k not in _HOST_KEYS},
        )


def normalize_level(method_name: str) -> str:
    """Map a logger method name onto structlog's level names."""
    name = method_name.lower()
    if name == "fatal":
        return "critical"
    if name == "warn":
        return "warning"
    return name


class CreateAlertRequest(BaseModel):
    """Alert ready to be submitted to the OpsGenie create-alert endpoint."""

    message: str
    alias: str
    description: str = ""
    teams: list[Team] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    details: dict[str, str] = Field(default_factory=dict)
    entity: str = ""
    source: str = ""
    priority: Priority = Priority.P3

    def to_api_body(self) -> dict[str, Any]:
        """Render the JSON body expected by ``POST /v2/alerts``."""
        body: dict[str, Any] = {
            "message": self.message,
            "alias": self.alias,
            "description": self.description,
            "responders": [t.to_responder() for t in self.teams],
            "tags": list(self.tags),
            "details": dict(self.details),
            "priority": self.priority.value,
        }
        if self.entity:
            body["entity"] = self.entity
        if self.source:
            body["source"] = self.source
        return body


class CreateAlertResult(BaseModel):
    """Acknowledgement returned by OpsGenie for an accepted request."""

    model_config = {"populate_by_name": True}

    result: str = ""
    took: float = 0.0
    request_id: str = Field(default="", alias="requestId")
