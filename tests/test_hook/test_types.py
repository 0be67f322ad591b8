"""Tests for hook domain types — priorities, teams, config coercion, log events."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from structlog_opsgenie.hook.types import (
    ENDPOINT_EU,
    ENDPOINT_US,
    OVERRIDE_ALIAS,
    OVERRIDE_ENTITY,
    OVERRIDE_PREFIX,
    OVERRIDE_PRIORITY,
    OVERRIDE_SOURCE,
    OVERRIDE_TAGS,
    CreateAlertResult,
    HookConfig,
    LogEvent,
    Priority,
    Team,
    is_valid_priority,
    normalize_level,
)


class TestConstants:
    def test_endpoints(self) -> None:
        assert ENDPOINT_EU == "https://api.eu.opsgenie.com"
        assert ENDPOINT_US == "https://api.opsgenie.com"

    def test_override_keys(self) -> None:
        assert OVERRIDE_PREFIX == "ogh:"
        assert OVERRIDE_ALIAS == "ogh:alias"
        assert OVERRIDE_SOURCE == "ogh:source"
        assert OVERRIDE_TAGS == "ogh:tags"
        assert OVERRIDE_ENTITY == "ogh:entity"
        assert OVERRIDE_PRIORITY == "ogh:priority"


class TestPriority:
    @pytest.mark.parametrize("value", ["P1", "P2", "P3", "P4", "P5", Priority.P5])
    def test_valid(self, value: object) -> None:
        assert is_valid_priority(value)

    @pytest.mark.parametrize("value", ["", "P0", "P6", "p1", 1, None, b"P1"])
    def test_invalid(self, value: object) -> None:
        assert not is_valid_priority(value)


class TestTeam:
    def test_responder_by_name(self) -> None:
        assert Team(name="ops").to_responder() == {"type": "team", "name": "ops"}

    def test_responder_by_id(self) -> None:
        assert Team(id="t-1").to_responder() == {"type": "team", "id": "t-1"}

    def test_name_wins_when_both_set(self) -> None:
        assert Team(name="ops", id="t-1").to_responder() == {"type": "team", "name": "ops"}


class TestHookConfig:
    def test_defaults(self) -> None:
        cfg = HookConfig()
        assert cfg.default_teams is None
        assert cfg.default_tags is None
        assert cfg.default_entity == ""
        assert cfg.default_source == ""
        assert cfg.default_priority == ""

    def test_team_names_coerced(self) -> None:
        cfg = HookConfig(default_teams=["ops", Team(id="t-1")])  # type: ignore[list-item]
        assert cfg.default_teams == (Team(name="ops"), Team(id="t-1"))

    def test_tags_stored_as_tuple(self) -> None:
        cfg = HookConfig(default_tags=["a", "b"])  # type: ignore[arg-type]
        assert cfg.default_tags == ("a", "b")

    def test_frozen(self) -> None:
        cfg = HookConfig()
        with pytest.raises(ValidationError):
            cfg.default_source = "x"  # type: ignore[misc]


class TestLogEvent:
    def test_from_event_dict(self) -> None:
        event = LogEvent.from_event_dict(
            "error",
            {
                "event": "disk full",
                "level": "error",
                "timestamp": "2026-01-01T00:00:00Z",
                "host": "db-01",
                OVERRIDE_TAGS: ["urgent"],
            },
        )
        assert event.message == "disk full"
        assert event.level == "error"
        assert event.data == {"host": "db-01", OVERRIDE_TAGS: ["urgent"]}

    def test_missing_event_key(self) -> None:
        event = LogEvent.from_event_dict("error", {"host": "db-01"})
        assert event.message == ""

    def test_non_string_message(self) -> None:
        event = LogEvent.from_event_dict("error", {"event": 42})
        assert event.message == "42"

    def test_exc_info_not_a_field(self) -> None:
        event = LogEvent.from_event_dict("exception", {"event": "boom", "exc_info": True})
        assert "exc_info" not in event.data

    @pytest.mark.parametrize(
        ("method", "level"),
        [("error", "error"), ("FATAL", "critical"), ("warn", "warning"), ("exception", "exception")],
    )
    def test_normalize_level(self, method: str, level: str) -> None:
        assert normalize_level(method) == level


class TestCreateAlertResult:
    def test_parses_api_response(self) -> None:
        result = CreateAlertResult.model_validate(
            {"result": "Request will be processed", "took": 0.1, "requestId": "abc"}
        )
        assert result.request_id == "abc"
        assert result.took == 0.1
