"""Convenience factory for wiring the hook from settings."""

from __future__ import annotations

from structlog_opsgenie.core.config import OpsGenieConfig
from structlog_opsgenie.hook.hook import OpsGenieHook


def create_hook(config: OpsGenieConfig) -> OpsGenieHook | None:
    """Build an OpsGenieHook from the ``opsgenie`` settings section.

    Returns:
        The hook, or None when alerting is disabled.
    """
    if not config.enabled:
        return None

    return OpsGenieHook(
        api_key=config.api_key.get_secret_value(),
        endpoint=config.endpoint,
        config=config.hook,
        timeout=config.timeout_secs,
    )
