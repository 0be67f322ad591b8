"""structlog processor that forwards error-tier events to an OpsGenieHook."""

from __future__ import annotations

import structlog
from structlog.types import EventDict, WrappedLogger

from structlog_opsgenie.hook.hook import OpsGenieHook
from structlog_opsgenie.hook.types import LogEvent, normalize_level

logger = structlog.get_logger(__name__)


class OpsGenieProcessor:
    """Calls ``hook.handle`` for every event whose level the hook asked for.

    A failed alert is logged at WARNING and the log line carries on through
    the chain untouched. WARNING sits below the hook's levels, so the
    failure report can never trigger another alert. Pass
    ``raise_errors=True`` to let the exception escape instead.
    """

    def __init__(self, hook: OpsGenieHook, raise_errors: bool = False) -> None:
        self._hook = hook
        self._levels = hook.levels()
        self._raise_errors = raise_errors

    def __call__(
        self, _logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        if normalize_level(method_name) not in self._levels:
            return event_dict

        event = LogEvent.from_event_dict(method_name, event_dict)
        try:
            self._hook.handle(event)
        except Exception as exc:
            if self._raise_errors:
                raise
            logger.warning(
                "opsgenie_hook_failed",
                error=str(exc),
                error_type=type(exc).__name__,
                alert_message=event.message,
            )
        return event_dict

    @property
    def hook(self) -> OpsGenieHook:
        return self._hook

