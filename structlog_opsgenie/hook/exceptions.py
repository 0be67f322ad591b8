"""Exception hierarchy for the OpsGenie hook."""

from __future__ import annotations


class HookError(Exception):
    """Base exception for all hook errors."""


class MissingCredentialError(HookError):
    """No OpsGenie API key was given."""


class MissingEndpointError(HookError):
    """No OpsGenie API endpoint was given."""


class InvalidConfigurationError(HookError):
    """The hook configuration holds a value OpsGenie would reject."""


class SubmissionFailedError(HookError):
    """The create-alert call to OpsGenie failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
