"""Synchronous OpsGenie Alert API v2 client built on httpx."""

from __future__ import annotations

from types import TracebackType

import httpx
import structlog

from structlog_opsgenie.hook.exceptions import SubmissionFailedError
from structlog_opsgenie.hook.types import CreateAlertRequest, CreateAlertResult

logger = structlog.get_logger(__name__)

_ALERTS_PATH = "/v2/alerts"


class OpsGenieAlertClient:
    """Creates OpsGenie alerts, one blocking request per call.

    No retry, no batching: a failed request raises ``SubmissionFailedError``
    and the caller decides what to do with it.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._http = httpx.Client(
            base_url=self._endpoint,
            headers={"Authorization": f"GenieKey {api_key}"},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def create(self, request: CreateAlertRequest) -> CreateAlertResult:
        """Submit *request* to ``POST /v2/alerts``."""
        try:
            response = self._http.post(_ALERTS_PATH, json=request.to_api_body())
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise SubmissionFailedError(
                f"OpsGenie API returned {exc.response.status_code}: "
                f"{exc.response.text[:200]}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise SubmissionFailedError(f"OpsGenie API request failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise SubmissionFailedError(
                "OpsGenie API returned invalid JSON",
                status_code=response.status_code,
            ) from exc

        if not isinstance(body, dict):
            raise SubmissionFailedError(
                "OpsGenie API returned non-object",
                status_code=response.status_code,
            )

        result = CreateAlertResult.model_validate(body)
        logger.debug(
            "opsgenie_alert_accepted",
            alias=request.alias,
            request_id=result.request_id,
        )
        return result

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> OpsGenieAlertClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
