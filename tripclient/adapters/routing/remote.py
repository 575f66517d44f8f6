"""Remote routing adapter: the only place that talks to the planning backend.

Endpoints (relative to ``ROUTING_API_BASE_URL``):
  POST /routing/plan    plan a multimodal trip
  GET  /routing/health  liveness of the routing service

One request per call, no retries; every failure leaves this module as a
classified ``DomainError``.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import httpx

from tripclient.adapters.routing.failures import classify_failure, classify_response
from tripclient.config.settings import RoutingSettings, get_routing_settings
from tripclient.domain.exceptions import DomainError
from tripclient.domain.models import HealthReport, TripPlanEnvelope, TripPlanRequest, TripPlanResponse

PLAN_PATH = "/routing/plan"
HEALTH_PATH = "/routing/health"

_LOGGER = logging.getLogger("tripclient.routing")


def decode_trip_plan(response: httpx.Response) -> TripPlanResponse:
    """Decode a success envelope; anything malformed is a generic failure."""
    try:
        envelope = TripPlanEnvelope.model_validate(response.json())
    except ValueError as exc:
        # covers invalid JSON and pydantic ValidationError
        _LOGGER.warning("undecodable plan response: %s", type(exc).__name__)
        raise DomainError.generic() from exc

    if not envelope.success or envelope.data is None:
        if isinstance(envelope.message, str) and envelope.message.strip():
            raise DomainError.generic(envelope.message.strip())
        raise DomainError.generic()
    return envelope.data


class RoutingRemoteClient:
    """Async client for the routing backend."""

    def __init__(
        self,
        settings: Optional[RoutingSettings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings or get_routing_settings()
        self._transport = transport

    @property
    def settings(self) -> RoutingSettings:
        return self._settings

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._settings.api_token:
            headers["Authorization"] = f"Bearer {self._settings.api_token}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._settings.base_url,
            headers=self._headers(),
            timeout=self._settings.timeout_seconds,
            follow_redirects=True,
            max_redirects=self._settings.max_redirects,
            transport=self._transport,
        )

    async def plan_trip(self, request: TripPlanRequest) -> TripPlanResponse:
        started = time.monotonic()
        try:
            async with self._client() as client:
                response = await client.post(PLAN_PATH, json=request.to_wire())
        except httpx.HTTPError as exc:
            raise classify_failure(exc) from exc
        except Exception as exc:
            _LOGGER.exception("unexpected failure calling %s", PLAN_PATH)
            raise classify_failure(exc) from exc

        _LOGGER.debug(
            "POST %s -> %s in %.1fms",
            PLAN_PATH,
            response.status_code,
            (time.monotonic() - started) * 1000,
        )
        if not response.is_success:
            raise classify_response(response)
        return decode_trip_plan(response)

    async def probe_health(self) -> HealthReport:
        """Health call that keeps the reason for an unhealthy answer."""
        try:
            async with self._client() as client:
                response = await client.get(HEALTH_PATH)
        except Exception as exc:
            error = classify_failure(exc)
            return HealthReport(healthy=False, error_kind=error.kind, detail=error.message)

        if response.status_code == 200:
            return HealthReport(healthy=True, status_code=200)

        error = classify_response(response)
        return HealthReport(
            healthy=False,
            status_code=response.status_code,
            error_kind=error.kind,
            detail=error.message,
        )

    async def check_health(self) -> bool:
        report = await self.probe_health()
        if not report.healthy:
            _LOGGER.info("routing health check failed: %s", report.error_kind)
        return report.healthy


__all__ = [
    "HEALTH_PATH",
    "PLAN_PATH",
    "RoutingRemoteClient",
    "decode_trip_plan",
]
