"""Single entrypoint for trip planning orchestration.

Preflight rules run first and synchronously; only a request that passes them
reaches the routing backend. Both rejection paths raise ``DomainError``.
"""

from __future__ import annotations

from typing import Optional, Protocol

from tripclient.domain.exceptions import DomainError
from tripclient.domain.models import TripPlanRequest, TripPlanResponse
from tripclient.infrastructure.logging import StructuredLogger, get_logger
from tripclient.planner.distance import distance_km
from tripclient.validators.preflight_validator import DistanceFn, validate


class TripPlanner(Protocol):
    async def plan_trip(self, request: TripPlanRequest) -> TripPlanResponse: ...


async def plan_trip(
    request: TripPlanRequest,
    *,
    planner: TripPlanner,
    logger: Optional[StructuredLogger] = None,
    distance_fn: DistanceFn = distance_km,
) -> TripPlanResponse:
    log = logger or get_logger()

    log.step_start("preflight")
    try:
        validate(request, distance_fn=distance_fn)
    except DomainError as exc:
        log.step_end("preflight", ok=False)
        log.rejected("preflight", exc.message, kind=exc.kind.value)
        raise
    log.step_end("preflight")

    log.step_start("remote_plan")
    try:
        response = await planner.plan_trip(request)
    except DomainError as exc:
        log.step_end("remote_plan", ok=False)
        log.error("remote_plan", exc.message, kind=exc.kind.value)
        raise
    log.step_end("remote_plan", routes=len(response.routes))
    log.summary(status="ok", routes=len(response.routes))
    return response
