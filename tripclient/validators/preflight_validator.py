"""Preflight validator: reject trip requests locally before any network call."""

from __future__ import annotations

from typing import Callable

from tripclient.domain.constants import (
    DISTANCE_TOO_LARGE_MESSAGE,
    MAX_PLANNING_DISTANCE_KM,
    SAME_ENDPOINTS_MESSAGE,
)
from tripclient.domain.exceptions import DomainError
from tripclient.domain.models import Coordinate, TripPlanRequest
from tripclient.planner.distance import distance_km

DistanceFn = Callable[[Coordinate, Coordinate], float]


def validate_trip_request(
    request: TripPlanRequest,
    *,
    distance_fn: DistanceFn = distance_km,
) -> list[str]:
    """Return the message of the first failed rule, or an empty list."""
    if request.origin == request.destination:
        return [SAME_ENDPOINTS_MESSAGE]

    if distance_fn(request.origin, request.destination) > MAX_PLANNING_DISTANCE_KM:
        return [DISTANCE_TOO_LARGE_MESSAGE]
    return []


def validate(request: TripPlanRequest, *, distance_fn: DistanceFn = distance_km) -> None:
    issues = validate_trip_request(request, distance_fn=distance_fn)
    if issues:
        raise DomainError.validation(issues[0])
