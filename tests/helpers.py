"""Shared builders for routing tests."""

from __future__ import annotations

from typing import Any, Callable

import httpx

from tripclient.adapters.routing.remote import RoutingRemoteClient
from tripclient.config.settings import RoutingSettings
from tripclient.domain.models import Coordinate, TripPlanRequest

BASE_URL = "http://routing.test/api/v1"

WARSAW_CENTER = Coordinate(latitude=52.23, longitude=21.01)
WARSAW_NORTH = Coordinate(latitude=52.40, longitude=20.97)
KRAKOW = Coordinate(latitude=50.06, longitude=19.94)


def make_request(origin: Coordinate = WARSAW_CENTER, destination: Coordinate = WARSAW_NORTH) -> TripPlanRequest:
    return TripPlanRequest(origin=origin, destination=destination)


def plan_body(route_id: str = "r1") -> dict[str, Any]:
    location = {"name": "Centrum", "location": {"lat": 52.23, "lng": 21.01}, "stopId": "7013"}
    return {
        "success": True,
        "data": {
            "routes": [
                {
                    "id": route_id,
                    "summary": "Walk, Tram 17",
                    "duration": 1560,
                    "walkTime": 420,
                    "waitTime": 180,
                    "walkDistance": 550,
                    "transfers": 0,
                    "estimatedCost": 4.4,
                    "departureTime": "2026-05-01T08:00:00Z",
                    "arrivalTime": "2026-05-01T08:26:00Z",
                    "score": {"overall": 0.82, "time": 0.9, "cost": 0.7, "comfort": 0.8},
                    "segments": [
                        {
                            "type": "WALK",
                            "from": location,
                            "to": {"name": "Centrum 05", "location": {"lat": 52.231, "lng": 21.011}},
                            "duration": 420,
                            "distance": 550,
                            "polyline": "abc",
                            "cost": 0,
                        },
                        {
                            "type": "TRAM",
                            "provider": "ztm-warsaw",
                            "from": {"name": "Centrum 05", "location": {"lat": 52.231, "lng": 21.011}},
                            "to": {"name": "Marymont", "location": {"lat": 52.40, "lng": 20.97}},
                            "duration": 960,
                            "distance": 9100,
                            "polyline": "def",
                            "cost": 4.4,
                            "line": {"name": "17", "color": "#C00000", "agency": "ZTM"},
                            "numStops": 14,
                        },
                    ],
                }
            ],
            "metadata": {"computedAt": "2026-05-01T07:59:58Z", "otpVersion": "2.5.0"},
        },
    }


def make_client(
    handler: Callable[[httpx.Request], httpx.Response],
    **overrides: Any,
) -> RoutingRemoteClient:
    settings = RoutingSettings(base_url=BASE_URL, timeout_seconds=2.0, **overrides)
    return RoutingRemoteClient(settings, transport=httpx.MockTransport(handler))
