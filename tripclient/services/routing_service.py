"""Application service for routing use-cases."""

from __future__ import annotations

from typing import Optional

from tripclient.adapters.routing.remote import RoutingRemoteClient
from tripclient.application.plan_trip import plan_trip
from tripclient.config.settings import RoutingSettings, get_routing_settings
from tripclient.domain.models import HealthReport, TransportMode, TripPlanRequest, TripPlanResponse
from tripclient.infrastructure.logging import StructuredLogger, get_logger

# Static capability list; the backend has no modes endpoint yet.
_TRANSPORT_MODES: tuple[TransportMode, ...] = (
    TransportMode(id="walk", name="Walking", icon="🚶", available=True),
    TransportMode(
        id="transit",
        name="Public Transit",
        icon="🚌",
        available=True,
        providers=("ztm-warsaw",),
    ),
    TransportMode(
        id="scooter",
        name="E-Scooter",
        icon="🛴",
        available=True,
        providers=("bolt", "lime", "tier"),
    ),
    TransportMode(
        id="bike",
        name="Bike",
        icon="🚲",
        available=True,
        providers=("veturilo", "nextbike"),
    ),
)


class RoutingService:
    def __init__(self, client: RoutingRemoteClient):
        self._client = client

    async def plan_trip(
        self,
        request: TripPlanRequest,
        *,
        logger: Optional[StructuredLogger] = None,
    ) -> TripPlanResponse:
        if logger is None:
            token = self._client.settings.api_token
            logger = get_logger(secrets=(token,) if token else ())
        return await plan_trip(request, planner=self._client, logger=logger)

    async def get_available_modes(self) -> list[TransportMode]:
        return list(_TRANSPORT_MODES)

    async def check_health(self) -> bool:
        return await self._client.check_health()

    async def probe_health(self) -> HealthReport:
        return await self._client.probe_health()


def build_routing_service(settings: Optional[RoutingSettings] = None) -> RoutingService:
    return RoutingService(RoutingRemoteClient(settings or get_routing_settings()))
