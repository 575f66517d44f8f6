"""Domain package exports."""

from tripclient.domain.constants import EARTH_RADIUS_KM, MAX_PLANNING_DISTANCE_KM
from tripclient.domain.enums import DomainErrorKind, OptimizationMode, SegmentType
from tripclient.domain.exceptions import DomainError
from tripclient.domain.models import (
    Coordinate,
    HealthReport,
    LocationDetail,
    PlannedRoute,
    RouteScore,
    RouteSegment,
    TransitLine,
    TransportMode,
    TripPlanEnvelope,
    TripPlanMetadata,
    TripPlanRequest,
    TripPlanResponse,
    TripPreferences,
)

__all__ = [
    "Coordinate",
    "DomainError",
    "DomainErrorKind",
    "HealthReport",
    "LocationDetail",
    "OptimizationMode",
    "PlannedRoute",
    "RouteScore",
    "RouteSegment",
    "SegmentType",
    "TransitLine",
    "TransportMode",
    "TripPlanEnvelope",
    "TripPlanMetadata",
    "TripPlanRequest",
    "TripPlanResponse",
    "TripPreferences",
    "EARTH_RADIUS_KM",
    "MAX_PLANNING_DISTANCE_KM",
]
