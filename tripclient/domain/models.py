"""Pydantic domain models.

Attribute names are snake_case; the routing backend speaks camelCase, so wire
names are declared as aliases and every model accepts either form.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tripclient.domain.enums import DomainErrorKind, OptimizationMode, SegmentType


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Coordinate(_WireModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    latitude: float = Field(alias="lat", ge=-90.0, le=90.0)
    longitude: float = Field(alias="lng", ge=-180.0, le=180.0)

    @field_validator("latitude", "longitude")
    @classmethod
    def _reject_non_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("coordinate must be a finite number")
        return value


# ── Request ──────────────────────────────────────────


class TripPreferences(_WireModel):
    mode: OptimizationMode = OptimizationMode.FASTEST
    allow_scooters: bool = Field(default=True, alias="allowScooters")
    allow_bikes: bool = Field(default=True, alias="allowBikes")
    max_walk_distance: int = Field(default=1000, alias="maxWalkDistance", ge=0)
    wheelchair_accessible: bool = Field(default=False, alias="wheelchairAccessible")
    num_alternatives: int = Field(default=3, alias="numAlternatives", ge=1)


class TripPlanRequest(_WireModel):
    origin: Coordinate
    destination: Coordinate
    departure_time: Optional[str] = Field(default=None, alias="departureTime")
    arrival_time: Optional[str] = Field(default=None, alias="arrivalTime")
    preferences: TripPreferences = Field(default_factory=TripPreferences)

    def to_wire(self) -> dict[str, Any]:
        """JSON body for ``POST /routing/plan``."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ── Response ─────────────────────────────────────────


class TransitLine(_WireModel):
    name: str
    long_name: Optional[str] = Field(default=None, alias="longName")
    color: str
    agency: Optional[str] = None


class LocationDetail(_WireModel):
    name: str
    location: Coordinate
    stop_id: Optional[str] = Field(default=None, alias="stopId")
    station_id: Optional[str] = Field(default=None, alias="stationId")


class RouteScore(_WireModel):
    overall: float
    time: float
    cost: float
    comfort: float


def _truncate(value: Any) -> Any:
    # backend sends fractional meters/seconds; keep the whole part
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return value


def _format_seconds(seconds: int) -> str:
    minutes = math.ceil(seconds / 60)
    if minutes < 60:
        return f"{minutes} min"
    return f"{minutes // 60}h {minutes % 60}min"


class RouteSegment(_WireModel):
    type: SegmentType
    provider: Optional[str] = None
    from_: LocationDetail = Field(alias="from")
    to: LocationDetail
    duration: int  # seconds
    distance: int  # meters
    polyline: str
    cost: float
    line: Optional[TransitLine] = None
    departure_time: Optional[str] = Field(default=None, alias="departureTime")
    arrival_time: Optional[str] = Field(default=None, alias="arrivalTime")
    num_stops: Optional[int] = Field(default=None, alias="numStops")
    is_rented: bool = Field(default=False, alias="isRented")

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> SegmentType:
        return SegmentType.from_wire(value)

    @field_validator("duration", "distance", "num_stops", mode="before")
    @classmethod
    def _whole_units(cls, value: Any) -> Any:
        return _truncate(value)

    @field_validator("is_rented", mode="before")
    @classmethod
    def _default_rented(cls, value: Any) -> Any:
        return False if value is None else value

    @property
    def duration_formatted(self) -> str:
        return _format_seconds(self.duration)


class PlannedRoute(_WireModel):
    id: str
    summary: str
    duration: int  # seconds
    walk_time: int = Field(alias="walkTime")
    wait_time: int = Field(alias="waitTime")
    walk_distance: int = Field(alias="walkDistance")
    transfers: int
    estimated_cost: float = Field(alias="estimatedCost")
    departure_time: str = Field(alias="departureTime")
    arrival_time: str = Field(alias="arrivalTime")
    score: RouteScore
    segments: list[RouteSegment]

    @field_validator("duration", "walk_time", "wait_time", "walk_distance", "transfers", mode="before")
    @classmethod
    def _whole_units(cls, value: Any) -> Any:
        return _truncate(value)

    @property
    def duration_formatted(self) -> str:
        return _format_seconds(self.duration)

    @property
    def cost_formatted(self) -> str:
        return f"{self.estimated_cost:.2f} PLN"

    @property
    def modes_used(self) -> list[SegmentType]:
        """Distinct segment types, in order of first use."""
        return list(dict.fromkeys(segment.type for segment in self.segments))


class TripPlanMetadata(_WireModel):
    computed_at: str = Field(alias="computedAt")
    otp_version: str = Field(alias="otpVersion")


class TripPlanResponse(_WireModel):
    routes: list[PlannedRoute] = Field(default_factory=list)
    metadata: TripPlanMetadata

    @field_validator("routes", mode="before")
    @classmethod
    def _default_routes(cls, value: Any) -> Any:
        return [] if value is None else value


class TripPlanEnvelope(_WireModel):
    """Body of a successful ``/routing/plan`` response."""

    success: bool
    data: Optional[TripPlanResponse] = None
    message: Optional[Any] = None


# ── Capabilities / health ────────────────────────────


class TransportMode(_WireModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str
    icon: str
    available: bool
    providers: tuple[str, ...] = ()


class HealthReport(BaseModel):
    healthy: bool
    status_code: Optional[int] = None
    error_kind: Optional[DomainErrorKind] = None
    detail: str = ""


__all__ = [
    "Coordinate",
    "HealthReport",
    "LocationDetail",
    "PlannedRoute",
    "RouteScore",
    "RouteSegment",
    "TransitLine",
    "TransportMode",
    "TripPlanEnvelope",
    "TripPlanMetadata",
    "TripPlanRequest",
    "TripPlanResponse",
    "TripPreferences",
]
