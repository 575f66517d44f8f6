"""Great-circle distance estimation on top of the scalar math kit."""

from __future__ import annotations

from tripclient.domain.constants import EARTH_RADIUS_KM
from tripclient.domain.models import Coordinate
from tripclient.planner.scalar_math import atan2, cos, radians, sin, sqrt


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    dlat = radians(lat2 - lat1)
    dlon = radians(lon2 - lon1)
    sin_dlat = sin(dlat / 2)
    sin_dlon = sin(dlon / 2)
    a = sin_dlat * sin_dlat + cos(radians(lat1)) * cos(radians(lat2)) * sin_dlon * sin_dlon
    # rounding can push a slightly outside [0, 1] near antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(origin: Coordinate, destination: Coordinate) -> float:
    if origin == destination:
        return 0.0
    return haversine(origin.latitude, origin.longitude, destination.latitude, destination.longitude)
