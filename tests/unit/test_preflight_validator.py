"""Preflight validator tests: local rejection before any network call."""

from __future__ import annotations

import math

import httpx
import pytest

from helpers import KRAKOW, WARSAW_CENTER, WARSAW_NORTH, make_request
from tripclient.adapters.routing.failures import classify_response
from tripclient.domain.constants import EARTH_RADIUS_KM
from tripclient.domain.enums import DomainErrorKind
from tripclient.domain.exceptions import DomainError
from tripclient.domain.models import Coordinate
from tripclient.validators import validate, validate_trip_request

SAME = "Origin and destination cannot be the same."
TOO_FAR = "Distance too large for multimodal planning (max 50km)."


def _north_of(origin: Coordinate, km: float) -> Coordinate:
    dlat = math.degrees(km / EARTH_RADIUS_KM)
    return Coordinate(latitude=origin.latitude + dlat, longitude=origin.longitude)


def test_identical_endpoints_rejected():
    request = make_request(WARSAW_CENTER, Coordinate(latitude=52.23, longitude=21.01))
    with pytest.raises(DomainError) as info:
        validate(request)
    assert info.value.kind is DomainErrorKind.VALIDATION
    assert info.value.message == SAME


def test_identical_endpoints_rejected_regardless_of_distance():
    """Equality is checked before any distance is computed."""

    def _must_not_be_called(_a, _b):
        raise AssertionError("distance computed for identical endpoints")

    with pytest.raises(DomainError) as info:
        validate(make_request(KRAKOW, KRAKOW), distance_fn=_must_not_be_called)
    assert info.value.message == SAME


def test_just_over_limit_rejected():
    origin = Coordinate(latitude=52.0, longitude=21.0)
    with pytest.raises(DomainError) as info:
        validate(make_request(origin, _north_of(origin, 50.001)))
    assert info.value == DomainError.validation(TOO_FAR)


def test_just_under_limit_accepted():
    origin = Coordinate(latitude=52.0, longitude=21.0)
    validate(make_request(origin, _north_of(origin, 49.999)))


def test_warsaw_trip_passes():
    validate(make_request(WARSAW_CENTER, WARSAW_NORTH))
    assert validate_trip_request(make_request(WARSAW_CENTER, WARSAW_NORTH)) == []


def test_krakow_trip_rejected():
    assert validate_trip_request(make_request(WARSAW_CENTER, KRAKOW)) == [TOO_FAR]
    with pytest.raises(DomainError) as info:
        validate(make_request(WARSAW_CENTER, KRAKOW))
    assert info.value.message == TOO_FAR


def test_local_rejection_has_same_shape_as_server_400():
    response = httpx.Response(
        400,
        json={"statusCode": 400, "message": TOO_FAR, "error": "Bad Request"},
        request=httpx.Request("POST", "http://routing.test/routing/plan"),
    )
    with pytest.raises(DomainError) as info:
        validate(make_request(WARSAW_CENTER, KRAKOW))
    assert classify_response(response) == info.value
