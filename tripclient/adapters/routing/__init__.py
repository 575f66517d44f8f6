"""Routing backend adapters."""

from tripclient.adapters.routing.failures import classify_failure, classify_response
from tripclient.adapters.routing.remote import RoutingRemoteClient, decode_trip_plan

__all__ = [
    "RoutingRemoteClient",
    "classify_failure",
    "classify_response",
    "decode_trip_plan",
]
