"""Request validators."""

from tripclient.validators.preflight_validator import validate, validate_trip_request

__all__ = ["validate", "validate_trip_request"]
