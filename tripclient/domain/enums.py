"""Domain enums."""

from enum import Enum


class OptimizationMode(str, Enum):
    FASTEST = "fastest"
    CHEAPEST = "cheapest"
    COMFORTABLE = "comfortable"


class SegmentType(str, Enum):
    WALK = "walk"
    BUS = "bus"
    TRAM = "tram"
    METRO = "metro"
    RAIL = "rail"
    SCOOTER = "scooter"
    BIKE = "bike"
    TAXI = "taxi"
    CAR = "car"

    @classmethod
    def from_wire(cls, value: object) -> "SegmentType":
        """Case-insensitive lookup; unknown segment types are treated as walking."""
        normalized = str(value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.WALK


class DomainErrorKind(str, Enum):
    TIMEOUT = "timeout"
    NETWORK_UNAVAILABLE = "network_unavailable"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    GENERIC = "generic"
