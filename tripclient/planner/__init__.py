"""Deterministic numeric helpers used before any network call."""

from tripclient.planner.distance import distance_km, haversine

__all__ = ["distance_km", "haversine"]
