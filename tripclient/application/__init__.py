"""Application orchestration layer."""

from tripclient.application.plan_trip import TripPlanner, plan_trip

__all__ = ["TripPlanner", "plan_trip"]
