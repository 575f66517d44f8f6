"""Service layer public exports."""

from tripclient.services.routing_service import RoutingService, build_routing_service

__all__ = ["RoutingService", "build_routing_service"]
