"""Runtime configuration helpers."""

from tripclient.config.settings import (
    RoutingSettings,
    get_routing_settings,
    load_routing_settings,
    reset_routing_settings,
)

__all__ = [
    "RoutingSettings",
    "get_routing_settings",
    "load_routing_settings",
    "reset_routing_settings",
]
