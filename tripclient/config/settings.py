"""Routing client settings resolved from the environment."""

from __future__ import annotations

import math
import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tripclient.shared.exceptions import ConfigError

DEFAULT_BASE_URL = "http://localhost:3000/api/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_REDIRECTS = 5
MAX_REDIRECTS_CAP = 20

_ENV_BASE_URL = "ROUTING_API_BASE_URL"
_ENV_TIMEOUT = "ROUTING_TIMEOUT_SECONDS"
_ENV_MAX_REDIRECTS = "ROUTING_MAX_REDIRECTS"
_ENV_TOKEN = "ROUTING_API_TOKEN"


def _is_configured(value: str | None) -> bool:
    return bool(value and value.strip())


class RoutingSettings(BaseModel):
    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    max_redirects: int = Field(default=DEFAULT_MAX_REDIRECTS, ge=0, le=MAX_REDIRECTS_CAP)
    api_token: Optional[str] = Field(default=None, repr=False)

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        stripped = value.strip().rstrip("/")
        if not stripped.startswith(("http://", "https://")):
            raise ValueError("must start with http:// or https://")
        return stripped

    @field_validator("timeout_seconds")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("must be a finite number of seconds")
        return value


def _parse_number(name: str, raw: str, cast):
    try:
        return cast(raw.strip())
    except (TypeError, ValueError):
        raise ConfigError(name, f"expected a number, got {raw!r}") from None


def load_routing_settings() -> RoutingSettings:
    """Build settings from ``ROUTING_*`` environment variables."""
    values: dict[str, object] = {}

    base_url = os.getenv(_ENV_BASE_URL)
    if _is_configured(base_url):
        values["base_url"] = base_url

    timeout = os.getenv(_ENV_TIMEOUT)
    if _is_configured(timeout):
        values["timeout_seconds"] = _parse_number(_ENV_TIMEOUT, timeout, float)

    redirects = os.getenv(_ENV_MAX_REDIRECTS)
    if _is_configured(redirects):
        values["max_redirects"] = _parse_number(_ENV_MAX_REDIRECTS, redirects, int)

    token = os.getenv(_ENV_TOKEN)
    if _is_configured(token):
        values["api_token"] = token.strip()

    try:
        return RoutingSettings(**values)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else "settings"
        raise ConfigError(field, first.get("msg", "invalid value")) from None


@lru_cache(maxsize=1)
def get_routing_settings() -> RoutingSettings:
    return load_routing_settings()


def reset_routing_settings() -> None:
    get_routing_settings.cache_clear()


__all__ = [
    "RoutingSettings",
    "get_routing_settings",
    "load_routing_settings",
    "reset_routing_settings",
]
