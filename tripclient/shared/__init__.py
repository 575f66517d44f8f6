"""Shared cross-layer types and exceptions."""

from tripclient.shared.exceptions import ConfigError

__all__ = ["ConfigError"]
