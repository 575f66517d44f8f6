"""Shared (non-domain) exceptions."""


class ConfigError(Exception):
    """Runtime configuration is missing or invalid."""

    def __init__(self, name: str, message: str):
        self.setting = name
        super().__init__(f"Invalid setting {name}: {message} (check your .env)")
