"""User service package wiring and configuration."""

from user_service.settings import ServiceSettings, get_settings, settings

__all__ = [
    "ServiceSettings",
    "get_settings",
    "settings",
]
