"""API layer modules exposed by the service."""

from user_service.api.app import create_api

__all__ = ["create_api"]
