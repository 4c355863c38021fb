"""Shared domain models used by the database and API layers."""

from user_service.shared.entities import User

__all__ = ["User"]
