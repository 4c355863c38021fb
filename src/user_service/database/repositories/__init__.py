"""Repositories encapsulating queries per entity."""

from user_service.database.repositories.user import UserRepository

__all__ = ["UserRepository"]
