"""Database connectivity helpers and configuration objects."""

from user_service.database.base import BaseSchema
from user_service.database.repositories import UserRepository
from user_service.database.schemas import UserSchema
from user_service.database.service import DatabaseService

__all__ = [
    "BaseSchema",
    "DatabaseService",
    "UserRepository",
    "UserSchema",
]
