"""SQLAlchemy table mappings."""

from user_service.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
