"""Models used for API response payloads."""

from user_service.api.models.user import UserResponse

__all__ = ["UserResponse"]
