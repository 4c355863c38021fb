"""Repository helpers for reading users."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from user_service.database.schemas import UserSchema
from user_service.shared import User

if TYPE_CHECKING:
    from sqlalchemy import Row
    from sqlalchemy.orm import Session

_USER_COLUMNS = (UserSchema.id, UserSchema.name, UserSchema.email)


def _decode_row(row: Row) -> User:
    return User(id=row.id, name=row.name, email=row.email)


class UserRepository:
    """Read-only access to the ``users`` table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> list[User]:
        """Return every stored user ordered by ID."""
        stmt = select(*_USER_COLUMNS).order_by(UserSchema.id)
        return [_decode_row(row) for row in self._session.execute(stmt)]

    def find_by_id(self, user_id: int) -> User | None:
        """Return the user with the given ID, or ``None`` when absent."""
        stmt = select(*_USER_COLUMNS).where(UserSchema.id == user_id)
        row = self._session.execute(stmt).one_or_none()
        if row is None:
            return None
        return _decode_row(row)
