"""User database schema."""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from user_service.database.base import BaseSchema

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
USER_ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")


class UserSchema(BaseSchema):
    """SQLAlchemy model for the ``users`` table.

    The table carries no schema of its own; the ``app`` schema variant is
    applied per engine through ``schema_translate_map``.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(USER_ID_TYPE, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(255))
    email: Mapped[str | None] = mapped_column(String(255))
