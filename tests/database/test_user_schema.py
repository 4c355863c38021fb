"""Database schema specific tests."""

from typing import TYPE_CHECKING, cast

from sqlalchemy import BigInteger

if TYPE_CHECKING:
    from sqlalchemy import Table

from user_service.database.schemas import UserSchema


def test_user_table_layout() -> None:
    table = cast("Table", UserSchema.__table__)

    assert table.name == "users"
    assert table.schema is None
    assert [column.name for column in table.columns] == ["id", "name", "email"]
    assert [column.name for column in table.primary_key] == ["id"]


def test_user_id_is_64_bit() -> None:
    table = cast("Table", UserSchema.__table__)
    assert isinstance(table.c.id.type, BigInteger)
