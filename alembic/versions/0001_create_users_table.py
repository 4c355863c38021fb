"""Create users table."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

from user_service.settings import get_settings

revision = "0001_create_users_table"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    schema = get_settings().database_schema
    if schema:
        op.execute(sa.schema.CreateSchema(schema, if_not_exists=True))

    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        schema=schema,
    )


def downgrade() -> None:
    op.drop_table("users", schema=get_settings().database_schema)
