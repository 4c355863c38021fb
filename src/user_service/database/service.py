"""Database session management utilities."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from user_service.database.base import BaseSchema
from user_service.settings import ServiceSettings, get_settings

logger = logging.getLogger(__name__)


class DatabaseService:
    """Wraps SQLAlchemy engine and session factory."""

    def __init__(
        self,
        url: str | None = None,
        *,
        schema: str | None = None,
        settings: ServiceSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        engine = create_engine(url or config.database_url, future=True)
        self._schema = schema or config.database_schema
        if self._schema:
            engine = engine.execution_options(
                schema_translate_map={None: self._schema}
            )
        self._engine = engine
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            class_=Session,
        )

    @property
    def engine(self) -> Engine:
        """Expose the SQLAlchemy engine."""

        return self._engine

    @property
    def schema(self) -> str | None:
        """Schema the ``users`` table is resolved in, if any."""

        return self._schema

    def create_tables(self) -> None:
        """Create all mapped tables that do not exist yet.

        Local development and test helper; deployed databases are managed by
        the Alembic migrations.
        """

        BaseSchema.metadata.create_all(self._engine)

    def dispose(self) -> None:
        """Close pooled connections."""

        self._engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a transactional session scope."""

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            logger.warning("Rolling back database session", exc_info=True)
            session.rollback()
            raise
        finally:
            session.close()
