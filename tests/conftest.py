"""Test configuration and fixtures for the service test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from user_service.api import create_api
from user_service.database import DatabaseService, UserSchema
from user_service.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

    from user_service.shared import User


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("DATABASE_SCHEMA", raising=False)
    monkeypatch.delenv("API_PORT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database(tmp_path: Path) -> Iterator[DatabaseService]:
    """SQLite-backed database service with the tables created."""
    service = DatabaseService(f"sqlite:///{tmp_path / 'users.db'}")
    service.create_tables()
    yield service
    service.dispose()


@pytest.fixture
def add_users(database: DatabaseService) -> Callable[..., None]:
    """Insert rows directly, bypassing the read-only repository."""

    def _add(*users: User) -> None:
        with database.session() as session:
            session.add_all(
                [UserSchema(id=user.id, name=user.name, email=user.email) for user in users]
            )

    return _add


@pytest.fixture
def client(database: DatabaseService) -> Iterator[TestClient]:
    app = create_api(database)
    with TestClient(app) as test_client:
        yield test_client
