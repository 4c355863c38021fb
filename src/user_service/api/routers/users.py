"""Health and user lookup endpoints.

Handlers are plain methods on :class:`UserHandlers`, which is constructed with
the :class:`DatabaseService` it reads from. :data:`ROUTES` binds each method
to an HTTP method and path.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import APIRouter, Path, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BeforeValidator

from user_service.api.models import UserResponse
from user_service.database import DatabaseService, UserRepository
from user_service.shared.entities import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)

_CANONICAL_INT = re.compile(r"-?[0-9]+")


def _require_canonical_int(value: object) -> object:
    """Reject ids like ``1.0`` or ``+1`` that lax int parsing would accept."""
    if isinstance(value, str) and not _CANONICAL_INT.fullmatch(value):
        msg = "user ID must be a base-10 integer"
        raise ValueError(msg)
    return value


UserId = Annotated[
    int,
    BeforeValidator(_require_canonical_int),
    Path(ge=INT64_MIN, le=INT64_MAX),
]


class UserHandlers:
    """Request handlers backed by an explicitly supplied database service."""

    def __init__(self, database: DatabaseService) -> None:
        self._database = database

    def health(self) -> str:
        """Liveness probe; never touches the database."""
        return "OK"

    def list_users(self) -> list[UserResponse]:
        """Return every stored user."""
        with self._database.session() as session:
            users = UserRepository(session).find_all()
        logger.debug("Fetched %d users", len(users))
        return [UserResponse.model_validate(user, from_attributes=True) for user in users]

    def get_user(self, user_id: UserId) -> Any:
        """Return one user, or an empty 404 response when it does not exist."""
        with self._database.session() as session:
            user = UserRepository(session).find_by_id(user_id)
        if user is None:
            logger.info("User %d not found", user_id)
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return UserResponse.model_validate(user, from_attributes=True)


@dataclass(frozen=True, slots=True)
class RouteSpec:
    """One entry of the route table."""

    method: str
    path: str
    handler: str
    response_model: Any = None
    response_class: type[Response] = JSONResponse


ROUTES: tuple[RouteSpec, ...] = (
    RouteSpec("GET", "/health", "health", response_class=PlainTextResponse),
    RouteSpec("GET", "/users", "list_users", response_model=list[UserResponse]),
    RouteSpec("GET", "/users/{user_id}", "get_user", response_model=UserResponse),
)


def build_router(handlers: UserHandlers) -> APIRouter:
    """Register every :data:`ROUTES` entry against the given handlers."""
    router = APIRouter(tags=["users"])
    for route in ROUTES:
        router.add_api_route(
            route.path,
            getattr(handlers, route.handler),
            methods=[route.method],
            name=route.handler,
            response_model=route.response_model,
            response_class=route.response_class,
        )
    return router
