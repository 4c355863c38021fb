"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_service.api.routers import UserHandlers, build_router
from user_service.database import DatabaseService
from user_service.logging_config import setup_logging
from user_service.settings import ServiceSettings, get_settings

logger = logging.getLogger(__name__)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests (e.g. a non-integer user ID) as 400."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_api(
    database: DatabaseService | None = None,
    *,
    settings: ServiceSettings | None = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    When no ``database`` is supplied one is built from settings, and its
    connection pool is disposed on shutdown.
    """
    config = settings or get_settings()
    setup_logging(config.log_level)

    owns_database = database is None
    db = database or DatabaseService(settings=config)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("%s ready (schema=%s)", config.service_name, db.schema or "<default>")
        yield
        if owns_database:
            db.dispose()

    app = FastAPI(title=config.service_name, lifespan=lifespan)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.include_router(build_router(UserHandlers(db)))
    return app
