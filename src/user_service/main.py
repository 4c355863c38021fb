"""User service API entrypoint."""

from __future__ import annotations

import logging

import uvicorn

from user_service.api import create_api
from user_service.settings import get_settings

logger = logging.getLogger(__name__)

app = create_api()


def _run_uvicorn(*, reload: bool) -> None:
    """Start uvicorn with a consistent configuration."""
    config = get_settings()
    logger.info(
        "Starting %s on %s:%s (schema=%s)",
        config.service_name,
        config.api_host,
        config.api_port,
        config.database_schema or "<default>",
    )
    uvicorn.run(
        "user_service.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=reload,
        log_config=None,
    )


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)
