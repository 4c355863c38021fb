"""Route definitions for public HTTP endpoints."""

from user_service.api.routers.users import ROUTES, RouteSpec, UserHandlers, build_router

__all__ = ["ROUTES", "RouteSpec", "UserHandlers", "build_router"]
