"""FastAPI adapter for segment routing."""

from segment_router.fastapi.middleware import (
    RouteMatchMiddleware,
    route_name,
    route_params,
)

__all__ = ["RouteMatchMiddleware", "route_name", "route_params"]
