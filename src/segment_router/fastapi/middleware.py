"""ASGI middleware exposing route matches to FastAPI handlers.

The middleware resolves every HTTP request against a Router and stores the
result on the request state. It never rejects or dispatches a request.

Example:
    from fastapi import Depends, FastAPI
    from segment_router import Router
    from segment_router.fastapi import RouteMatchMiddleware, route_params

    router = Router()
    router.get("profile", "/users/\\d+:user_id")

    app = FastAPI()
    app.add_middleware(RouteMatchMiddleware, router=router)

    @app.get("/users/{user_id}")
    async def profile(params: dict = Depends(route_params)):
        return params
"""

import logging
from typing import Any

from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from segment_router.core.router import Router

logger = logging.getLogger(__name__)

ROUTE_NAME_KEY = "route_name"
ROUTE_PARAMS_KEY = "route_params"


class RouteMatchMiddleware:
    """Annotate HTTP requests with the first matching route.

    Sets ``request.state.route_name`` (None when nothing matched) and
    ``request.state.route_params`` (empty when nothing matched).
    Non-HTTP scopes pass through untouched.
    """

    def __init__(self, app: ASGIApp, router: Router) -> None:
        self.app = app
        self.router = router

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        resolved = self.router.resolve(scope["method"], scope["path"])
        state = scope.setdefault("state", {})

        if resolved is None:
            logger.debug(
                "No route matched request",
                extra={"method": scope["method"], "path": scope["path"]},
            )
            state[ROUTE_NAME_KEY] = None
            state[ROUTE_PARAMS_KEY] = {}
        else:
            state[ROUTE_NAME_KEY] = resolved.name
            state[ROUTE_PARAMS_KEY] = resolved.params

        await self.app(scope, receive, send)


def route_params(request: Request) -> dict[str, Any]:
    """FastAPI dependency returning the matched route params.

    Returns an empty dict when no route matched or the middleware is not
    installed.
    """
    return getattr(request.state, ROUTE_PARAMS_KEY, {})


def route_name(request: Request) -> str | None:
    """FastAPI dependency returning the matched route name, if any."""
    return getattr(request.state, ROUTE_NAME_KEY, None)
