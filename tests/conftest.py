"""Shared pytest fixtures for segment-router tests."""

import pytest

from segment_router import Router


@pytest.fixture
def router() -> Router:
    """Return an empty router without a sub-directory."""
    return Router()


@pytest.fixture
def crud_router() -> Router:
    """Return a router with a typical controller/action/id route table.

    Routes, in registration order:
    - home: static "/" for GET only
    - login: static "/login" for GET only
    - user: "/user/:id?" with per-method actions
    - crud: "/:controller/:action?/\\d+:id?"
    """
    router = Router()
    router.get("home", "/").defaults({"controller": "home"})
    router.get("login", "/login").defaults({"controller": "login"})
    (
        router.add("user", "/user/:id?")
        .defaults({"controller": "user"})
        .get({"action": "read"})
        .post({"action": "create"})
        .put({"action": "update"})
        .delete({"action": "delete"})
    )
    router.add("crud", "/:controller/:action?/\\d+:id?")
    return router
