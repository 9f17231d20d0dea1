"""Ordered route table.

Routes are tried in registration order and the first match wins. Every
pattern is prefixed with the router's sub-directory at registration time.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from segment_router.core.route import DEFAULT_METHODS, Route
from segment_router.exceptions import RouteNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteMatch:
    """The result of resolving a request against a Router."""

    name: str
    route: Route
    params: dict[str, Any] = field(default_factory=dict)


def normalize_sub_directory(directory: str) -> str:
    """Normalize a sub-directory to "" or a leading-slash path.

    Examples:
        "" -> ""
        "admin" -> "/admin"
        "testing/" -> "/testing"
    """
    if directory == "":
        return ""
    return "/" + directory.strip("/")


class Router:
    """A named, insertion-ordered collection of routes.

    Args:
        sub_directory: Path the application is mounted under. Prepended to
            every pattern added afterwards.

    Example:
        router = Router()
        router.add("crud", "/:controller/:action?/:id?")
        router.match("GET", "/user/edit/5")
        # {"controller": "user", "action": "edit", "id": "5"}
        router.url("crud", {"controller": "post"})
        # "/post"
    """

    def __init__(self, sub_directory: str = "") -> None:
        self._routes: dict[str, Route] = {}
        self._sub_directory = ""
        self.set_sub_directory(sub_directory)

    def __contains__(self, name: object) -> bool:
        return name in self._routes

    def __getitem__(self, name: str) -> Route:
        try:
            return self._routes[name]
        except KeyError:
            raise RouteNotFoundError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    @property
    def routes(self) -> Mapping[str, Route]:
        return MappingProxyType(self._routes)

    @property
    def sub_directory(self) -> str:
        return self._sub_directory

    def get_sub_directory(self) -> str:
        return self._sub_directory

    def set_sub_directory(self, directory: str) -> "Router":
        """Set the sub-directory for routes added from now on."""
        self._sub_directory = normalize_sub_directory(directory)
        return self

    def add(
        self,
        name: str,
        pattern: str,
        methods: str | Iterable[str] = DEFAULT_METHODS,
    ) -> Route:
        """Register a route.

        Re-using a name replaces the earlier route but keeps its position.

        Args:
            name: Route name, used for reverse routing.
            pattern: Route pattern, without the sub-directory.
            methods: HTTP methods the route responds to; a single verb may be
                given as a string.

        Returns:
            The new Route, for chaining defaults.

        Raises:
            PatternSyntaxError: If the pattern is malformed.
        """
        route = Route(self._sub_directory + pattern, methods)

        if name in self._routes:
            logger.warning(
                "Route name already registered, replacing it",
                extra={"route": name, "previous_pattern": self._routes[name].pattern},
            )
        self._routes[name] = route

        logger.debug(
            "Registered route",
            extra={
                "route": name,
                "pattern": route.pattern,
                "methods": sorted(route.methods),
            },
        )
        return route

    def get(self, name: str, pattern: str) -> Route:
        return self.add(name, pattern, ("GET",))

    def post(self, name: str, pattern: str) -> Route:
        return self.add(name, pattern, ("POST",))

    def put(self, name: str, pattern: str) -> Route:
        return self.add(name, pattern, ("PUT",))

    def delete(self, name: str, pattern: str) -> Route:
        return self.add(name, pattern, ("DELETE",))

    def resolve(self, method: str, path: str) -> RouteMatch | None:
        """Find the first route matching a request.

        Returns:
            RouteMatch with the route name and merged params, or None.
        """
        for name, route in self._routes.items():
            params = route.match(method, path)
            if params is not None:
                logger.debug(
                    "Matched route",
                    extra={"route": name, "method": method, "path": path},
                )
                return RouteMatch(name=name, route=route, params=params)
        return None

    def match(self, method: str, path: str) -> dict[str, Any]:
        """Return the params of the first matching route, or an empty dict."""
        resolved = self.resolve(method, path)
        return resolved.params if resolved is not None else {}

    def url(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        """Build a concrete path for a named route.

        Raises:
            RouteNotFoundError: If no route is registered under ``name``.
            MissingParameterError: If a required segment has no value.
        """
        return self[name].url(params)
