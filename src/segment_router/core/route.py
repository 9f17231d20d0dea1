"""A single named-parameter route."""

from collections.abc import Iterable, Mapping
from typing import Any

from segment_router.core.builder import build_url
from segment_router.core.compiler import CompiledPattern, compile_pattern
from segment_router.core.matcher import match_path

DEFAULT_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE")


class Route:
    """A pattern bound to a set of HTTP methods and default parameters.

    The pattern is compiled on construction, so malformed patterns fail
    immediately and the compiled form is never written after that.

    Matched parameters are merged with increasing precedence:
    ``defaults`` < per-method defaults < path captures.

    Example:
        route = Route("/user/:id?").defaults({"controller": "user"}).put({"action": "update"})
        route.match("PUT", "/user/5")
        # {"controller": "user", "action": "update", "id": "5"}
    """

    def __init__(self, pattern: str, methods: str | Iterable[str] = DEFAULT_METHODS) -> None:
        if isinstance(methods, str):
            methods = (methods,)
        self._pattern = pattern
        self._methods = frozenset(method.upper() for method in methods)
        self._defaults: dict[str, Any] = {}
        self._method_defaults: dict[str, dict[str, Any]] = {}
        self._compiled = compile_pattern(pattern)

    def __repr__(self) -> str:
        return f"Route({self._pattern!r}, methods={sorted(self._methods)!r})"

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def methods(self) -> frozenset[str]:
        return self._methods

    @property
    def compiled(self) -> CompiledPattern:
        return self._compiled

    @property
    def default_params(self) -> dict[str, Any]:
        return dict(self._defaults)

    @property
    def method_defaults(self) -> dict[str, dict[str, Any]]:
        return {method: dict(params) for method, params in self._method_defaults.items()}

    def is_static(self) -> bool:
        return self._compiled.is_static

    def defaults(self, params: Mapping[str, Any]) -> "Route":
        """Set parameters applied to every match, whatever the method."""
        self._defaults = dict(params)
        return self

    def method_default(self, method: str, params: Mapping[str, Any]) -> "Route":
        """Set parameters applied only when matching with ``method``."""
        self._method_defaults[method.upper()] = dict(params)
        return self

    def get(self, params: Mapping[str, Any]) -> "Route":
        return self.method_default("GET", params)

    def post(self, params: Mapping[str, Any]) -> "Route":
        return self.method_default("POST", params)

    def put(self, params: Mapping[str, Any]) -> "Route":
        return self.method_default("PUT", params)

    def delete(self, params: Mapping[str, Any]) -> "Route":
        return self.method_default("DELETE", params)

    def match(self, method: str, path: str) -> dict[str, Any] | None:
        """Match a request against this route.

        Args:
            method: The HTTP request method.
            path: The request path.

        Returns:
            The merged parameter map, or None if the method is not allowed
            or the path does not match.
        """
        method = method.upper()
        if method not in self._methods:
            return None

        captured = match_path(self._compiled, path)
        if captured is None:
            return None

        return {
            **self._defaults,
            **self._method_defaults.get(method, {}),
            **captured,
        }

    def is_match(self, method: str, path: str) -> bool:
        return self.match(method, path) is not None

    def url(self, params: Mapping[str, Any] | None = None) -> str:
        """Build a concrete path for this route.

        Defaults are not merged into ``params``; only the values passed in
        are substituted.

        Raises:
            MissingParameterError: If a required segment has no value.
        """
        return build_url(self._pattern, params)
