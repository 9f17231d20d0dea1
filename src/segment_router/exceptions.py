"""Exception hierarchy for routing errors."""


class RoutingError(Exception):
    """Base exception for all routing errors.

    This is the parent class for all exceptions raised by the
    segment-router package. Catching this exception will catch all
    routing-related errors.

    Example:
        try:
            url = router.url("profile", {"id": 5})
        except RoutingError as e:
            logger.error(f"Failed to build url: {e}")
    """


class PatternSyntaxError(RoutingError, ValueError):
    """Raised when a route pattern cannot be parsed or compiled.

    This exception is raised at registration time, so a broken pattern
    fails when the route is added rather than on the first request.

    Examples of invalid syntax:
        - Missing parameter name: /users/\\d+:
        - More than one name delimiter: /users/:id:slug
        - Invalid parameter names: /:123, /:not-valid
        - Repeated parameter names: /:id/:id
        - Invalid embedded regex: /[a-z:slug

    Example:
        PatternSyntaxError("Invalid segment '\\d+:' in pattern '/users/\\d+:': missing name")
    """


class MissingParameterError(RoutingError, KeyError):
    """Raised when reverse routing lacks a required segment value.

    Attributes:
        segment: Name of the required segment that had no value.
        pattern: The pattern that was being built.

    Example:
        MissingParameterError("controller", "/:controller/:action?")
    """

    def __init__(self, segment: str, pattern: str) -> None:
        self.segment = segment
        self.pattern = pattern
        super().__init__(
            f"The required route segment '{segment}' is missing "
            f"(pattern '{pattern}')"
        )

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class RouteNotFoundError(RoutingError, KeyError):
    """Raised when reverse routing asks for an unregistered route name.

    Attributes:
        name: The route name that was looked up.

    Example:
        RouteNotFoundError("dashboard")
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"A route with the name '{name}' was not found")

    def __str__(self) -> str:
        return str(self.args[0])
