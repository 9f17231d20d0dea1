"""Unit tests for exception hierarchy."""

import pytest

from segment_router.exceptions import (
    MissingParameterError,
    PatternSyntaxError,
    RouteNotFoundError,
    RoutingError,
)


class TestRoutingError:
    """Tests for the base exception class."""

    def test_inherits_from_exception(self) -> None:
        """RoutingError inherits from Exception."""
        assert issubclass(RoutingError, Exception)

    def test_message_is_preserved(self) -> None:
        """Exception message is accessible."""
        error = RoutingError("specific error details")
        assert str(error) == "specific error details"


class TestPatternSyntaxError:
    """Tests for pattern syntax errors."""

    def test_inherits_from_routing_error(self) -> None:
        assert issubclass(PatternSyntaxError, RoutingError)

    def test_is_a_value_error(self) -> None:
        """Configuration code catching ValueError also sees pattern errors."""
        assert issubclass(PatternSyntaxError, ValueError)

    def test_can_be_caught_with_base_class(self) -> None:
        try:
            raise PatternSyntaxError("Invalid segment ':'")
        except RoutingError as e:
            assert isinstance(e, PatternSyntaxError)


class TestMissingParameterError:
    """Tests for reverse routing with a missing segment value."""

    def test_inherits_from_routing_error(self) -> None:
        assert issubclass(MissingParameterError, RoutingError)

    def test_is_a_key_error(self) -> None:
        assert issubclass(MissingParameterError, KeyError)

    def test_carries_segment_and_pattern(self) -> None:
        error = MissingParameterError("controller", "/:controller")
        assert error.segment == "controller"
        assert error.pattern == "/:controller"

    def test_message_is_not_quoted(self) -> None:
        """KeyError normally repr()s its argument; the message stays plain."""
        error = MissingParameterError("controller", "/:controller")
        assert str(error) == (
            "The required route segment 'controller' is missing (pattern '/:controller')"
        )


class TestRouteNotFoundError:
    """Tests for unknown route names."""

    def test_inherits_from_routing_error(self) -> None:
        assert issubclass(RouteNotFoundError, RoutingError)

    def test_carries_name(self) -> None:
        assert RouteNotFoundError("dashboard").name == "dashboard"

    def test_message(self) -> None:
        with pytest.raises(RouteNotFoundError, match="'dashboard' was not found"):
            raise RouteNotFoundError("dashboard")
