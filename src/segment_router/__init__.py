"""Standalone URL routing with named segments and reverse routing."""

# Core functions
from segment_router.core.builder import build_url
from segment_router.core.compiler import Capture, CompiledPattern, compile_pattern
from segment_router.core.matcher import match_path

# Core types and the route table
from segment_router.core.parser import (
    DEFAULT_SEGMENT_REGEX,
    Segment,
    is_static_pattern,
    parse_pattern,
    parse_segment,
)
from segment_router.core.route import DEFAULT_METHODS, Route
from segment_router.core.router import RouteMatch, Router

# Exceptions — for error handling
from segment_router.exceptions import (
    MissingParameterError,
    PatternSyntaxError,
    RouteNotFoundError,
    RoutingError,
)

__all__ = [
    # Primary API
    "Router",
    "Route",
    "RouteMatch",
    "DEFAULT_METHODS",
    # Core functions
    "build_url",
    "compile_pattern",
    "is_static_pattern",
    "match_path",
    "parse_pattern",
    "parse_segment",
    # Core types
    "Capture",
    "CompiledPattern",
    "DEFAULT_SEGMENT_REGEX",
    "Segment",
    # Exceptions
    "MissingParameterError",
    "PatternSyntaxError",
    "RouteNotFoundError",
    "RoutingError",
]

__version__ = "1.0.0"
