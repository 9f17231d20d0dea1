"""Reverse URL building.

Substitutes parameter values back into a pattern's dynamic segments:

- ``/:controller/:action?`` + ``{"controller": "post"}`` -> ``/post``
- ``/:controller/:action?`` + ``{"controller": "post", "action": "new"}`` -> ``/post/new``
"""

from collections.abc import Mapping
from typing import Any

from segment_router.core.parser import (
    is_dynamic_fragment,
    is_static_pattern,
    parse_pattern,
    split_pattern,
)
from segment_router.exceptions import MissingParameterError


def build_url(pattern: str, params: Mapping[str, Any] | None = None) -> str:
    """Build a concrete path from a pattern and parameter values.

    Static patterns are returned verbatim and params are ignored. Literal
    fragments pass through unchanged. A parameter set to None counts as
    absent. Values are rendered with str() and are not URL-encoded.

    Args:
        pattern: A route pattern.
        params: Values keyed by segment name.

    Returns:
        The concrete path.

    Raises:
        MissingParameterError: If a required segment has no value.
        PatternSyntaxError: If the pattern is malformed.
    """
    if is_static_pattern(pattern):
        return pattern

    params = params or {}
    segments = iter(parse_pattern(pattern))
    lead = pattern[: len(pattern) - len(pattern.lstrip("/"))]
    parts: list[str] = []

    for position, fragment in enumerate(split_pattern(pattern)):
        separator = lead if position == 0 else "/"

        if not is_dynamic_fragment(fragment):
            parts.append(separator + fragment)
            continue

        segment = next(segments)
        value = params.get(segment.name)

        if value is None:
            if not segment.optional:
                raise MissingParameterError(segment.name, pattern)
            # Drop the separator together with the value
            continue

        parts.append(f"{separator}{value}")

    return "".join(parts)
