"""Pattern compiler.

Turns a route pattern into a single anchored regular expression plus an
ordered list of capture descriptors. Literal fragments are emitted verbatim,
so raw regex syntax in a pattern (``/one|two:controller``) passes through.

- ``/users/:id`` -> ``/users/([^/]+)`` with ``id`` bound to group 1
- ``/:controller/:action?`` -> ``/([^/]+)(?:/([^/]+))?``
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

from segment_router.core.parser import (
    Segment,
    is_dynamic_fragment,
    is_static_pattern,
    parse_pattern,
    split_pattern,
)
from segment_router.exceptions import PatternSyntaxError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Capture:
    """Binds a segment name to a positional group of the compiled regex."""

    name: str
    index: int
    optional: bool = False


@dataclass(frozen=True)
class CompiledPattern:
    """The matchable form of a route pattern.

    Attributes:
        pattern: The source pattern.
        regex: Anchored expression for dynamic patterns, None for static ones.
        captures: Capture descriptors in declaration order.
    """

    pattern: str
    regex: re.Pattern[str] | None = None
    captures: tuple[Capture, ...] = ()

    @property
    def is_static(self) -> bool:
        return self.regex is None


def _sentinel(position: int) -> str:
    return f"_segment_{position}"


def _compile(expression: str, pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(expression)
    except re.error as exc:
        raise PatternSyntaxError(f"Pattern '{pattern}' does not compile: {exc}") from exc


def _segment_expression(segment: Segment, separator: str, group: str = "") -> str:
    capture = f"{separator}({group}{segment.regex})"
    if segment.optional:
        # The separator goes with the value so "/user/edit" can match
        # "/:controller/:action/:id?"
        return f"(?:{capture})?"
    return capture


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a route pattern into its matchable form.

    Results are memoized per pattern string; the compiled form is a pure
    function of the pattern.

    Args:
        pattern: A route pattern.

    Returns:
        CompiledPattern. Static patterns carry no regex and no captures.

    Raises:
        PatternSyntaxError: If a segment is malformed or the resulting
            expression is not a valid regular expression.

    Examples:
        "/welcome" -> CompiledPattern("/welcome", None, ())
        "/\\d+:id" -> CompiledPattern("/\\d+:id", re.compile("/(\\d+)"), (Capture("id", 1),))
    """
    if is_static_pattern(pattern):
        return CompiledPattern(pattern=pattern)

    segments = iter(parse_pattern(pattern))
    fragments = split_pattern(pattern)
    # Leading separators are kept as written
    lead = pattern[: len(pattern) - len(pattern.lstrip("/"))]

    parts: list[str] = []
    # Same expression with each capture tagged, used only to locate group indices
    tagged_parts: list[str] = []
    dynamic: list[Segment] = []

    for position, fragment in enumerate(fragments):
        separator = lead if position == 0 else "/"

        if not is_dynamic_fragment(fragment):
            parts.append(separator + fragment)
            tagged_parts.append(separator + fragment)
            continue

        segment = next(segments)
        parts.append(_segment_expression(segment, separator))
        tagged_parts.append(
            _segment_expression(segment, separator, f"?P<{_sentinel(len(dynamic))}>")
        )
        dynamic.append(segment)

    expression = "".join(parts)
    regex = _compile(expression, pattern)
    # Naming a group does not change its number
    group_index = _compile("".join(tagged_parts), pattern).groupindex
    captures = [
        Capture(segment.name, group_index[_sentinel(position)], segment.optional)
        for position, segment in enumerate(dynamic)
    ]

    logger.debug(
        "Compiled route pattern",
        extra={"pattern": pattern, "regex": expression, "captures": len(captures)},
    )

    return CompiledPattern(pattern=pattern, regex=regex, captures=tuple(captures))
