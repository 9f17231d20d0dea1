"""Pattern segment parser.

Splits a route pattern into its ``/``-delimited fragments and extracts the
dynamic ones:

- ``users`` -> literal fragment, kept verbatim
- ``:id`` -> required segment ``id`` matching ``[^/]+``
- ``\\d+:id`` -> required segment ``id`` matching ``\\d+``
- ``:action?`` -> optional segment ``action``; value and separator may be absent
"""

import re
from dataclasses import dataclass

from segment_router.exceptions import PatternSyntaxError

DEFAULT_SEGMENT_REGEX = r"[^/]+"

_NAME_DELIMITER = ":"
_OPTIONAL_MARKER = "?"
_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class Segment:
    """A dynamic pattern segment bound to a named parameter.

    Attributes:
        name: Parameter name bound to the segment.
        regex: Expression the segment value must match.
        optional: Whether the value (and its leading separator) may be absent.
        fragment: The raw fragment text, without its separator.
    """

    name: str
    regex: str
    optional: bool
    fragment: str

    @property
    def token(self) -> str:
        """The fragment with its leading separator, as it appears in the pattern."""
        return "/" + self.fragment


def is_static_pattern(pattern: str) -> bool:
    """Check if a pattern has no dynamic segments at all."""
    return _NAME_DELIMITER not in pattern


def is_dynamic_fragment(fragment: str) -> bool:
    return _NAME_DELIMITER in fragment


def split_pattern(pattern: str) -> list[str]:
    """Split a pattern into fragments, ignoring leading separators.

    Examples:
        "/users/:id" -> ["users", ":id"]
        "/" -> [""]
    """
    return pattern.lstrip("/").split("/")


def parse_segment(fragment: str) -> Segment:
    """Parse a single dynamic fragment into a Segment.

    The fragment is split on the first ``:``; a fragment with more than one
    ``:`` is rejected.

    Args:
        fragment: A fragment containing the ``:`` delimiter.

    Returns:
        Segment with name, regex and optional flag extracted.

    Raises:
        PatternSyntaxError: If the fragment does not have exactly one
            delimiter or the name is invalid.

    Examples:
        ":id" -> Segment(name="id", regex="[^/]+", optional=False, ...)
        "\\d+:id?" -> Segment(name="id", regex="\\d+", optional=True, ...)
    """
    regex, delimiter, name = fragment.partition(_NAME_DELIMITER)
    if not delimiter:
        raise PatternSyntaxError(
            f"Invalid segment '{fragment}': dynamic segments use '<regex>:<name>'"
        )

    if _NAME_DELIMITER in name:
        raise PatternSyntaxError(
            f"Invalid segment '{fragment}': expected exactly one '{_NAME_DELIMITER}'"
        )

    optional = name.endswith(_OPTIONAL_MARKER)
    if optional:
        name = name[: -len(_OPTIONAL_MARKER)]

    if not name:
        raise PatternSyntaxError(f"Invalid segment '{fragment}': missing name")

    if not _NAME_PATTERN.match(name):
        raise PatternSyntaxError(
            f"Invalid segment '{fragment}': '{name}' is not a valid parameter name. "
            f"Use letters, digits and underscores, not starting with a digit."
        )

    return Segment(
        name=name,
        regex=regex or DEFAULT_SEGMENT_REGEX,
        optional=optional,
        fragment=fragment,
    )


def parse_pattern(pattern: str) -> list[Segment]:
    """Parse the dynamic segments of a pattern, in declaration order.

    Literal fragments never produce a Segment.

    Args:
        pattern: A route pattern.

    Returns:
        List of parsed Segment objects (empty for static patterns).

    Raises:
        PatternSyntaxError: If a fragment is malformed or a name is repeated.

    Examples:
        "/welcome/home" -> []
        "/admin/:controller/:action?" -> [Segment("controller", ...), Segment("action", ...)]
    """
    if is_static_pattern(pattern):
        return []

    segments = []
    seen: set[str] = set()

    for fragment in split_pattern(pattern):
        if not is_dynamic_fragment(fragment):
            continue

        try:
            segment = parse_segment(fragment)
        except PatternSyntaxError as exc:
            raise PatternSyntaxError(f"{exc} in pattern '{pattern}'") from exc

        if segment.name in seen:
            raise PatternSyntaxError(
                f"Duplicate parameter '{segment.name}' in pattern '{pattern}'"
            )
        seen.add(segment.name)
        segments.append(segment)

    return segments
