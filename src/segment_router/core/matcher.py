"""Path matching against compiled patterns."""

from segment_router.core.compiler import CompiledPattern


def match_path(compiled: CompiledPattern, path: str) -> dict[str, str] | None:
    """Match a request path against a compiled pattern.

    The whole path must match. Captures are associated with names through the
    compiled descriptors, not through regex group names. An optional segment
    whose group did not participate contributes no key.

    Args:
        compiled: The compiled route pattern.
        path: The request path.

    Returns:
        Mapping of segment name to captured value, or None if the path does
        not match. Static patterns return an empty mapping on match.

    Examples:
        "/:controller/:action?" + "/user" -> {"controller": "user"}
        "/:controller/:action?" + "/user/edit/5" -> None
    """
    if compiled.regex is None:
        return {} if path == compiled.pattern else None

    match = compiled.regex.fullmatch(path)
    if match is None:
        return None

    params: dict[str, str] = {}
    for capture in compiled.captures:
        value = match.group(capture.index)
        if value is not None:
            params[capture.name] = value
    return params
