"""URL and resource path joining for WADL resource trees.

WADL resources nest arbitrarily and each one contributes a relative ``path``
segment. Segments are joined so that the result never contains empty
segments, whatever combination of leading and trailing slashes the WADL uses.
"""


def strip_trailing_slash(value: str) -> str:
    """Remove every trailing slash from a path or URL."""
    return value.rstrip("/")


def strip_slashes(value: str) -> str:
    """Remove leading and trailing slashes from a path segment."""
    return value.strip("/")


def create_url(base: str | None, path: str | None) -> str:
    """Join a base path or URL with a relative resource segment.

    Args:
        base: Already resolved parent path, or an absolute URL.
        path: Relative segment of the child resource (may be empty).

    Returns:
        The joined path with no doubled or trailing slashes.

    Examples:
        >>> create_url("http://h/", "/a/")
        'http://h/a'
        >>> create_url("a/", "")
        'a'
    """
    base = base or ""
    path = path or ""

    if not path:
        return strip_trailing_slash(base)

    if not base:
        return strip_trailing_slash(path)

    return strip_trailing_slash(base) + "/" + strip_slashes(path)
