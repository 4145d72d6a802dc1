"""Title validation for request paths.

This is the only place untrusted request paths are checked before a title
is turned into a filename.
"""

import re
from typing import NamedTuple

ACTIONS = ("edit", "save", "view")

_TITLE_RE = re.compile(r"[A-Za-z0-9]+")
_PATH_RE = re.compile(r"/(edit|save|view)/([A-Za-z0-9]+)")


class RouteMatch(NamedTuple):
    """Action and title extracted from a valid request path."""

    action: str
    title: str


def validate_path(raw_path: str) -> RouteMatch | None:
    """Match a request path against the page route grammar.

    Args:
        raw_path: Request path, e.g. "/view/FrontPage"

    Returns:
        RouteMatch for a valid path, None otherwise
    """
    match = _PATH_RE.fullmatch(raw_path)
    if match is None:
        return None
    return RouteMatch(action=match.group(1), title=match.group(2))


def is_valid_title(title: str) -> bool:
    """Check that a bare title is non-empty and alphanumeric ASCII."""
    return _TITLE_RE.fullmatch(title) is not None
