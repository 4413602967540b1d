"""Validation predicates for route names and named route paths.

Both predicates report through their return value and never raise,
including for non-string input.
"""

import re
from typing import Any

_NAME_PATTERN = re.compile(r"^[-_.a-zA-Z0-9]+$")
_NAMED_ROUTE_PATH_PATTERN = re.compile(r"^(/:?[-_.a-zA-Z0-9]+)+$")


def is_valid_name(name: Any) -> bool:
    """Check whether a part of a route name is valid.

    A valid name consists of alphanumerics, dots, dashes, and underscores.

    Examples:
        "article" -> True
        "article.category" -> True
        "slug-id" -> True
        "foo/bar" -> False
        ":slug" -> False
        "" -> False
        42 -> False
    """
    if not isinstance(name, str):
        return False
    return _NAME_PATTERN.fullmatch(name) is not None


def is_valid_path_for_named_route(path: Any) -> bool:
    """Check whether a joined route path is valid for a named route.

    A valid path is '/', or '/token_1/token_2/.../token_n' where each
    token consists of alphanumerics, dots, dashes, or underscores and
    may be prefixed with ':' to mark a parameter.

    Examples:
        "/" -> True
        "/foo/:bar" -> True
        "/foo/:a.b" -> True
        "/foo//bar" -> False
        "/foo/:" -> False
        "" -> False
    """
    if not isinstance(path, str):
        return False
    if path == "/":
        return True
    return _NAMED_ROUTE_PATH_PATTERN.fullmatch(path) is not None
