"""Route table filtering for include/exclude deployment topologies.

Filters a route table by glob patterns over dotted route names, so a
server can publish only part of the client's navigation tree.
"""

import fnmatch
from collections.abc import Mapping, Sequence

from fastapi_named_routes.core.table import RouteDefinition
from fastapi_named_routes.exceptions import RouteFilterError

_GLOB_CHARS = frozenset("*?[")


def validate_filter_params(
    include: Sequence[str] | None,
    exclude: Sequence[str] | None,
) -> None:
    """Validate that include and exclude are not both non-empty.

    Args:
        include: Allowlist patterns (or None / empty).
        exclude: Denylist patterns (or None / empty).

    Raises:
        RouteFilterError: If both include and exclude are non-empty.
    """
    if include and exclude:
        raise RouteFilterError(
            f"Cannot specify both include and exclude filters: "
            f"include={list(include)}, exclude={list(exclude)}"
        )


def filter_route_table(
    route_table: Mapping[str, RouteDefinition],
    *,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
) -> dict[str, RouteDefinition]:
    """Filter a route table by include/exclude patterns.

    Patterns match against dotted route names. The input table is left
    untouched and insertion order is preserved.

    Args:
        route_table: Table to filter.
        include: Allowlist patterns. Only matching routes are kept.
        exclude: Denylist patterns. Matching routes are removed.

    Returns:
        New table with the selected routes.

    Raises:
        RouteFilterError: If both include and exclude are non-empty.
    """
    validate_filter_params(include, exclude)

    if not include and not exclude:
        return dict(route_table)

    result: dict[str, RouteDefinition] = {}
    for name, definition in route_table.items():
        if (include and _matches_any_pattern(name, include)) or (
            exclude and not _matches_any_pattern(name, exclude)
        ):
            result[name] = definition

    return result


def _has_glob_characters(pattern: str) -> bool:
    """Check if a pattern contains glob metacharacters."""
    return bool(_GLOB_CHARS & set(pattern))


def _matches_any_pattern(name: str, patterns: Sequence[str]) -> bool:
    """Check if a dotted route name matches any of the given patterns.

    Glob patterns (containing *, ?, or [) use fnmatch against the full
    name. Plain patterns match the name itself or any dotted descendant.

    Examples:
        _matches_any_pattern("article.category", ["article"]) -> True
        _matches_any_pattern("articles", ["article"]) -> False
        _matches_any_pattern("admin.users", ["*.users"]) -> True
    """
    for pattern in patterns:
        if _has_glob_characters(pattern):
            if fnmatch.fnmatchcase(name, pattern):
                return True
        elif name == pattern or name.startswith(f"{pattern}."):
            return True
    return False
