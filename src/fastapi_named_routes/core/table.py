"""Route table construction for named routes.

Joins nested path declarations into a single pattern, validates it,
and records it under the dotted route name.
"""

import logging
from collections.abc import MutableMapping, Sequence
from dataclasses import dataclass

from fastapi_named_routes.core.tokens import Token, to_token, tokens_to_string
from fastapi_named_routes.core.validation import is_valid_path_for_named_route
from fastapi_named_routes.exceptions import DuplicateRouteNameError, MalformedPatternError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteDefinition:
    """A registered route with its joined pattern and parsed tokens.

    Attributes:
        pattern: Joined path pattern (e.g., /article/:slug)
        tokens: Tuple of Token objects, one per '/'-separated slice of pattern
    """

    pattern: str
    tokens: tuple[Token, ...]

    @classmethod
    def from_pattern(cls, pattern: str) -> "RouteDefinition":
        """Build a definition by tokenizing every slice of pattern."""
        return cls(
            pattern=pattern,
            tokens=tuple(to_token(item) for item in pattern.split("/")),
        )

    @property
    def parameters(self) -> list[Token]:
        """Get all parameter tokens, in pattern order."""
        return [t for t in self.tokens if t.input]

    @property
    def has_parameters(self) -> bool:
        """Check if this route has any parameter tokens."""
        return any(t.input for t in self.tokens)


RouteTable = dict[str, RouteDefinition]


def build_path(path_hierarchy: Sequence[str]) -> str:
    """Join a path hierarchy into a single path.

    '/' fragments are no-ops for nesting levels that add no segment.
    Every other fragment already carries its own leading slash.

    Examples:
        build_path(["/"]) -> "/"
        build_path(["/foo", "/:slug"]) -> "/foo/:slug"
        build_path(["/foo", "/bar/:slug", "/wow"]) -> "/foo/bar/:slug/wow"
        build_path(["/foo", "/", "/deep-foo"]) -> "/foo/deep-foo"
    """
    fragments = [path for path in path_hierarchy if path != "/"]
    if not fragments:
        return "/"
    return "".join(fragments)


def register(
    route_table: MutableMapping[str, RouteDefinition],
    name_hierarchy: Sequence[str],
    path_hierarchy: Sequence[str],
) -> None:
    """Register a route in the route table.

    The name is the dot-joined name hierarchy and the pattern is the
    joined path hierarchy. Validation happens once, on the joined
    pattern, so a defect introduced at any nesting level is caught here.

    Args:
        route_table: Table to write the route into, mutated in place.
        name_hierarchy: Name segments from the outermost declaration inwards.
        path_hierarchy: Path fragments from the outermost declaration inwards.

    Raises:
        DuplicateRouteNameError: If the name is already registered with a
            different pattern.
        MalformedPatternError: If the joined pattern is not a valid
            named route path.

    Example:
        route_table: RouteTable = {}
        register(route_table, ["article", "category"], ["/article", "/:category"])
        route_table["article.category"].pattern  # "/article/:category"
    """
    name = ".".join(name_hierarchy)
    pattern = build_path(path_hierarchy)

    existing = route_table.get(name)
    if existing is not None and existing.pattern != pattern:
        raise DuplicateRouteNameError(
            f"Duplicate route name '{name}': "
            f"'{existing.pattern}' conflicts with '{pattern}'"
        )
    if not is_valid_path_for_named_route(pattern):
        raise MalformedPatternError(
            f"Generated pattern is malformed, check the route declarations: '{pattern}'"
        )

    definition = RouteDefinition.from_pattern(pattern)
    route_table[name] = definition

    logger.debug(
        "Registered named route",
        extra={"route_name": name, "pattern": tokens_to_string(definition.tokens)},
    )
