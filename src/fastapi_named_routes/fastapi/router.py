"""Router factory for named route tables.

Publishes every route of a built route table on a FastAPI APIRouter,
named after its dotted route name, so a server can answer client-side
routes and reverse-build their URLs with url_path_for.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from fastapi import APIRouter

from fastapi_named_routes.core.filter import filter_route_table
from fastapi_named_routes.core.table import RouteDefinition
from fastapi_named_routes.core.tokens import fastapi_param_name, tokens_to_string
from fastapi_named_routes.exceptions import ParameterNameConflictError

logger = logging.getLogger(__name__)

DEFAULT_METHODS: tuple[str, ...] = ("GET",)


def to_fastapi_path(definition: RouteDefinition, *, name: str = "") -> str:
    """Convert a route definition's tokens to a FastAPI path string.

    Args:
        definition: Route definition to convert.
        name: Route name, used for error messages only.

    Raises:
        ParameterNameConflictError: If two parameters map to the same
            FastAPI parameter name.

    Examples:
        "/" -> "/"
        "/article/:slug" -> "/article/{slug}"
        "/product/:slug-id" -> "/product/{slug_id}"
    """
    if definition.pattern == "/":
        return "/"
    _check_param_names(definition, name)
    return "/".join(token.to_fastapi_segment() for token in definition.tokens)


def _check_param_names(definition: RouteDefinition, name: str) -> None:
    """Reject parameters sharing a FastAPI parameter name.

    Examples:
        "/x/:id/:id" -> conflict on "id"
        "/x/:a-b/:a_b" -> conflict on "a_b"
    """
    seen: dict[str, list[str]] = {}
    for token in definition.parameters:
        seen.setdefault(fastapi_param_name(token.text), []).append(f":{token.text}")

    for param, originals in seen.items():
        if len(originals) > 1:
            route = f"Route '{name}'" if name else "Route"
            raise ParameterNameConflictError(
                f"{route} ('{definition.pattern}') has parameters that clash "
                f"as FastAPI parameter '{param}': {', '.join(repr(o) for o in originals)}"
            )


def create_router_from_table(
    route_table: Mapping[str, RouteDefinition],
    endpoint: Callable[..., Any],
    *,
    prefix: str = "",
    methods: Sequence[str] = DEFAULT_METHODS,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
) -> APIRouter:
    """Create a FastAPI APIRouter serving every route of a route table.

    Every route is registered with the same endpoint (typically the one
    returning the client application shell) under its dotted route name.

    Args:
        route_table: Built route table, as filled by register().
        endpoint: Handler used for every route.
        prefix: Optional URL prefix for all routes.
        methods: HTTP methods to register for each route.
        include: Allowlist of route name patterns.
        exclude: Denylist of route name patterns.

    Returns:
        A FastAPI APIRouter with one route per route name.

    Raises:
        RouteFilterError: If both include and exclude are non-empty.
        ParameterNameConflictError: If a route's parameters clash as FastAPI
            parameter names.

    Example:
        from fastapi import FastAPI
        from fastapi_named_routes import create_router_from_table

        app = FastAPI()
        app.include_router(create_router_from_table(route_table, serve_shell))
        app.url_path_for("article.detail", slug="hello")  # "/article/hello"
    """
    selected = filter_route_table(route_table, include=include, exclude=exclude)

    logger.info(
        "Selected named routes",
        extra={"count": len(selected), "total": len(route_table)},
    )

    router = APIRouter(prefix=prefix)

    # Sort routes for priority: static before dynamic, shorter before longer
    sorted_routes = sorted(
        selected.items(),
        key=lambda item: (
            len(item[1].parameters),
            len(item[1].tokens),
            item[1].pattern,
            item[0],
        ),
    )

    for name, definition in sorted_routes:
        path = to_fastapi_path(definition, name=name)
        if prefix and path == "/":
            # Root route answers on the bare prefix
            path = ""
        router.add_api_route(
            path,
            endpoint,
            methods=list(methods),
            name=name,
            include_in_schema=False,
        )
        logger.debug(
            "Registered route",
            extra={
                "route_name": name,
                "pattern": tokens_to_string(definition.tokens),
                "path": path,
            },
        )

    logger.info(
        "Route registration complete",
        extra={
            "route_count": len(sorted_routes),
            "prefix": prefix or "(none)",
        },
    )

    return router
