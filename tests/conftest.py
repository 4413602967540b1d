"""Shared pytest fixtures for fastapi-named-routes tests."""

from typing import Any

import pytest

from fastapi_named_routes import RouteTable, register


@pytest.fixture
def route_table() -> RouteTable:
    """Return an empty route table."""
    return {}


@pytest.fixture
def register_route_tree(route_table: RouteTable):
    """Register a tree of nested route declarations into route_table.

    Accepts a dict where:
    - Keys are name segments (e.g., "article", "category")
    - Values are either:
      - str: path fragment of a leaf route
      - tuple[str, dict]: path fragment of a branch and its children

    Every leaf is registered once with the name and path hierarchies
    accumulated from the root.

    Example:
        {
            "home": "/",
            "article": ("/article", {
                "list": "/",
                "detail": "/:slug",
            }),
        }

    Returns the filled route table.
    """

    def _register(
        tree: dict[str, Any],
        names: tuple[str, ...] = (),
        paths: tuple[str, ...] = (),
    ) -> RouteTable:
        for key, value in tree.items():
            if isinstance(value, str):
                # Leaf node: register the accumulated hierarchies
                register(route_table, [*names, key], [*paths, value])
            elif isinstance(value, tuple):
                # Branch node: recurse
                path, children = value
                _register(children, (*names, key), (*paths, path))
            else:
                msg = f"Invalid tree value type: {type(value)}"
                raise TypeError(msg)

        return route_table

    return _register


@pytest.fixture
def news_route_table(register_route_tree) -> RouteTable:
    """Return a route table for a small news site."""
    return register_route_tree(
        {
            "home": "/",
            "article": (
                "/article",
                {
                    "list": "/",
                    "category": "/categories/:category",
                    "detail": "/:category/:slug-id",
                },
            ),
            "admin": (
                "/admin",
                {
                    "users": "/users",
                    "user": "/users/:user_id",
                },
            ),
        }
    )
