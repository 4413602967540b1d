"""Named, hierarchical route tables for client-side navigation."""

# Route table construction, the main entry point
from fastapi_named_routes.core.table import RouteDefinition, RouteTable, build_path, register
from fastapi_named_routes.core.tokens import Token, to_token, tokens_to_string
from fastapi_named_routes.core.validation import is_valid_name, is_valid_path_for_named_route

# Auxiliary helpers
from fastapi_named_routes.core.filter import filter_route_table
from fastapi_named_routes.core.navigation import NavigationEvent, Operation, is_terminal_route
from fastapi_named_routes.core.utils import flatten_deep

# Exceptions for error handling
from fastapi_named_routes.exceptions import (
    DuplicateRouteNameError,
    MalformedPatternError,
    NamedRoutingError,
    ParameterNameConflictError,
    RouteFilterError,
)
from fastapi_named_routes.fastapi.router import create_router_from_table, to_fastapi_path

__all__ = [
    # Primary API
    "register",
    "build_path",
    "is_valid_name",
    "is_valid_path_for_named_route",
    "to_token",
    "tokens_to_string",
    # Auxiliary helpers
    "filter_route_table",
    "flatten_deep",
    "is_terminal_route",
    # FastAPI adapter
    "create_router_from_table",
    "to_fastapi_path",
    # Core types
    "NavigationEvent",
    "Operation",
    "RouteDefinition",
    "RouteTable",
    "Token",
    # Exceptions
    "DuplicateRouteNameError",
    "MalformedPatternError",
    "NamedRoutingError",
    "ParameterNameConflictError",
    "RouteFilterError",
]

__version__ = "1.0.0"
