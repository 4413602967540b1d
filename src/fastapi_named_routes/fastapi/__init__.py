"""FastAPI adapter for named route tables."""

from fastapi_named_routes.fastapi.router import create_router_from_table, to_fastapi_path

__all__ = ["create_router_from_table", "to_fastapi_path"]
