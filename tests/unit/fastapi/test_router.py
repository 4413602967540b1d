"""Tests for the FastAPI router adapter module."""

import logging

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from fastapi_named_routes.core.table import RouteDefinition, register
from fastapi_named_routes.exceptions import (
    NamedRoutingError,
    ParameterNameConflictError,
    RouteFilterError,
)
from fastapi_named_routes.fastapi.router import (
    DEFAULT_METHODS,
    create_router_from_table,
    to_fastapi_path,
)


async def serve_shell(request: Request) -> dict:
    """Answer every client route with its route name and parameters."""
    return {"route": request.scope["route"].name, "params": request.path_params}


def _app(router) -> FastAPI:
    app = FastAPI()
    app.include_router(router)
    return app


class TestDefaultMethods:
    """Test the DEFAULT_METHODS configuration."""

    def test_get_only(self):
        assert DEFAULT_METHODS == ("GET",)


class TestToFastapiPath:
    """Test conversion of route definitions to FastAPI paths."""

    def test_root(self):
        assert to_fastapi_path(RouteDefinition.from_pattern("/")) == "/"

    def test_static(self):
        assert to_fastapi_path(RouteDefinition.from_pattern("/article/latest")) == "/article/latest"

    def test_parameters(self):
        definition = RouteDefinition.from_pattern("/article/:category/:slug")
        assert to_fastapi_path(definition) == "/article/{category}/{slug}"

    def test_parameter_names_become_identifiers(self):
        definition = RouteDefinition.from_pattern("/product/:slug-id")
        assert to_fastapi_path(definition) == "/product/{slug_id}"

    def test_repeated_parameter_raises(self):
        definition = RouteDefinition.from_pattern("/x/:id/:id")
        with pytest.raises(ParameterNameConflictError, match="'id'"):
            to_fastapi_path(definition)

    def test_parameters_clashing_after_rewrite_raise(self):
        definition = RouteDefinition.from_pattern("/x/:a.b/:a_b")
        with pytest.raises(ParameterNameConflictError) as exc_info:
            to_fastapi_path(definition, name="product.detail")

        message = str(exc_info.value)
        assert "product.detail" in message
        assert "'a_b'" in message
        assert "':a.b'" in message
        assert "':a_b'" in message


class TestCreateRouterFromTable:
    """Test route registration on the APIRouter."""

    def test_every_route_is_served(self, news_route_table):
        client = TestClient(_app(create_router_from_table(news_route_table, serve_shell)))

        response = client.get("/article/categories/tech")
        assert response.status_code == 200
        assert response.json() == {
            "route": "article.category",
            "params": {"category": "tech"},
        }

        assert client.get("/").json()["route"] == "home"
        assert client.get("/article").json()["route"] == "article.list"
        assert client.get("/admin/users").json()["route"] == "admin.users"

    def test_dashed_parameter_is_exposed_as_identifier(self, news_route_table):
        client = TestClient(_app(create_router_from_table(news_route_table, serve_shell)))

        response = client.get("/article/tech/hello-42")
        assert response.json() == {
            "route": "article.detail",
            "params": {"category": "tech", "slug_id": "hello-42"},
        }

    def test_static_routes_take_priority(self, route_table):
        register(route_table, ["user"], ["/users/:user_id"])
        register(route_table, ["me"], ["/users/me"])
        client = TestClient(_app(create_router_from_table(route_table, serve_shell)))

        assert client.get("/users/me").json()["route"] == "me"
        assert client.get("/users/42").json()["route"] == "user"

    def test_unknown_path_is_not_found(self, news_route_table):
        client = TestClient(_app(create_router_from_table(news_route_table, serve_shell)))
        assert client.get("/nowhere").status_code == 404

    def test_url_path_for_uses_route_names(self, news_route_table):
        app = _app(create_router_from_table(news_route_table, serve_shell))

        assert app.url_path_for("home") == "/"
        assert app.url_path_for("article.category", category="tech") == "/article/categories/tech"
        assert (
            app.url_path_for("article.detail", category="tech", slug_id="hello")
            == "/article/tech/hello"
        )

    def test_prefix(self, news_route_table):
        router = create_router_from_table(news_route_table, serve_shell, prefix="/app")
        client = TestClient(_app(router))

        assert client.get("/app/article").json()["route"] == "article.list"
        assert client.get("/article").status_code == 404

    def test_methods(self, route_table):
        register(route_table, ["home"], ["/"])
        router = create_router_from_table(route_table, serve_shell, methods=["GET", "HEAD"])
        client = TestClient(_app(router))

        assert client.head("/").status_code == 200
        assert client.post("/").status_code == 405

    def test_include(self, news_route_table):
        router = create_router_from_table(news_route_table, serve_shell, include=["article"])
        client = TestClient(_app(router))

        assert client.get("/article").status_code == 200
        assert client.get("/admin/users").status_code == 404

    def test_exclude(self, news_route_table):
        router = create_router_from_table(news_route_table, serve_shell, exclude=["admin"])
        client = TestClient(_app(router))

        assert client.get("/article").status_code == 200
        assert client.get("/admin/users").status_code == 404

    def test_include_and_exclude_raises(self, news_route_table):
        with pytest.raises(RouteFilterError):
            create_router_from_table(
                news_route_table, serve_shell, include=["article"], exclude=["admin"]
            )

    def test_routes_are_hidden_from_openapi(self, news_route_table):
        app = _app(create_router_from_table(news_route_table, serve_shell))
        assert app.openapi().get("paths", {}) == {}

    def test_empty_table(self):
        router = create_router_from_table({}, serve_shell)
        assert router.routes == []

    def test_logs_summary(self, news_route_table, caplog):
        with caplog.at_level(logging.INFO, logger="fastapi_named_routes.fastapi.router"):
            create_router_from_table(news_route_table, serve_shell, exclude=["admin"])

        complete = [r for r in caplog.records if r.getMessage() == "Route registration complete"]
        assert len(complete) == 1
        assert complete[0].route_count == 4
        assert complete[0].prefix == "(none)"

    def test_root_route_answers_on_bare_prefix(self, news_route_table):
        app = _app(create_router_from_table(news_route_table, serve_shell, prefix="/app"))
        client = TestClient(app)

        response = client.get("/app", follow_redirects=False)
        assert response.status_code == 200
        assert response.json()["route"] == "home"
        assert app.url_path_for("home") == "/app"

    @pytest.mark.parametrize(
        "path_hierarchy",
        [["/x", "/:id/:id"], ["/x", "/:a-b", "/:a_b"]],
    )
    def test_clashing_parameters_raise_package_error(self, route_table, path_hierarchy):
        register(route_table, ["product", "detail"], path_hierarchy)

        with pytest.raises(NamedRoutingError, match="product.detail"):
            create_router_from_table(route_table, serve_shell)
