"""Basic example demonstrating fastapi-named-routes.

Builds the route table of a client application from nested route
declarations, then serves the application shell on every named route.

Run with:
    uvicorn main:app --reload

Available endpoints:
    GET  /                              - home
    GET  /article                       - article.list
    GET  /article/categories/{category} - article.category
    GET  /article/{category}/{slug}     - article.detail
"""

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi_named_routes import RouteTable, create_router_from_table, register

route_table: RouteTable = {}
register(route_table, ["home"], ["/"])
register(route_table, ["article", "list"], ["/article", "/"])
register(route_table, ["article", "category"], ["/article", "/categories/:category"])
register(route_table, ["article", "detail"], ["/article", "/:category/:slug"])


async def shell() -> HTMLResponse:
    return HTMLResponse("<!doctype html><div id='app'></div><script src='/static/app.js'></script>")


app = FastAPI(title="Basic Example")
app.include_router(create_router_from_table(route_table, shell))
