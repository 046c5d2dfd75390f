"""
Proxy routes for the API gateway

Every gateway route is an entry in a routing table; one generic forwarding
coroutine handles all of them.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
import structlog

from microshop.shared.utils.errors import UpstreamError
from microshop.api_gateway.utils.service_client import service_clients

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProxyRoute:
    """One gateway route and the backend request it maps to"""
    method: str
    path: str
    service: str
    target: str
    action: str


NOT_FOUND_ERRORS: Dict[str, str] = {
    "users": "User not found",
    "products": "Product not found",
}

ROUTES: List[ProxyRoute] = [
    ProxyRoute("GET", "/api/users", "users", "/users", "fetch users"),
    ProxyRoute("POST", "/api/users", "users", "/users", "create user"),
    ProxyRoute("GET", "/api/users/{resource_id}", "users", "/users/{resource_id}", "fetch user"),
    ProxyRoute("PUT", "/api/users/{resource_id}", "users", "/users/{resource_id}", "update user"),
    ProxyRoute("DELETE", "/api/users/{resource_id}", "users", "/users/{resource_id}", "delete user"),
    ProxyRoute("GET", "/api/products", "products", "/products", "fetch products"),
    ProxyRoute("POST", "/api/products", "products", "/products", "create product"),
    ProxyRoute("GET", "/api/products/{resource_id}", "products", "/products/{resource_id}", "fetch product"),
    ProxyRoute("PUT", "/api/products/{resource_id}", "products", "/products/{resource_id}", "update product"),
    ProxyRoute("DELETE", "/api/products/{resource_id}", "products", "/products/{resource_id}", "delete product"),
]


async def forward_request(route: ProxyRoute, request: Request) -> JSONResponse:
    """
    Forward a gateway request to its backend

    Successful responses are relayed verbatim. A backend 404 becomes a
    generic not-found body; every other failure becomes a 500 naming the
    attempted action.
    """
    client = service_clients[route.service]
    target = route.target.format(**request.path_params)
    content = await request.body()

    try:
        status_code, body = await client.forward(
            route.method,
            target,
            params=request.query_params.multi_items(),
            content=content or None
        )
    except UpstreamError as e:
        logger.error(
            f"Error while trying to {route.action}",
            method=route.method,
            target=target,
            backend=route.service,
            upstream_status=e.upstream_status,
            error=e.message
        )
        if e.upstream_status == 404:
            return JSONResponse(status_code=404, content={"error": NOT_FOUND_ERRORS[route.service]})
        return JSONResponse(
            status_code=500,
            content={"error": f"Failed to {route.action}", "message": e.message}
        )

    return JSONResponse(status_code=status_code, content=body)


def _make_endpoint(route: ProxyRoute) -> Callable:
    async def endpoint(request: Request) -> JSONResponse:
        return await forward_request(route, request)

    endpoint.__name__ = route.action.replace(" ", "_")
    endpoint.__doc__ = f"Proxy to {route.service} service: {route.action}"
    return endpoint


def build_router(routes: List[ProxyRoute] = ROUTES) -> APIRouter:
    """Register one API route per routing table entry"""
    router = APIRouter()
    for route in routes:
        router.add_api_route(
            route.path,
            _make_endpoint(route),
            methods=[route.method],
            name=f"{route.method.lower()}_{route.action.replace(' ', '_')}",
            response_class=JSONResponse
        )
    return router


router = build_router()
