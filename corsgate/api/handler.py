"""
Request handling for declared resources.

Each resource is served by one route that renders the declared method
response and then merges the access-control headers decided by the origin
policy evaluator.
"""

from collections.abc import Awaitable, Callable, Iterable

import structlog
from fastapi import APIRouter, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from corsgate.api.errors import create_error_response
from corsgate.cors.evaluator import apply_cors
from corsgate.resources.models import SUPPORTED_METHODS, Resource

logger = structlog.get_logger(__name__)

Endpoint = Callable[[Request], Awaitable[Response]]


def _method_not_allowed(resource: Resource, method: str) -> Response:
    error = create_error_response(
        code="method_not_allowed",
        message=f"Method {method} is not allowed on {resource.path}",
        details={"allowed_methods": resource.allowed_methods},
    )
    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        content=error.model_dump(),
        headers={"Allow": ", ".join(resource.allowed_methods)},
    )


def make_endpoint(resource: Resource) -> Endpoint:
    """Build the endpoint coroutine serving ``resource``."""

    async def endpoint(request: Request) -> Response:
        method_response = resource.response_for(request.method)

        if method_response is None:
            response = _method_not_allowed(resource, request.method)
        elif request.method == "HEAD":
            # Same headers as GET, no body
            response = Response(status_code=method_response.status, media_type=method_response.media_type)
            response.headers["content-length"] = str(len(method_response.body.encode("utf-8")))
        else:
            response = Response(
                content=method_response.body,
                status_code=method_response.status,
                media_type=method_response.media_type,
            )

        origin = request.headers.get("origin")
        delta = apply_cors(resource.access_control, request.headers, response.headers)
        logger.debug(
            "cors_evaluated",
            path=resource.path,
            method=request.method,
            origin=origin,
            allow_origin=delta is not None,
        )
        return response

    endpoint.__name__ = f"resource_{resource.path.strip('/').replace('/', '_') or 'root'}"
    return endpoint


def build_router(resources: Iterable[Resource]) -> APIRouter:
    """Register one route per resource, answering every supported method."""
    router = APIRouter()
    for resource in resources:
        router.add_api_route(
            resource.path,
            make_endpoint(resource),
            methods=sorted(SUPPORTED_METHODS),
            include_in_schema=False,
        )
    return router


def handler(resource: Resource) -> FastAPI:
    """Create a standalone application serving a single resource."""
    app = FastAPI()
    app.include_router(build_router([resource]))
    return app
