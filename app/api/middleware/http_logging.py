"""Request logging middleware with correlation id propagation.

Only metadata is logged: method, route template, status and duration.
Query strings, headers and bodies are never written to logs.
"""

import logging
import re
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger("app.http")

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,127}$")


def api_resolve_request_id(request: Request) -> str:
    """Return the caller's request id when well formed, else a new one.

    Args:
        request: Incoming request.

    Returns:
        str: Request id safe to echo into logs and headers.
    """

    candidate = request.headers.get(REQUEST_ID_HEADER)
    if candidate and _REQUEST_ID_PATTERN.fullmatch(candidate):
        return candidate
    return uuid.uuid4().hex


def api_route_label(request: Request) -> str:
    """Return the matched route template, or `unmatched`.

    Args:
        request: Request after routing.

    Returns:
        str: Route template used as a log label.
    """

    route_path = getattr(request.scope.get("route"), "path", None)
    if isinstance(route_path, str) and route_path:
        return route_path
    return "unmatched"


class HttpLoggingMiddleware(BaseHTTPMiddleware):
    """Emit one log record per request and echo `X-Request-ID`."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = api_resolve_request_id(request)
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled exception while processing request",
                extra={
                    "request_id": request_id,
                    "http_method": request.method,
                    "request_path": api_route_label(request),
                    "status_code": 500,
                    "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
                },
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "http_method": request.method,
                "request_path": api_route_label(request),
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
            },
        )
        return response
