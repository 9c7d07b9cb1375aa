"""Response header hardening middleware."""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

DEFAULT_SECURITY_HEADERS: dict[str, str] = {
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Set protective headers on every response, including error responses.

    Content-Security-Policy is only emitted when a policy is configured.
    Values already set by handlers are replaced with the hardened value.
    """

    def __init__(self, app: ASGIApp, content_security_policy: str | None = None):
        """Initialize header hardening middleware.

        Args:
            app: Downstream ASGI application.
            content_security_policy: Optional CSP value; None disables the header.

        Raises:
            ValueError: Raised when content_security_policy is blank.
        """

        super().__init__(app)
        headers = dict(DEFAULT_SECURITY_HEADERS)
        if content_security_policy is not None:
            if not content_security_policy.strip():
                raise ValueError("content_security_policy must not be blank")
            headers["Content-Security-Policy"] = content_security_policy.strip()
        self._headers = headers

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for header_name, header_value in self._headers.items():
            response.headers[header_name] = header_value
        return response
