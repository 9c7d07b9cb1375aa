"""Health endpoint router for liveness and readiness probes."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.status import StatusServicePort


def api_create_health_router(status_service: StatusServicePort) -> APIRouter:
    """Create health-check router.

    Args:
        status_service: Status-layer service providing health state.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when status_service is invalid.
    """

    if status_service is None:
        raise ValueError("status_service must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health state.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.
        """

        health = status_service.status_get_health()
        return JSONResponse(content=health.domain_as_payload(), status_code=status.HTTP_200_OK)

    return router
