"""Root greeting router."""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from app.status import StatusServicePort


def api_create_root_router(status_service: StatusServicePort) -> APIRouter:
    """Create router serving the greeting on the root path.

    Args:
        status_service: Status-layer service providing the greeting.

    Returns:
        APIRouter: Router exposing `GET /`.

    Raises:
        ValueError: Raised when status_service is invalid.
    """

    if status_service is None:
        raise ValueError("status_service must not be None")

    router = APIRouter(tags=["root"])

    @router.get("/", response_class=PlainTextResponse)
    def api_root_greeting() -> PlainTextResponse:
        """Return the greeting as plain text.

        Returns:
            PlainTextResponse: Greeting body with HTTP 200.
        """

        return PlainTextResponse(content=status_service.status_get_greeting(), status_code=status.HTTP_200_OK)

    return router
