"""Static status service with no external I/O."""

from app.domain import HealthStatus

from .interfaces import StatusServicePort

GREETING_TEXT = "Hello World!"


class StaticStatusService(StatusServicePort):
    """Status service returning fixed values.

    Reads no configuration or secrets, so responses never depend on
    environment or request input.
    """

    def status_get_greeting(self) -> str:
        return GREETING_TEXT

    def status_get_health(self) -> HealthStatus:
        """Report process liveness.

        Downstream dependencies are not checked, so the result is always `ok`
        while the process can serve requests.

        Returns:
            HealthStatus: Status with value `ok`.
        """

        return HealthStatus(status="ok")
