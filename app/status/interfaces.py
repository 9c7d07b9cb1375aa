"""Typed interfaces for status-layer services."""

from typing import Protocol

from app.domain import HealthStatus


class StatusServicePort(Protocol):
    """Port definition for the greeting and health responses served over HTTP."""

    def status_get_greeting(self) -> str:
        """Return the greeting served on the root path.

        Returns:
            str: Greeting text.
        """

    def status_get_health(self) -> HealthStatus:
        """Return the liveness and readiness status.

        Returns:
            HealthStatus: Health payload for probes.
        """
