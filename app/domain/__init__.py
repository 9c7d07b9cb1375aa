"""Domain models used across application layer boundaries."""

from .models import HealthStatus

__all__ = ["HealthStatus"]
