"""Status package for greeting and health responses."""

from .interfaces import StatusServicePort
from .service import GREETING_TEXT, StaticStatusService

__all__ = ["GREETING_TEXT", "StaticStatusService", "StatusServicePort"]
