"""Observability package for structured logging setup."""

from .log import JsonFormatter, observability_setup_logging

__all__ = ["JsonFormatter", "observability_setup_logging"]
