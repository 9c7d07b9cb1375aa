"""Tests for request logging middleware.

Structured fields are asserted through `caplog` records rather than
message strings.
"""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from app.api.middleware import FixedWindowRateLimiter
from tests._helpers import build_application


def _http_records(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [record for record in caplog.records if record.name == "app.http"]


def test_http_logging_emits_one_record_with_route_template(caplog: pytest.LogCaptureFixture) -> None:
    """Log one INFO record with metadata only and echo the request id.

    Returns:
        None: Assertions validate log fields.

    Raises:
        AssertionError: Raised when log fields are missing or leak the query string.
    """

    caplog.set_level(logging.INFO, logger="app.http")
    client = TestClient(build_application())

    response = client.get("/health?token=secret")

    records = _http_records(caplog)
    assert len(records) == 1
    record = records[0]
    assert record.levelno == logging.INFO
    assert record.__dict__["request_id"] == response.headers["x-request-id"]
    assert record.__dict__["http_method"] == "GET"
    assert record.__dict__["request_path"] == "/health"
    assert record.__dict__["status_code"] == 200
    assert record.__dict__["duration_ms"] >= 0


def test_http_logging_propagates_valid_request_id(caplog: pytest.LogCaptureFixture) -> None:
    """Reuse a well formed caller request id.

    Returns:
        None: Assertions validate propagation.

    Raises:
        AssertionError: Raised when the id is replaced.
    """

    caplog.set_level(logging.INFO, logger="app.http")
    client = TestClient(build_application())

    response = client.get("/", headers={"X-Request-ID": "req_abc-123"})

    assert response.headers["x-request-id"] == "req_abc-123"
    assert _http_records(caplog)[0].__dict__["request_id"] == "req_abc-123"


def test_http_logging_replaces_malformed_request_id() -> None:
    """Generate a new id when the caller sends an unsafe value.

    Returns:
        None: Assertions validate replacement.

    Raises:
        AssertionError: Raised when the unsafe id is echoed.
    """

    client = TestClient(build_application())

    response = client.get("/", headers={"X-Request-ID": "bad id with spaces"})

    assert response.headers["x-request-id"] != "bad id with spaces"
    assert len(response.headers["x-request-id"]) == 32


def test_http_logging_records_rate_limited_requests(caplog: pytest.LogCaptureFixture) -> None:
    """Log rejected requests as unmatched with status 429 and warn once.

    Returns:
        None: Assertions validate log fields.

    Raises:
        AssertionError: Raised when rejections are not logged.
    """

    caplog.set_level(logging.INFO)
    client = TestClient(build_application(rate_limiter=FixedWindowRateLimiter(max_requests=1, window_seconds=60)))

    client.get("/")
    client.get("/")

    statuses = [record.__dict__["status_code"] for record in _http_records(caplog)]
    assert statuses == [200, 429]
    warnings = [record for record in caplog.records if record.name == "app.rate_limit"]
    assert len(warnings) == 1
    assert warnings[0].levelno == logging.WARNING
    assert warnings[0].__dict__["client_key"] == "testclient"
