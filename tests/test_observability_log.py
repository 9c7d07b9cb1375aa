"""Tests for JSON log formatting."""

from __future__ import annotations

import json
import logging
import sys

from app.observability import JsonFormatter


def _build_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
    )
    for field_name, field_value in extra.items():
        setattr(record, field_name, field_value)
    return record


def test_json_formatter_renders_base_fields() -> None:
    """Render message, level and logger without request metadata.

    Returns:
        None: Assertions validate the payload.

    Raises:
        AssertionError: Raised when fields are missing or unexpected.
    """

    payload = json.loads(JsonFormatter().format(_build_record()))

    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.test"
    assert "timestamp" in payload
    assert "request_id" not in payload


def test_json_formatter_includes_request_metadata() -> None:
    """Include request fields attached through `extra`.

    Returns:
        None: Assertions validate the payload.

    Raises:
        AssertionError: Raised when request fields are dropped.
    """

    record = _build_record(request_id="abc", http_method="GET", request_path="/health", status_code=200)

    payload = json.loads(JsonFormatter().format(record))

    assert payload["request_id"] == "abc"
    assert payload["http_method"] == "GET"
    assert payload["request_path"] == "/health"
    assert payload["status_code"] == 200


def test_json_formatter_includes_exception_text() -> None:
    """Render exception tracebacks for records with exc_info.

    Returns:
        None: Assertions validate the payload.

    Raises:
        AssertionError: Raised when the traceback is missing.
    """

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _build_record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: boom" in payload["exception"]
