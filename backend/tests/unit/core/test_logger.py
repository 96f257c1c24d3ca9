"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from account_service.core.logger import JSONFormatter, configure_logging


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, list(root.handlers)
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)


def test_json_formatter_copies_event_fields() -> None:
    record = logging.LogRecord(
        name="account_service.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="session.refreshed",
        args=(),
        exc_info=None,
    )
    record.event = "session.refreshed"
    record.account_id = "u1"
    record.token_id = "t2"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "session.refreshed"
    assert payload["level"] == "INFO"
    assert payload["event"] == "session.refreshed"
    assert payload["account_id"] == "u1"
    assert payload["token_id"] == "t2"
    assert "reason" not in payload
    assert payload["time"].endswith("+00:00")


def test_response_echoes_request_id(client) -> None:
    resp = client.get("/api/v1/health", headers={"X-Request-ID": "req-123"})

    assert resp.headers["X-Request-ID"] == "req-123"


def test_request_ids_are_not_shared_between_requests(client) -> None:
    first = client.get("/api/v1/health").headers["X-Request-ID"]
    second = client.get("/api/v1/health").headers["X-Request-ID"]

    assert first != second
