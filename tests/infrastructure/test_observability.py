"""Tests for logging setup and the unhandled-error safety nets."""

import json
import logging
import sys

from storefront.infrastructure.observability import (
    JSONFormatter,
    _log_async_exception,
    _log_uncaught,
    setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="storefront.test",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="Could not save %s",
        args=("dados.json",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:

    def test_core_fields(self):
        payload = json.loads(JSONFormatter().format(_record()))
        assert payload["level"] == "ERROR"
        assert payload["logger"] == "storefront.test"
        assert payload["message"] == "Could not save dados.json"
        assert "timestamp" in payload

    def test_known_extras_surface(self):
        payload = json.loads(JSONFormatter().format(_record(path="/api/produtos", error_code="PersistenceError")))
        assert payload["path"] == "/api/produtos"
        assert payload["error_code"] == "PersistenceError"

    def test_exception_included(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        payload = json.loads(JSONFormatter().format(record))
        assert "ValueError: bad" in payload["exception"]


class TestSetupLogging:

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        ours = [h for h in logging.root.handlers if getattr(h, "_storefront", False)]
        assert len(ours) == 1
        assert logging.root.level == logging.WARNING


class TestSafetyNets:

    def test_uncaught_exception_is_logged(self, caplog):
        try:
            raise RuntimeError("kaboom")
        except RuntimeError:
            exc_info = sys.exc_info()
        with caplog.at_level(logging.CRITICAL):
            _log_uncaught(*exc_info)
        assert "Uncaught exception" in caplog.text
        assert "kaboom" in caplog.text

    def test_async_error_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR):
            _log_async_exception(None, {"message": "Task exception was never retrieved",
                                        "exception": RuntimeError("late")})
        assert "Task exception was never retrieved" in caplog.text
