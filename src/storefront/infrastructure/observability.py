"""Logging setup and the process-wide safety nets.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Extra fields (path, error_code, data_file) are surfaced when present
    - Unhandled faults are always logged before anything else happens to them
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
import threading
from datetime import datetime, timezone

logger = logging.getLogger("storefront")

_EXTRA_FIELDS = ("path", "method", "error_code", "data_file")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure the root logger. Safe to call more than once."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if getattr(existing, "_storefront", False):
            logging.root.removeHandler(existing)
    handler._storefront = True  # type: ignore[attr-defined]
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


def _log_uncaught(exc_type, exc_value, exc_traceback) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.critical(
        "Uncaught exception, process will exit",
        exc_info=(exc_type, exc_value, exc_traceback),
    )


def _log_thread_exception(args: threading.ExceptHookArgs) -> None:
    logger.critical(
        "Uncaught exception in thread %s",
        args.thread.name if args.thread else "?",
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
    )


def _log_async_exception(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    exc = context.get("exception")
    logger.error(
        "Unhandled async error: %s",
        context.get("message", "no message"),
        exc_info=(type(exc), exc, exc.__traceback__) if exc else None,
    )


def install_exception_hooks() -> None:
    """Log unhandled synchronous faults before the interpreter exits."""
    sys.excepthook = _log_uncaught
    threading.excepthook = _log_thread_exception


def install_async_exception_handler(loop: asyncio.AbstractEventLoop) -> None:
    """Log unhandled async failures without stopping the loop."""
    loop.set_exception_handler(_log_async_exception)
