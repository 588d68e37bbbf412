"""Root conftest — shared test configuration."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """App startup and the CLI reconfigure the root logger; undo that per test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
