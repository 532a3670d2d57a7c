"""
Shared test fixtures for the presence test suite.

Logging configuration is process-global, so every test gets the "presence"
logger back in its pristine state afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def restore_presence_logger() -> Iterator[logging.Logger]:
    """Snapshot the package logger's handlers, level and propagation; restore them after the test."""
    package_logger = logging.getLogger("presence")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture()
def raising_callback():
    """A callback that fails the test if it is ever called."""

    def _callback(*args, **kwargs):
        pytest.fail(f"callback must not be invoked (called with {args!r}, {kwargs!r})")

    return _callback
