"""Shared test fixtures."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest
import structlog


@pytest.fixture()
def log() -> MagicMock:
    """Stand-in for a structlog BoundLogger; records calls without output."""
    return MagicMock()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo any setup_logging() call so handlers never outlive their streams."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
