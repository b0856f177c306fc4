"""Pytest configuration and shared fixtures for verdict tests."""

import logging

import pytest

from verdict._logging import reset_logging


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from verdict import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from verdict import Err

    return Err("test error")


@pytest.fixture
def restore_logging():
    """Undo configure_logging() side effects after a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    reset_logging()
    yield
    reset_logging()
    root.handlers[:] = handlers
    root.setLevel(level)
