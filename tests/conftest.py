"""Shared fixtures for the hypa test suite."""

from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by CLI invocations so they never outlive a test."""
    yield
    logger.remove()
