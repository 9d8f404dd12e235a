"""Pytest configuration and shared fixtures for iprouter tests."""

import sys
from collections.abc import Iterator

import pytest
from loguru import logger

from iprouter.core.activity_log import MemoryActivityLog
from iprouter.core.router import RouterService


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Restore a plain stderr handler after tests that reconfigure loguru."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def activity_log() -> MemoryActivityLog:
    return MemoryActivityLog()


@pytest.fixture
def router(activity_log: MemoryActivityLog) -> RouterService:
    return RouterService(activity_log=activity_log)
