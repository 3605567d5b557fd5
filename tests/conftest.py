"""Pytest configuration and shared fixtures for the SQL Pager tests."""

import logging
from collections import deque
from unittest.mock import Mock

import pytest
from fastapi import Request

from sqlpager.config import Settings


@pytest.fixture
def generate_test_ids():
    """Factory for the rows a page fetch would return, as a deque of ids."""
    def _generate(start: int, end: int) -> deque:
        return deque(range(start, end + 1))
    return _generate


@pytest.fixture
def test_settings() -> Settings:
    """Settings with non-default page sizes."""
    return Settings(default_page_size=25, max_page_size=50, log_level="ERROR")


@pytest.fixture
def mock_request():
    """Create mock request."""
    request = Mock(spec=Request)
    request.url.path = "/test/path"
    request.method = "GET"
    return request


@pytest.fixture
def restore_sqlpager_logger():
    """Reset the package logger level after a test changes it."""
    logger = logging.getLogger("sqlpager")
    level = logger.level
    yield logger
    logger.setLevel(level)
