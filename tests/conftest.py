"""Shared fixtures for the airbnbapi test suite.

Provides:
1. Settings pointing at a fake upstream host
2. Helpers that build the full request URL (default query included)
3. An AirbnbClient wired to a mock logger
"""

from unittest.mock import MagicMock

import httpx
import pytest

from airbnbapi.client import AirbnbClient
from airbnbapi.core.config import Settings
from airbnbapi.core.enums import Environment

TEST_BASE_URL = "https://api.airbnb.test"
TEST_API_KEY = "test-api-key"
TEST_USER_AGENT = "airbnbapi-tests/1.0"
CORRECT_TOKEN = "mockcorrecttoken"

DEFAULT_QUERY = {"key": TEST_API_KEY, "currency": "USD", "locale": "en-US"}


def api_url(path: str, **params: str) -> httpx.URL:
    """Full URL the client sends for ``path``, default query included."""
    return httpx.URL(f"{TEST_BASE_URL}{path}", params={**DEFAULT_QUERY, **params})


@pytest.fixture
def test_settings() -> Settings:
    """Settings for a fake upstream (no environment variables needed)."""
    return Settings(
        environment=Environment.TESTING,
        api_base_url=TEST_BASE_URL,
        api_key=TEST_API_KEY,
        currency="USD",
        locale="en-US",
        user_agent=TEST_USER_AGENT,
        timeout=5.0,
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; ``bind`` returns the same double."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def airbnb_client(test_settings: Settings, mock_logger: MagicMock) -> AirbnbClient:
    """AirbnbClient bound to the test settings."""
    return AirbnbClient(test_settings, logger=mock_logger)
