"""Integration tests for AirbnbBatchAPI.

Tests cover:
- Request body (operations, _transaction flag)
- Response unwrapping (operations list)
- Malformed responses and HTTP errors
"""

import pytest
from pytest_httpx import HTTPXMock

from airbnbapi.core.enums import ErrorCode
from airbnbapi.core.result import Failure, Success
from airbnbapi.domain.errors import ProviderAuthenticationError
from airbnbapi.domain.value_objects import BatchOperation
from airbnbapi.infrastructure.providers.airbnb.api.batch_api import AirbnbBatchAPI
from tests.conftest import (
    CORRECT_TOKEN,
    DEFAULT_QUERY,
    TEST_BASE_URL,
    TEST_USER_AGENT,
    api_url,
)


@pytest.fixture
def api() -> AirbnbBatchAPI:
    """Create AirbnbBatchAPI instance with test base URL."""
    return AirbnbBatchAPI(
        base_url=TEST_BASE_URL,
        default_params=DEFAULT_QUERY,
        user_agent=TEST_USER_AGENT,
        timeout=5.0,
    )


OPERATIONS = [
    BatchOperation(method="GET", path="/listings/1234"),
    BatchOperation(method="GET", path="/users/42", query={"_format": "v1_legacy_show"}),
]


class TestExecute:
    """Test batch execution."""

    @pytest.mark.asyncio
    async def test_sends_operations_non_transactional(
        self, api: AirbnbBatchAPI, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(
            method="POST",
            url=api_url("/v2/batch"),
            match_headers={"X-Airbnb-OAuth-Token": CORRECT_TOKEN},
            match_json={
                "operations": [
                    {"method": "GET", "path": "/listings/1234", "query": {}},
                    {
                        "method": "GET",
                        "path": "/users/42",
                        "query": {"_format": "v1_legacy_show"},
                    },
                ],
                "_transaction": False,
            },
            json={
                "operations": [
                    {"response": {"listing": {"id": 1234}}},
                    {"response": {"user": {"id": 42}}},
                ]
            },
        )

        result = await api.execute(CORRECT_TOKEN, OPERATIONS)

        assert isinstance(result, Success)
        assert result.value[0]["response"]["listing"]["id"] == 1234
        assert result.value[1]["response"]["user"]["id"] == 42

    @pytest.mark.asyncio
    async def test_transaction_flag(self, api: AirbnbBatchAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST",
            url=api_url("/v2/batch"),
            match_json={"operations": [], "_transaction": True},
            json={"operations": []},
        )

        result = await api.execute(CORRECT_TOKEN, [], transaction=True)

        assert isinstance(result, Success)
        assert result.value == []

    @pytest.mark.asyncio
    async def test_transaction_none_omits_flag(
        self, api: AirbnbBatchAPI, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(
            method="POST",
            url=api_url("/v2/batch"),
            match_json={"operations": []},
            json={"operations": []},
        )

        result = await api.execute(CORRECT_TOKEN, [], transaction=None)

        assert isinstance(result, Success)

    @pytest.mark.asyncio
    async def test_missing_operations_list(self, api: AirbnbBatchAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="POST", json={"result": "ok"})

        result = await api.execute(CORRECT_TOKEN, OPERATIONS)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PROVIDER_INVALID_RESPONSE
        assert result.error.details == {"result": "ok"}

    @pytest.mark.asyncio
    async def test_rejected_token(self, api: AirbnbBatchAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST", json={"error_type": "invalid_token"}, status_code=401
        )

        result = await api.execute("expired", OPERATIONS)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderAuthenticationError)
