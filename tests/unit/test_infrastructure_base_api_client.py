"""Tests for airbnbapi/infrastructure/providers/base_api_client.py.

Verifies the BaseProviderAPIClient handles HTTP requests, errors, and
JSON parsing correctly for all endpoint clients.

Reference:
    - airbnbapi/infrastructure/providers/base_api_client.py
"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from pytest_httpx import HTTPXMock

from airbnbapi.core.constants import PROVIDER_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from airbnbapi.core.enums import ErrorCode
from airbnbapi.core.result import Failure, Success
from airbnbapi.domain.errors import (
    ProviderAuthenticationError,
    ProviderInvalidResponseError,
    ProviderRateLimitError,
    ProviderUnavailableError,
)
from airbnbapi.infrastructure.providers.base_api_client import BaseProviderAPIClient


class ConcreteAPIClient(BaseProviderAPIClient):
    """Concrete implementation for testing."""

    def __init__(
        self,
        *,
        base_url: str,
        default_params: dict[str, str] | None = None,
        timeout: float = PROVIDER_TIMEOUT_DEFAULT,
    ):
        super().__init__(
            base_url=base_url,
            provider_name="test_provider",
            default_params=default_params,
            timeout=timeout,
        )


def mock_async_client(mock_client_class: MagicMock) -> AsyncMock:
    """Wire a patched httpx.AsyncClient class to an AsyncMock instance."""
    mock_client = AsyncMock()
    mock_client.__aenter__.return_value = mock_client
    mock_client.__aexit__.return_value = None
    mock_client_class.return_value = mock_client
    return mock_client


class TestBaseProviderAPIClientInit:
    """Tests for BaseProviderAPIClient initialization."""

    def test_strips_trailing_slash_from_base_url(self) -> None:
        """Base URL should have trailing slash removed."""
        client = ConcreteAPIClient(base_url="https://api.test.com/")
        assert client._base_url == "https://api.test.com"

    def test_stores_provider_name(self) -> None:
        client = ConcreteAPIClient(base_url="https://api.test.com")
        assert client._provider_name == "test_provider"

    def test_uses_default_timeout(self) -> None:
        """Should use PROVIDER_TIMEOUT_DEFAULT when timeout not specified."""
        client = ConcreteAPIClient(base_url="https://api.test.com")
        assert client._timeout == PROVIDER_TIMEOUT_DEFAULT

    def test_uses_custom_timeout(self) -> None:
        client = ConcreteAPIClient(base_url="https://api.test.com", timeout=60.0)
        assert client._timeout == 60.0

    def test_default_params_are_copied(self) -> None:
        params = {"key": "abc"}
        client = ConcreteAPIClient(base_url="https://api.test.com", default_params=params)
        params["key"] = "changed"
        assert client._default_params == {"key": "abc"}

    def test_no_default_params(self) -> None:
        client = ConcreteAPIClient(base_url="https://api.test.com")
        assert client._default_params == {}


class TestCheckErrorResponse:
    """Tests for _check_error_response method."""

    @pytest.fixture
    def client(self) -> ConcreteAPIClient:
        return ConcreteAPIClient(base_url="https://api.test.com")

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_returns_none_for_2xx_status(self, client: ConcreteAPIClient, status: int) -> None:
        """Any 2xx response is a success."""
        response = MagicMock(spec=httpx.Response)
        response.status_code = status

        assert client._check_error_response(response, "test_op") is None

    def test_returns_rate_limit_error_for_429(self, client: ConcreteAPIClient) -> None:
        """Should return ProviderRateLimitError for 429 response."""
        response = httpx.Response(429, headers={"Retry-After": "60"})

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderRateLimitError)
        assert result.error.code == ErrorCode.PROVIDER_RATE_LIMITED
        assert result.error.retry_after == 60
        assert result.error.status_code == 429

    def test_ignores_non_numeric_retry_after(self, client: ConcreteAPIClient) -> None:
        response = httpx.Response(429, headers={"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"})

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert result.error.retry_after is None

    def test_returns_auth_error_for_401_with_payload(self, client: ConcreteAPIClient) -> None:
        """401 keeps the upstream error payload in details."""
        payload = {"error": "invalid_token", "error_message": "Token expired"}
        response = httpx.Response(401, json=payload)

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderAuthenticationError)
        assert result.error.code == ErrorCode.PROVIDER_AUTHENTICATION_FAILED
        assert result.error.is_token_expired is True
        assert result.error.details == payload

    def test_returns_auth_error_for_403(self, client: ConcreteAPIClient) -> None:
        response = httpx.Response(403, json={"error": "forbidden"})

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderAuthenticationError)
        assert result.error.is_token_expired is False

    def test_returns_not_found_for_404(self, client: ConcreteAPIClient) -> None:
        response = httpx.Response(404, text="Not Found")

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderInvalidResponseError)
        assert result.error.code == ErrorCode.PROVIDER_RESOURCE_NOT_FOUND
        assert result.error.response_body == "Not Found"
        assert result.error.details is None

    @pytest.mark.parametrize("status", [500, 502, 503])
    def test_returns_unavailable_for_5xx(self, client: ConcreteAPIClient, status: int) -> None:
        response = httpx.Response(status, text="oops")

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderUnavailableError)
        assert result.error.is_transient is True
        assert result.error.status_code == status

    def test_returns_invalid_response_for_400(self, client: ConcreteAPIClient) -> None:
        payload = {"error_code": 400, "error_message": "Invalid date"}
        response = httpx.Response(400, json=payload)

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderInvalidResponseError)
        assert result.error.code == ErrorCode.PROVIDER_INVALID_RESPONSE
        assert result.error.details == payload

    def test_truncates_response_body(self, client: ConcreteAPIClient) -> None:
        response = httpx.Response(418, text="x" * (RESPONSE_BODY_MAX_LENGTH * 2))

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert len(result.error.response_body) == RESPONSE_BODY_MAX_LENGTH

    def test_non_object_payload_is_not_kept(self, client: ConcreteAPIClient) -> None:
        response = httpx.Response(400, json=["not", "an", "object"])

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert result.error.details is None


class TestParseJsonObject:
    """Tests for _parse_json_object method."""

    @pytest.fixture
    def client(self) -> ConcreteAPIClient:
        return ConcreteAPIClient(base_url="https://api.test.com")

    def test_returns_dict(self, client: ConcreteAPIClient) -> None:
        response = httpx.Response(200, json={"listing": {"id": 1234}})

        result = client._parse_json_object(response, "test_op")

        assert isinstance(result, Success)
        assert result.value == {"listing": {"id": 1234}}

    def test_returns_error_for_http_error(self, client: ConcreteAPIClient) -> None:
        response = httpx.Response(401, json={"error": "invalid_token"})

        result = client._parse_json_object(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderAuthenticationError)

    def test_returns_error_for_invalid_json(self, client: ConcreteAPIClient) -> None:
        response = httpx.Response(200, text="<html>maintenance</html>")

        result = client._parse_json_object(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderInvalidResponseError)
        assert result.error.response_body == "<html>maintenance</html>"

    def test_returns_error_for_array_response(self, client: ConcreteAPIClient) -> None:
        response = httpx.Response(200, json=[1, 2, 3])

        result = client._parse_json_object(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderInvalidResponseError)
        assert "Expected object" in result.error.message


class TestExecuteRequest:
    """Tests for _execute_request method."""

    @pytest.fixture
    def client(self) -> ConcreteAPIClient:
        return ConcreteAPIClient(base_url="https://api.test.com", timeout=10.0)

    @pytest.mark.asyncio
    async def test_returns_response(self, client: ConcreteAPIClient) -> None:
        response = httpx.Response(200, json={})
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = mock_async_client(mock_client_class)
            mock_client.request.return_value = response

            result = await client._execute_request(
                method="GET", path="/v2/listings/1", operation="test_op"
            )

        assert isinstance(result, Success)
        assert result.value is response
        mock_client_class.assert_called_once_with(timeout=10.0)

    @pytest.mark.asyncio
    async def test_returns_unavailable_on_timeout(self, client: ConcreteAPIClient) -> None:
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = mock_async_client(mock_client_class)
            mock_client.request.side_effect = httpx.TimeoutException("timed out")

            result = await client._execute_request(
                method="GET", path="/v2/listings/1", operation="test_op"
            )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderUnavailableError)
        assert result.error.code == ErrorCode.PROVIDER_UNAVAILABLE
        assert "timed out" in result.error.message
        assert result.error.status_code is None

    @pytest.mark.asyncio
    async def test_returns_unavailable_on_connection_error(
        self, client: ConcreteAPIClient
    ) -> None:
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = mock_async_client(mock_client_class)
            mock_client.request.side_effect = httpx.ConnectError("refused")

            result = await client._execute_request(
                method="GET", path="/v2/listings/1", operation="test_op"
            )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderUnavailableError)
        assert "Failed to connect" in result.error.message

    @pytest.mark.asyncio
    async def test_merges_default_params(self, httpx_mock: HTTPXMock) -> None:
        """Per-call params are added to (and override) the defaults."""
        client = ConcreteAPIClient(
            base_url="https://api.test.com",
            default_params={"key": "abc", "currency": "USD"},
        )
        httpx_mock.add_response(
            method="GET",
            url="https://api.test.com/v2/listings/1?key=abc&currency=EUR&_format=x",
            json={},
        )

        result = await client._execute_request(
            method="GET",
            path="/v2/listings/1",
            params={"currency": "EUR", "_format": "x"},
            operation="test_op",
        )

        assert isinstance(result, Success)

    @pytest.mark.asyncio
    async def test_sends_headers_and_json_body(self, httpx_mock: HTTPXMock) -> None:
        client = ConcreteAPIClient(base_url="https://api.test.com")
        httpx_mock.add_response(
            method="POST",
            url="https://api.test.com/v2/logins",
            match_headers={"User-Agent": "tests/1.0"},
            match_json={"email": "a@b.c", "password": "pw"},
            json={"login": {}},
        )

        result = await client._execute_and_parse_object(
            method="POST",
            path="/v2/logins",
            headers={"User-Agent": "tests/1.0"},
            json_data={"email": "a@b.c", "password": "pw"},
            operation="test_op",
        )

        assert isinstance(result, Success)
        assert result.value == {"login": {}}


class TestExecuteAndParseObject:
    """Tests for _execute_and_parse_object method."""

    @pytest.fixture
    def client(self) -> ConcreteAPIClient:
        return ConcreteAPIClient(base_url="https://api.test.com")

    @pytest.mark.asyncio
    async def test_propagates_transport_failure(self, client: ConcreteAPIClient) -> None:
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = mock_async_client(mock_client_class)
            mock_client.request.side_effect = httpx.ReadTimeout("slow")

            result = await client._execute_and_parse_object(
                method="GET", path="/v2/listings/1", operation="test_op"
            )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderUnavailableError)

    @pytest.mark.asyncio
    async def test_parses_response(self, client: ConcreteAPIClient) -> None:
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = mock_async_client(mock_client_class)
            mock_client.request.return_value = httpx.Response(200, json={"ok": True})

            result = await client._execute_and_parse_object(
                method="GET", path="/v2/listings/1", operation="test_op"
            )

        assert isinstance(result, Success)
        assert result.value == {"ok": True}
