"""Integration tests for AirbnbListingsAPI.

Tests cover:
- Public and host listing reads
- House manual update body
- Error payloads kept on the returned ProviderError
"""

import pytest
from pytest_httpx import HTTPXMock

from airbnbapi.core.enums import ErrorCode
from airbnbapi.core.result import Failure, Success
from airbnbapi.domain.errors import ProviderAuthenticationError
from airbnbapi.infrastructure.providers.airbnb.api.listings_api import AirbnbListingsAPI
from tests.conftest import (
    CORRECT_TOKEN,
    DEFAULT_QUERY,
    TEST_BASE_URL,
    TEST_USER_AGENT,
    api_url,
)


@pytest.fixture
def api() -> AirbnbListingsAPI:
    """Create AirbnbListingsAPI instance with test base URL."""
    return AirbnbListingsAPI(
        base_url=TEST_BASE_URL,
        default_params=DEFAULT_QUERY,
        user_agent=TEST_USER_AGENT,
        timeout=5.0,
    )


def _build_listing(listing_id: int = 1234) -> dict:
    return {"listing": {"id": listing_id, "name": "Loft by the river", "city": "Lisbon"}}


class TestGetListingInfo:
    """Test public listing details."""

    @pytest.mark.asyncio
    async def test_returns_listing(self, api: AirbnbListingsAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url=api_url("/v2/listings/1234", _format="v1_legacy_for_p3"),
            json=_build_listing(),
        )

        result = await api.get_listing_info(1234)

        assert isinstance(result, Success)
        assert result.value["listing"]["id"] == 1234
        request = httpx_mock.get_request()
        assert "X-Airbnb-OAuth-Token" not in request.headers

    @pytest.mark.asyncio
    async def test_not_found_keeps_payload(
        self, api: AirbnbListingsAPI, httpx_mock: HTTPXMock
    ):
        payload = {"error_code": 404, "error_message": "Listing not found"}
        httpx_mock.add_response(method="GET", json=payload, status_code=404)

        result = await api.get_listing_info(1)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PROVIDER_RESOURCE_NOT_FOUND
        assert result.error.details == payload


class TestGetListingInfoHost:
    """Test host view of a listing."""

    @pytest.mark.asyncio
    async def test_returns_listing(self, api: AirbnbListingsAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url=api_url("/v1/listings/1234"),
            match_headers={"X-Airbnb-OAuth-Token": CORRECT_TOKEN},
            json=_build_listing(),
        )

        result = await api.get_listing_info_host(CORRECT_TOKEN, 1234)

        assert isinstance(result, Success)
        assert result.value == _build_listing()

    @pytest.mark.asyncio
    async def test_not_the_host(self, api: AirbnbListingsAPI, httpx_mock: HTTPXMock):
        payload = {"error_code": 403, "error_message": "Not your listing"}
        httpx_mock.add_response(method="GET", json=payload, status_code=403)

        result = await api.get_listing_info_host(CORRECT_TOKEN, 1234)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderAuthenticationError)
        assert result.error.details == payload


class TestSetHouseManual:
    """Test house manual updates."""

    @pytest.mark.asyncio
    async def test_sends_manual(self, api: AirbnbListingsAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST",
            url=api_url("/v1/listings/1234/update"),
            match_headers={"X-Airbnb-OAuth-Token": CORRECT_TOKEN},
            match_json={"listing": {"house_manual": "Wifi password is on the fridge"}},
            json={"listing": {"id": 1234, "house_manual": "Wifi password is on the fridge"}},
        )

        result = await api.set_house_manual(
            CORRECT_TOKEN, 1234, "Wifi password is on the fridge"
        )

        assert isinstance(result, Success)
        assert result.value["listing"]["house_manual"] == "Wifi password is on the fridge"
