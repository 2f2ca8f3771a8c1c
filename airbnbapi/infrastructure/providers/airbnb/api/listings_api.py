"""Airbnb listings API client.

Endpoints:
    GET /v2/listings/{listing_id} - Public listing details
    GET /v1/listings/{listing_id} - Host view of a listing
    POST /v1/listings/{listing_id}/update - Update listing fields
"""

from typing import Any

from airbnbapi.core.constants import FORMAT_LEGACY_LISTING
from airbnbapi.core.result import Result
from airbnbapi.domain.errors import ProviderError
from airbnbapi.infrastructure.providers.airbnb.api.base import AirbnbAPIClient
from airbnbapi.infrastructure.providers.airbnb.headers import (
    make_auth_header,
    make_public_header,
)


class AirbnbListingsAPI(AirbnbAPIClient):
    """HTTP client for Airbnb listing endpoints."""

    async def get_listing_info(
        self,
        listing_id: int | str,
    ) -> Result[dict[str, Any], ProviderError]:
        """Fetch public listing details.

        Args:
            listing_id: Listing id.

        Returns:
            Success(dict): Payload with a ``listing`` object.
            Failure(ProviderError): On any error.
        """
        return await self._execute_and_parse_object(
            method="GET",
            path=f"/v2/listings/{listing_id}",
            headers=make_public_header(user_agent=self._user_agent),
            params={"_format": FORMAT_LEGACY_LISTING},
            operation="get_listing_info",
        )

    async def get_listing_info_host(
        self,
        access_token: str,
        listing_id: int | str,
    ) -> Result[dict[str, Any], ProviderError]:
        """Fetch the host view of a listing.

        Args:
            access_token: Access token of the listing's host.
            listing_id: Listing id.

        Returns:
            Success(dict): Payload with a ``listing`` object.
            Failure(ProviderError): On any error.
        """
        return await self._execute_and_parse_object(
            method="GET",
            path=f"/v1/listings/{listing_id}",
            headers=make_auth_header(access_token, user_agent=self._user_agent),
            operation="get_listing_info_host",
        )

    async def set_house_manual(
        self,
        access_token: str,
        listing_id: int | str,
        manual: str,
    ) -> Result[dict[str, Any], ProviderError]:
        """Replace the house manual of a listing.

        Args:
            access_token: Access token of the listing's host.
            listing_id: Listing id.
            manual: New house manual text.

        Returns:
            Success(dict): Upstream update response.
            Failure(ProviderError): On any error.
        """
        return await self._execute_and_parse_object(
            method="POST",
            path=f"/v1/listings/{listing_id}/update",
            headers=make_auth_header(access_token, user_agent=self._user_agent),
            json_data={"listing": {"house_manual": manual}},
            operation="set_house_manual",
        )
