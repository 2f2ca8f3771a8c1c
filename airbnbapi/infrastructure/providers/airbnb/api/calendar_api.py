"""Airbnb calendar API client.

HTTP client for public and host calendar endpoints.

Endpoints:
    GET /v2/calendar_months - Public availability by month
    PUT /v2/calendars/{listing_id}/{date} - Update price/availability of a day

Host calendar reads go through the batch endpoint; this module builds the
sub-operations (see ``calendar_batch_operations``).
"""

from typing import Any

from airbnbapi.core.constants import FORMAT_HOST_CALENDAR, FORMAT_WITH_CONDITIONS
from airbnbapi.core.result import Result
from airbnbapi.domain.errors import ProviderError
from airbnbapi.domain.value_objects import BatchOperation
from airbnbapi.infrastructure.providers.airbnb.api.base import AirbnbAPIClient
from airbnbapi.infrastructure.providers.airbnb.headers import (
    make_auth_header,
    make_public_header,
)


class AirbnbCalendarAPI(AirbnbAPIClient):
    """HTTP client for Airbnb calendar endpoints.

    Returns raw JSON responses.

    Example:
        >>> api = AirbnbCalendarAPI(base_url="https://api.airbnb.com")
        >>> result = await api.get_public_listing_calendar(
        ...     1234, month=1, year=2018, count=1
        ... )
    """

    async def get_public_listing_calendar(
        self,
        listing_id: int | str,
        *,
        month: int | str,
        year: int | str,
        count: int | str,
    ) -> Result[dict[str, Any], ProviderError]:
        """Fetch the public calendar of a listing.

        Args:
            listing_id: Listing id.
            month: First month (1-12).
            year: Year of the first month.
            count: Number of months to return.

        Returns:
            Success(dict): ``calendar_months`` payload.
            Failure(ProviderError): On any error.
        """
        return await self._execute_and_parse_object(
            method="GET",
            path="/v2/calendar_months",
            headers=make_public_header(user_agent=self._user_agent),
            params={
                "listing_id": str(listing_id),
                "month": str(month),
                "year": str(year),
                "count": str(count),
                "_format": FORMAT_WITH_CONDITIONS,
            },
            operation="get_public_listing_calendar",
        )

    async def set_price_for_day(
        self,
        access_token: str,
        listing_id: int | str,
        date: str,
        price: int | float,
        *,
        currency: str | None = None,
    ) -> Result[dict[str, Any], ProviderError]:
        """Set the nightly price of one day and mark it available.

        The price overrides demand-based (smart) pricing for that day.

        Args:
            access_token: Valid access token.
            listing_id: Listing id.
            date: Day as ``YYYY-MM-DD``.
            price: Nightly price.
            currency: Currency of ``price``; defaults to the client currency.

        Returns:
            Success(dict): Updated calendar day.
            Failure(ProviderError): On any error.
        """
        params = {"_format": FORMAT_HOST_CALENDAR}
        if currency:
            params["currency"] = currency

        return await self._execute_and_parse_object(
            method="PUT",
            path=f"/v2/calendars/{listing_id}/{date}",
            headers=make_auth_header(access_token, user_agent=self._user_agent),
            params=params,
            json_data={
                "daily_price": price,
                "demand_based_pricing_overridden": True,
                "availability": "available",
            },
            operation="set_price_for_day",
        )

    async def set_availability_for_day(
        self,
        access_token: str,
        listing_id: int | str,
        date: str,
        availability: str,
    ) -> Result[dict[str, Any], ProviderError]:
        """Set the availability of one day.

        Args:
            access_token: Valid access token.
            listing_id: Listing id.
            date: Day as ``YYYY-MM-DD``.
            availability: ``available`` or ``unavailable``.

        Returns:
            Success(dict): Updated calendar day.
            Failure(ProviderError): On any error.
        """
        return await self._execute_and_parse_object(
            method="PUT",
            path=f"/v2/calendars/{listing_id}/{date}",
            headers=make_auth_header(access_token, user_agent=self._user_agent),
            params={"_format": FORMAT_HOST_CALENDAR},
            json_data={"availability": availability},
            operation="set_availability_for_day",
        )


def calendar_batch_operations(
    listing_id: int | str,
    start_date: str,
    end_date: str,
) -> list[BatchOperation]:
    """Sub-operations that read the host calendar of a listing.

    The first operation returns the calendar days, the second the listing's
    dynamic pricing controls.
    """
    return [
        BatchOperation(
            method="GET",
            path="/calendar_days",
            query={
                "start_date": start_date,
                "listing_id": listing_id,
                "_format": FORMAT_HOST_CALENDAR,
                "end_date": end_date,
            },
        ),
        BatchOperation(
            method="GET",
            path=f"/dynamic_pricing_controls/{listing_id}",
        ),
    ]
