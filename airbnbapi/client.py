"""Public client for the Airbnb REST API.

Friendly async functions over the endpoint clients. Unlike the endpoint
clients, which return Result types, these functions follow a sentinel
contract:

- A missing required argument returns None without sending a request.
- ``test_auth`` turns every failure into False.
- ``new_access_token`` and ``login`` return the upstream error payload
  unchanged when credentials are rejected.
- Calendar, pricing and listing functions return the upstream payload,
  error payloads included. Failures without a JSON payload (timeouts,
  connection errors, malformed bodies) raise AirbnbAPIError.

Usage:
    import airbnbapi

    token = await airbnbapi.new_access_token(username="me@example.com", password="...")
    days = await airbnbapi.get_calendar(
        token=token["token"],
        listing_id=1234,
        start_date="2017-11-01",
        end_date="2017-12-01",
    )

    # Explicit configuration
    client = airbnbapi.AirbnbClient(airbnbapi.Settings(currency="EUR"))
    await client.set_price_for_day(token=..., listing_id=1234, date="2017-11-01", price=90)
"""

from collections.abc import Mapping, Sequence
from datetime import date as date_cls
from functools import lru_cache
from typing import Any, TypeVar

from airbnbapi.core.config import Settings, get_settings
from airbnbapi.core.container import build_logger, get_logger
from airbnbapi.core.enums import ErrorCode
from airbnbapi.core.result import Failure, Result, Success
from airbnbapi.domain.errors import ProviderError, ProviderInvalidResponseError
from airbnbapi.domain.protocols import LoggerProtocol
from airbnbapi.domain.value_objects import BatchOperation
from airbnbapi.infrastructure.providers.airbnb import (
    AirbnbAuthAPI,
    AirbnbBatchAPI,
    AirbnbCalendarAPI,
    AirbnbCalendarMapper,
    AirbnbListingsAPI,
)
from airbnbapi.infrastructure.providers.airbnb import headers
from airbnbapi.infrastructure.providers.airbnb.api import calendar_batch_operations

T = TypeVar("T")


class AirbnbAPIError(Exception):
    """Raised when an upstream failure has no payload to hand back.

    Attributes:
        error: The ProviderError describing the failure.
    """

    def __init__(self, error: ProviderError) -> None:
        super().__init__(str(error))
        self.error = error


class AirbnbClient:
    """Client bound to one set of settings.

    Every method takes keyword arguments that default to None, so a call
    with a missing argument is answered with None instead of a TypeError.

    Attributes:
        settings: Settings the endpoint clients were built from.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        timeout: float | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Library settings; defaults to the cached settings.
            timeout: HTTP timeout override in seconds.
            logger: Logger override; defaults to a logger built from ``settings``
                (the process logger when no settings are given).
        """
        self.settings = settings or get_settings()
        api_kwargs: dict[str, Any] = {
            "base_url": self.settings.api_base_url,
            "default_params": self.settings.default_query,
            "user_agent": self.settings.user_agent,
            "timeout": timeout or self.settings.timeout,
        }
        self._auth_api = AirbnbAuthAPI(**api_kwargs)
        self._batch_api = AirbnbBatchAPI(**api_kwargs)
        self._calendar_api = AirbnbCalendarAPI(**api_kwargs)
        self._listings_api = AirbnbListingsAPI(**api_kwargs)
        self._calendar_mapper = AirbnbCalendarMapper()
        if logger is None:
            logger = get_logger() if settings is None else build_logger(self.settings)
        self._logger = logger

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------

    def make_auth_header(self, token: str | None = None) -> dict[str, str] | None:
        """Headers that authenticate a request, or None without a token."""
        return headers.make_auth_header(token, user_agent=self.settings.user_agent)

    async def test_auth(self, token: str | None = None) -> bool | None:
        """Check whether an access token is accepted.

        Args:
            token: Access token.

        Returns:
            True if accepted, False on any failure, None without a token.
        """
        if self._missing("test_auth", token=token):
            return None

        result = await self._auth_api.verify_token(token)
        return isinstance(result, Success)

    async def new_access_token(
        self,
        username: str | None = None,
        password: str | None = None,
    ) -> dict[str, Any] | None:
        """Exchange username and password for an access token.

        Args:
            username: Account username (email).
            password: Account password.

        Returns:
            ``{"token": ...}`` on success, the upstream error payload (with
            an ``error`` field) when rejected, None on missing arguments, when
            the upstream could not be reached or when it answered without a
            token.
        """
        if self._missing("new_access_token", username=username, password=password):
            return None

        result = await self._auth_api.new_access_token(username, password)
        match result:
            case Success(value=token):
                return {"token": token}
            case Failure(error=error):
                return self._error_payload("new_access_token", error)

    async def login(
        self,
        email: str | None = None,
        password: str | None = None,
    ) -> dict[str, Any] | None:
        """Log in with email and password.

        Returns:
            The login summary (``login`` field), the upstream error payload
            (``error`` field) when rejected, or None on missing arguments or
            when the upstream could not be reached.
        """
        if self._missing("login", email=email, password=password):
            return None

        result = await self._auth_api.login(email, password)
        match result:
            case Success(value=summary):
                return summary
            case Failure(error=error):
                return self._error_payload("login", error)

    # -------------------------------------------------------------------------
    # Calendar
    # -------------------------------------------------------------------------

    async def get_public_listing_calendar(
        self,
        listing_id: int | str | None = None,
        month: int | str | None = None,
        year: int | str | None = None,
        count: int | str | None = None,
    ) -> dict[str, Any] | None:
        """Public calendar of a listing.

        Args:
            listing_id: Listing id.
            month: First month; defaults to the current month.
            year: Year of the first month; defaults to the current year.
            count: Number of months; defaults to 1.
        """
        if self._missing("get_public_listing_calendar", listing_id=listing_id):
            return None

        today = date_cls.today()
        result = await self._calendar_api.get_public_listing_calendar(
            listing_id,
            month=month if month is not None else today.month,
            year=year if year is not None else today.year,
            count=count if count is not None else 1,
        )
        return self._payload("get_public_listing_calendar", result)

    async def get_calendar(
        self,
        token: str | None = None,
        listing_id: int | str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> list[dict[str, Any]] | None:
        """Host calendar days of a listing between two dates.

        Sends one batch with the calendar days and the listing's dynamic
        pricing controls, non-transactionally.

        Returns:
            List of calendar day objects, or None on missing arguments.

        Raises:
            AirbnbAPIError: If the batch fails or has an unexpected shape.
        """
        if self._missing(
            "get_calendar",
            token=token,
            listing_id=listing_id,
            start_date=start_date,
            end_date=end_date,
        ):
            return None

        result = await self._batch_api.execute(
            token,
            calendar_batch_operations(listing_id, start_date, end_date),
            transaction=False,
        )
        operations = self._value("get_calendar", result)
        days = self._calendar_mapper.map_calendar_days(operations)
        if days is None:
            raise AirbnbAPIError(_unexpected_shape("calendar_days missing from batch response"))
        return days

    async def set_price_for_day(
        self,
        token: str | None = None,
        listing_id: int | str | None = None,
        date: str | None = None,
        price: int | float | None = None,
        currency: str | None = None,
    ) -> dict[str, Any] | None:
        """Set the nightly price of one day, overriding smart pricing.

        The day is also marked available.

        Args:
            token: Host access token.
            listing_id: Listing id.
            date: Day as ``YYYY-MM-DD``.
            price: Nightly price.
            currency: Currency of the price; defaults to the settings currency.
        """
        if self._missing(
            "set_price_for_day",
            token=token,
            listing_id=listing_id,
            date=date,
            price=price,
        ):
            return None

        result = await self._calendar_api.set_price_for_day(
            token,
            listing_id,
            date,
            price,
            currency=currency or self.settings.currency,
        )
        return self._payload("set_price_for_day", result)

    async def set_availability_for_day(
        self,
        token: str | None = None,
        listing_id: int | str | None = None,
        date: str | None = None,
        availability: str | None = None,
    ) -> dict[str, Any] | None:
        """Set the availability (``available``/``unavailable``) of one day."""
        if self._missing(
            "set_availability_for_day",
            token=token,
            listing_id=listing_id,
            date=date,
            availability=availability,
        ):
            return None

        result = await self._calendar_api.set_availability_for_day(
            token, listing_id, date, availability
        )
        return self._payload("set_availability_for_day", result)

    # -------------------------------------------------------------------------
    # Listings
    # -------------------------------------------------------------------------

    async def set_house_manual(
        self,
        token: str | None = None,
        listing_id: int | str | None = None,
        manual: str | None = None,
    ) -> dict[str, Any] | None:
        """Replace the house manual of a listing."""
        if self._missing(
            "set_house_manual", token=token, listing_id=listing_id, manual=manual
        ):
            return None

        result = await self._listings_api.set_house_manual(token, listing_id, manual)
        return self._payload("set_house_manual", result)

    async def get_listing_info(
        self,
        listing_id: int | str | None = None,
    ) -> dict[str, Any] | None:
        """Public details of a listing (``listing`` field)."""
        if self._missing("get_listing_info", listing_id=listing_id):
            return None

        result = await self._listings_api.get_listing_info(listing_id)
        return self._payload("get_listing_info", result)

    async def get_listing_info_host(
        self,
        token: str | None = None,
        listing_id: int | str | None = None,
    ) -> dict[str, Any] | None:
        """Host view of a listing (``listing`` field)."""
        if self._missing("get_listing_info_host", token=token, listing_id=listing_id):
            return None

        result = await self._listings_api.get_listing_info_host(token, listing_id)
        return self._payload("get_listing_info_host", result)

    # -------------------------------------------------------------------------
    # Batch
    # -------------------------------------------------------------------------

    async def batch(
        self,
        token: str | None = None,
        operations: Sequence[BatchOperation | Mapping[str, Any]] | None = None,
        transaction: bool = False,
    ) -> list[dict[str, Any]] | None:
        """Run several sub-operations in one request.

        Args:
            token: Access token.
            operations: BatchOperation objects or ``{"method", "path",
                "query"}`` mappings.
            transaction: Ask the upstream to run them as one transaction.

        Returns:
            One response entry per sub-operation, or None on missing arguments.

        Raises:
            AirbnbAPIError: If the batch request fails.
        """
        if self._missing("batch", token=token, operations=operations):
            return None

        batch_operations = [
            op if isinstance(op, BatchOperation) else BatchOperation(**op)
            for op in operations
        ]
        result = await self._batch_api.execute(
            token, batch_operations, transaction=transaction
        )
        return self._value("batch", result)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _missing(self, operation: str, **arguments: Any) -> bool:
        """Log and report required arguments that were not given."""
        missing = [name for name, value in arguments.items() if value is None or value == ""]
        if missing:
            self._logger.warning(
                "airbnb_request_skipped",
                operation=operation,
                missing=missing,
            )
        return bool(missing)

    def _error_payload(self, operation: str, error: ProviderError) -> dict[str, Any] | None:
        """Upstream payload of a failed call, None when there is none."""
        self._logger.warning(
            "airbnb_request_failed",
            operation=operation,
            error_code=error.code.value,
            status_code=error.status_code,
        )
        return error.details

    def _payload(
        self, operation: str, result: Result[dict[str, Any], ProviderError]
    ) -> dict[str, Any]:
        """Response payload of a call, error payloads included."""
        match result:
            case Success(value=payload):
                return payload
            case Failure(error=error):
                payload = self._error_payload(operation, error)
                if payload is None:
                    raise AirbnbAPIError(error)
                return payload

    def _value(self, operation: str, result: Result[T, ProviderError]) -> T:
        """Value of a successful call; raises on failure."""
        match result:
            case Success(value=value):
                return value
            case Failure(error=error):
                self._logger.error(
                    "airbnb_request_failed",
                    operation=operation,
                    error_code=error.code.value,
                    status_code=error.status_code,
                )
                raise AirbnbAPIError(error)


def _unexpected_shape(message: str) -> ProviderError:
    return ProviderInvalidResponseError(
        code=ErrorCode.PROVIDER_INVALID_RESPONSE,
        message=message,
        provider_name="airbnb",
    )


@lru_cache
def get_client() -> AirbnbClient:
    """Return the default client, built from the cached settings."""
    return AirbnbClient()


# =============================================================================
# Module-level functions (default client)
# =============================================================================


def make_auth_header(token: str | None = None) -> dict[str, str] | None:
    """See AirbnbClient.make_auth_header."""
    return get_client().make_auth_header(token)


async def test_auth(token: str | None = None) -> bool | None:
    """See AirbnbClient.test_auth."""
    return await get_client().test_auth(token)


# Not a test, keep pytest from collecting it when imported into test modules
test_auth.__test__ = False  # type: ignore[attr-defined]


async def new_access_token(
    username: str | None = None,
    password: str | None = None,
) -> dict[str, Any] | None:
    """See AirbnbClient.new_access_token."""
    return await get_client().new_access_token(username=username, password=password)


async def login(
    email: str | None = None,
    password: str | None = None,
) -> dict[str, Any] | None:
    """See AirbnbClient.login."""
    return await get_client().login(email=email, password=password)


async def get_public_listing_calendar(
    listing_id: int | str | None = None,
    month: int | str | None = None,
    year: int | str | None = None,
    count: int | str | None = None,
) -> dict[str, Any] | None:
    """See AirbnbClient.get_public_listing_calendar."""
    return await get_client().get_public_listing_calendar(
        listing_id=listing_id, month=month, year=year, count=count
    )


async def get_calendar(
    token: str | None = None,
    listing_id: int | str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> list[dict[str, Any]] | None:
    """See AirbnbClient.get_calendar."""
    return await get_client().get_calendar(
        token=token, listing_id=listing_id, start_date=start_date, end_date=end_date
    )


async def set_price_for_day(
    token: str | None = None,
    listing_id: int | str | None = None,
    date: str | None = None,
    price: int | float | None = None,
    currency: str | None = None,
) -> dict[str, Any] | None:
    """See AirbnbClient.set_price_for_day."""
    return await get_client().set_price_for_day(
        token=token, listing_id=listing_id, date=date, price=price, currency=currency
    )


async def set_availability_for_day(
    token: str | None = None,
    listing_id: int | str | None = None,
    date: str | None = None,
    availability: str | None = None,
) -> dict[str, Any] | None:
    """See AirbnbClient.set_availability_for_day."""
    return await get_client().set_availability_for_day(
        token=token, listing_id=listing_id, date=date, availability=availability
    )


async def set_house_manual(
    token: str | None = None,
    listing_id: int | str | None = None,
    manual: str | None = None,
) -> dict[str, Any] | None:
    """See AirbnbClient.set_house_manual."""
    return await get_client().set_house_manual(
        token=token, listing_id=listing_id, manual=manual
    )


async def get_listing_info(listing_id: int | str | None = None) -> dict[str, Any] | None:
    """See AirbnbClient.get_listing_info."""
    return await get_client().get_listing_info(listing_id=listing_id)


async def get_listing_info_host(
    token: str | None = None,
    listing_id: int | str | None = None,
) -> dict[str, Any] | None:
    """See AirbnbClient.get_listing_info_host."""
    return await get_client().get_listing_info_host(token=token, listing_id=listing_id)


async def batch(
    token: str | None = None,
    operations: Sequence[BatchOperation | Mapping[str, Any]] | None = None,
    transaction: bool = False,
) -> list[dict[str, Any]] | None:
    """See AirbnbClient.batch."""
    return await get_client().batch(
        token=token, operations=operations, transaction=transaction
    )
