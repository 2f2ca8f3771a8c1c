"""Async client for the Airbnb REST API.

Usage:
    import airbnbapi

    ok = await airbnbapi.test_auth(token="...")
    listing = await airbnbapi.get_listing_info(listing_id=1234)
"""

from airbnbapi.client import (
    AirbnbAPIError,
    AirbnbClient,
    batch,
    get_calendar,
    get_client,
    get_listing_info,
    get_listing_info_host,
    get_public_listing_calendar,
    login,
    make_auth_header,
    new_access_token,
    set_availability_for_day,
    set_house_manual,
    set_price_for_day,
    test_auth,
)
from airbnbapi.core.config import Settings, get_settings
from airbnbapi.domain.value_objects import BatchOperation

__version__ = "0.1.0"

__all__ = [
    "AirbnbAPIError",
    "AirbnbClient",
    "BatchOperation",
    "Settings",
    "batch",
    "get_calendar",
    "get_client",
    "get_listing_info",
    "get_listing_info_host",
    "get_public_listing_calendar",
    "get_settings",
    "login",
    "make_auth_header",
    "new_access_token",
    "set_availability_for_day",
    "set_house_manual",
    "set_price_for_day",
    "test_auth",
]
