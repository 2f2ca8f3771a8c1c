"""Airbnb API clients package.

HTTP clients for the Airbnb REST API endpoints.
"""

from airbnbapi.infrastructure.providers.airbnb.api.auth_api import AirbnbAuthAPI
from airbnbapi.infrastructure.providers.airbnb.api.batch_api import AirbnbBatchAPI
from airbnbapi.infrastructure.providers.airbnb.api.calendar_api import (
    AirbnbCalendarAPI,
    calendar_batch_operations,
)
from airbnbapi.infrastructure.providers.airbnb.api.listings_api import (
    AirbnbListingsAPI,
)

__all__ = [
    "AirbnbAuthAPI",
    "AirbnbBatchAPI",
    "AirbnbCalendarAPI",
    "AirbnbListingsAPI",
    "calendar_batch_operations",
]
