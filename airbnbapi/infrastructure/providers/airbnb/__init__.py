"""Airbnb provider package.

Integration with the Airbnb REST API: authentication, listings and
host calendar. Authenticated requests carry the access token in the
X-Airbnb-OAuth-Token header.
"""

from airbnbapi.infrastructure.providers.airbnb.api import (
    AirbnbAuthAPI,
    AirbnbBatchAPI,
    AirbnbCalendarAPI,
    AirbnbListingsAPI,
)
from airbnbapi.infrastructure.providers.airbnb.headers import make_auth_header
from airbnbapi.infrastructure.providers.airbnb.mappers import AirbnbCalendarMapper

__all__ = [
    "AirbnbAuthAPI",
    "AirbnbBatchAPI",
    "AirbnbCalendarAPI",
    "AirbnbCalendarMapper",
    "AirbnbListingsAPI",
    "make_auth_header",
]
