"""Airbnb response mappers."""

from airbnbapi.infrastructure.providers.airbnb.mappers.calendar_mapper import (
    AirbnbCalendarMapper,
)

__all__ = ["AirbnbCalendarMapper"]
