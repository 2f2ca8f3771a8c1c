"""Airbnb calendar mapper.

Extracts calendar days from the host-calendar batch response.

Batch Response Structure:
    {
        "operations": [
            {"response": {"calendar_days": [{"date": "2017-11-01", ...}, ...]}},
            {"response": {"dynamic_pricing_controls": {...}}}
        ]
    }

The batch client already unwraps the top-level ``operations`` list.
"""

from typing import Any

import structlog

logger = structlog.get_logger(__name__)


class AirbnbCalendarMapper:
    """Mapper for host calendar batch responses.

    Thread-safe: No mutable state, can be shared across requests.

    Example:
        >>> mapper = AirbnbCalendarMapper()
        >>> mapper.map_calendar_days([{"response": {"calendar_days": []}}])
        []
    """

    def map_calendar_days(
        self, operations: list[dict[str, Any]]
    ) -> list[dict[str, Any]] | None:
        """Return the calendar days of the first sub-operation.

        Args:
            operations: Sub-operation responses from the batch endpoint.

        Returns:
            List of calendar day objects, or None if the response does not
            have the expected shape.
        """
        try:
            days = operations[0]["response"]["calendar_days"]
        except (IndexError, KeyError, TypeError) as e:
            logger.warning(
                "airbnb_calendar_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        if not isinstance(days, list):
            logger.warning(
                "airbnb_calendar_unexpected_format",
                data_type=type(days).__name__,
            )
            return None

        return days
