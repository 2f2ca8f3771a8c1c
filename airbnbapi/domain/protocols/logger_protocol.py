"""LoggerProtocol definition for structured logging.

Implementations MUST keep logs structured (message + key-value context)
and safe: never log access tokens or passwords.

Usage:
    from airbnbapi.core.container import get_logger
    from airbnbapi.domain.protocols.logger_protocol import LoggerProtocol

    logger: LoggerProtocol = get_logger()
    logger.info("airbnb_listing_fetched", listing_id=listing_id)

    scoped = logger.bind(operation="get_calendar")
    scoped.warning("airbnb_request_skipped", missing=["token"])
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...
