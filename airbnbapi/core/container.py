"""Composition root for shared infrastructure.

Adapter selection is centralized here so the rest of the library only
depends on protocols:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

Usage:
    from airbnbapi.core.container import build_logger, get_logger

    logger = get_logger()                  # from the cached settings
    logger = build_logger(Settings(...))   # from explicit settings
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from airbnbapi.core.config import Settings, get_settings

if TYPE_CHECKING:
    from airbnbapi.domain.protocols.logger_protocol import LoggerProtocol


def build_logger(settings: Settings) -> "LoggerProtocol":
    """Build a logger for the environment and level of ``settings``.

    Args:
        settings: Settings providing ``environment`` and ``log_level``.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from airbnbapi.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the process-wide logger singleton, built from get_settings()."""
    return build_logger(get_settings())
