"""Domain errors package.

Usage:
    from airbnbapi.domain.errors import ProviderError, ProviderAuthenticationError
"""

from airbnbapi.domain.errors.provider_error import (
    ProviderAuthenticationError,
    ProviderError,
    ProviderInvalidResponseError,
    ProviderRateLimitError,
    ProviderUnavailableError,
)

__all__ = [
    "ProviderError",
    "ProviderAuthenticationError",
    "ProviderUnavailableError",
    "ProviderRateLimitError",
    "ProviderInvalidResponseError",
]
