"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Provider errors
    PROVIDER_AUTHENTICATION_FAILED = "provider_authentication_failed"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    PROVIDER_RATE_LIMITED = "provider_rate_limited"
    PROVIDER_RESOURCE_NOT_FOUND = "provider_resource_not_found"
    PROVIDER_INVALID_RESPONSE = "provider_invalid_response"
