"""Provider error types returned by the endpoint clients.

Architecture:
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)
- ``details`` carries the upstream JSON error payload when the response
  had one, so callers can surface it unchanged

Usage:
    from airbnbapi.domain.errors import ProviderError, ProviderAuthenticationError
    from airbnbapi.core.result import Result, Success, Failure

    async def get_listing(self, listing_id: int) -> Result[dict, ProviderError]:
        ...
"""

from dataclasses import dataclass

from airbnbapi.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderError(DomainError):
    """Base upstream API error.

    Attributes:
        code: ErrorCode.
        message: Human-readable message.
        provider_name: Name of the provider ("airbnb").
        status_code: HTTP status of the response, None for transport errors.
        details: Upstream JSON error payload, if any.
    """

    provider_name: str
    status_code: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderAuthenticationError(ProviderError):
    """Authentication/authorization failure (401, 403).

    Raised when:
    - Access token is invalid or expired
    - Username/password or email/password are wrong
    - Token lacks access to the listing

    Recovery: Acquire a new access token.

    Attributes:
        is_token_expired: Whether the error is due to an invalid/expired token.
    """

    is_token_expired: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderUnavailableError(ProviderError):
    """Upstream API is unavailable.

    Raised when:
    - Upstream returns 5xx errors
    - Connection timeout occurs
    - DNS resolution or TLS handshake fails

    Attributes:
        is_transient: Whether the error is likely transient (True = retry).
    """

    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderRateLimitError(ProviderError):
    """Upstream rate limit exceeded (429).

    Attributes:
        retry_after: Seconds to wait before retrying (from Retry-After header).
    """

    retry_after: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderInvalidResponseError(ProviderError):
    """Upstream returned an invalid or unexpected response.

    Raised when:
    - Response status is unexpected (400, 404, ...)
    - Response JSON is malformed
    - Required fields are missing

    Attributes:
        response_body: Raw response body (truncated) for debugging.
    """

    response_body: str | None = None
