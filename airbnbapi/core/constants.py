"""Centralized constants for internal implementation details.

This module holds values fixed by the upstream API or by this library,
NOT environment-specific configuration. For anything a caller may want to
change per environment, use `airbnbapi/core/config.py` instead.

Categories:
- Upstream defaults: base URL, public API key, locale/currency
- Headers: header names and fixed header values
- Request formats: `_format` flags understood by the upstream endpoints
- Timeouts and limits

Example:
    >>> from airbnbapi.core.constants import OAUTH_TOKEN_HEADER
    >>> headers = {OAUTH_TOKEN_HEADER: access_token}
"""

# =============================================================================
# Upstream Defaults
# =============================================================================

AIRBNB_API_BASE_URL: str = "https://api.airbnb.com"
"""Base URL of the upstream REST API."""

AIRBNB_PUBLIC_API_KEY: str = "d306zoyjsyarp7ifhu67rjxn52tv0t20"
"""Public client key the upstream expects in the `key` query parameter."""

DEFAULT_CURRENCY: str = "USD"
"""Currency sent with every request unless overridden."""

DEFAULT_LOCALE: str = "en-US"
"""Locale sent with every request unless overridden."""

DEFAULT_USER_AGENT: str = "Airbnb/17.50 iPad/11.2.1 Type/Tablet"
"""User-Agent sent with authenticated requests."""


# =============================================================================
# Headers
# =============================================================================

OAUTH_TOKEN_HEADER: str = "X-Airbnb-OAuth-Token"
"""Header carrying the access token."""

JSON_CONTENT_TYPE: str = "application/json; charset=UTF-8"
"""Content-Type sent with authenticated requests."""


# =============================================================================
# Request Formats
# =============================================================================

FORMAT_WITH_CONDITIONS: str = "with_conditions"
"""Public calendar months including booking conditions."""

FORMAT_HOST_CALENDAR: str = "host_calendar"
"""Host-side calendar days (prices, availability, notes)."""

FORMAT_LEGACY_LISTING: str = "v1_legacy_for_p3"
"""Public listing detail payload."""

PASSWORD_GRANT_TYPE: str = "password"
"""OAuth grant type used to exchange username/password for a token."""


# =============================================================================
# Timeouts
# =============================================================================

PROVIDER_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for upstream API calls in seconds."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length for response body in error messages (truncation limit)."""
