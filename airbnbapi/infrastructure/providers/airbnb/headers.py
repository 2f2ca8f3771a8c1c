"""Request header builders for the Airbnb API."""

from airbnbapi.core.constants import (
    DEFAULT_USER_AGENT,
    JSON_CONTENT_TYPE,
    OAUTH_TOKEN_HEADER,
)


def make_auth_header(
    token: str | None,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
) -> dict[str, str] | None:
    """Build the headers that authenticate a request.

    Args:
        token: Access token, or None.
        user_agent: User-Agent to send.

    Returns:
        Headers dict with Content-Type, token and User-Agent, or None when
        no token was given.
    """
    if not token:
        return None
    return {
        "Content-Type": JSON_CONTENT_TYPE,
        OAUTH_TOKEN_HEADER: token,
        "User-Agent": user_agent,
    }


def make_public_header(*, user_agent: str = DEFAULT_USER_AGENT) -> dict[str, str]:
    """Headers for requests that need no token."""
    return {"User-Agent": user_agent}
