"""Shared constructor for the Airbnb endpoint clients."""

from collections.abc import Mapping

from airbnbapi.core.constants import DEFAULT_USER_AGENT, PROVIDER_TIMEOUT_DEFAULT
from airbnbapi.infrastructure.providers.base_api_client import BaseProviderAPIClient

PROVIDER_NAME = "airbnb"


class AirbnbAPIClient(BaseProviderAPIClient):
    """Base for Airbnb endpoint clients.

    Attributes:
        _user_agent: User-Agent sent with every request.
    """

    def __init__(
        self,
        *,
        base_url: str,
        default_params: Mapping[str, str] | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = PROVIDER_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize Airbnb endpoint client.

        Args:
            base_url: API base URL (e.g., "https://api.airbnb.com").
            default_params: Query parameters appended to every request
                (``key``, ``currency``, ``locale``).
            user_agent: User-Agent sent with every request.
            timeout: HTTP request timeout in seconds.
        """
        super().__init__(
            base_url=base_url,
            provider_name=PROVIDER_NAME,
            default_params=default_params,
            timeout=timeout,
        )
        self._user_agent = user_agent
