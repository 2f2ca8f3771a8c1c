"""Airbnb authentication API client.

HTTP client for token acquisition, session login and token validation.

Endpoints:
    POST /v1/authorize - Exchange username/password for an access token
    POST /v2/logins - Email/password login, returns the session summary
    POST /v2/batch - Empty batch, used as a token liveness probe
"""

from typing import Any

from airbnbapi.core.constants import PASSWORD_GRANT_TYPE, RESPONSE_BODY_MAX_LENGTH
from airbnbapi.core.enums import ErrorCode
from airbnbapi.core.result import Failure, Result, Success
from airbnbapi.domain.errors import ProviderError, ProviderInvalidResponseError
from airbnbapi.infrastructure.providers.airbnb.api.base import AirbnbAPIClient
from airbnbapi.infrastructure.providers.airbnb.headers import (
    make_auth_header,
    make_public_header,
)


class AirbnbAuthAPI(AirbnbAPIClient):
    """HTTP client for Airbnb authentication endpoints.

    Credentials are passed per call and never stored on the instance.

    Example:
        >>> api = AirbnbAuthAPI(base_url="https://api.airbnb.com")
        >>> result = await api.new_access_token("user@example.com", "secret")
        >>> match result:
        ...     case Success(value=token):
        ...         print("got token")
        ...     case Failure(error=error):
        ...         print(error.details)
    """

    async def verify_token(self, access_token: str) -> Result[bool, ProviderError]:
        """Check that an access token is accepted by the upstream.

        Sends an empty batch; the body of the response is ignored.

        Args:
            access_token: Access token to check.

        Returns:
            Success(True): Token accepted (2xx).
            Failure(ProviderError): Token rejected or upstream unreachable.
        """
        operation = "verify_token"
        result = await self._execute_request(
            method="POST",
            path="/v2/batch",
            headers=make_auth_header(access_token, user_agent=self._user_agent),
            json_data={"operations": []},
            operation=operation,
        )
        if isinstance(result, Failure):
            return result

        error_result = self._check_error_response(result.value, operation)
        if error_result is not None:
            return error_result

        return Success(value=True)

    async def new_access_token(
        self,
        username: str,
        password: str,
    ) -> Result[str, ProviderError]:
        """Exchange username and password for an access token.

        Args:
            username: Account username (email).
            password: Account password.

        Returns:
            Success(str): The issued access token.
            Failure(ProviderError): Rejected credentials (upstream payload
                in ``details``) or upstream failure.
        """
        operation = "new_access_token"
        result = await self._execute_and_parse_object(
            method="POST",
            path="/v1/authorize",
            headers=make_public_header(user_agent=self._user_agent),
            json_data={
                "grant_type": PASSWORD_GRANT_TYPE,
                "username": username,
                "password": password,
            },
            operation=operation,
        )
        if isinstance(result, Failure):
            return result

        token = result.value.get("access_token")
        if not token:
            self._logger.warning("airbnb_api_access_token_missing", operation=operation)
            # A 2xx body is not an error payload, so details stays empty
            return Failure(
                error=ProviderInvalidResponseError(
                    code=ErrorCode.PROVIDER_INVALID_RESPONSE,
                    message="Airbnb authorize response has no access_token",
                    provider_name=self._provider_name,
                    response_body=str(result.value)[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        self._logger.info("airbnb_api_access_token_issued", operation=operation)
        return Success(value=token)

    async def login(
        self,
        email: str,
        password: str,
    ) -> Result[dict[str, Any], ProviderError]:
        """Log in with email and password.

        Args:
            email: Account email.
            password: Account password.

        Returns:
            Success(dict): Login summary (``login`` object with session id).
            Failure(ProviderError): Rejected credentials (upstream payload
                in ``details``) or upstream failure.
        """
        return await self._execute_and_parse_object(
            method="POST",
            path="/v2/logins",
            headers=make_public_header(user_agent=self._user_agent),
            json_data={"email": email, "password": password},
            operation="login",
        )
