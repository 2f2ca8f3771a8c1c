"""Base API client for upstream HTTP communication.

This module provides a base class for the endpoint clients that handles:
- HTTP request execution with timeout/connection error handling
- Provider-required query parameters appended to every request
- Response status code interpretation
- JSON parsing with error handling
- Structured logging with provider context

Subclasses only need to:
1. Build their request (path, headers, params, body)
2. Call the base methods for HTTP operations

Architecture:
    - Infrastructure layer (adapter for the external API)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for upstream errors)
"""

from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from airbnbapi.core.constants import PROVIDER_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from airbnbapi.core.enums import ErrorCode
from airbnbapi.core.result import Failure, Result, Success
from airbnbapi.domain.errors import (
    ProviderAuthenticationError,
    ProviderError,
    ProviderInvalidResponseError,
    ProviderRateLimitError,
    ProviderUnavailableError,
)


class BaseProviderAPIClient:
    """Base class for endpoint clients with shared HTTP handling.

    Provides common functionality for HTTP communication with the upstream:
    - Request execution with timeout/connection error handling
    - Response status code interpretation (401, 403, 404, 429, 5xx)
    - JSON parsing with type validation
    - Structured logging with provider context

    Error responses keep the upstream JSON payload (when there is one) in
    ``ProviderError.details``.

    Attributes:
        _base_url: Upstream API base URL (without trailing slash).
        _provider_name: Provider identifier for logging and error messages.
        _default_params: Query parameters sent with every request.
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger with provider context.

    Example:
        >>> class AirbnbListingsAPI(BaseProviderAPIClient):
        ...     async def get_listing_info(self, listing_id: int):
        ...         return await self._execute_and_parse_object(
        ...             method="GET",
        ...             path=f"/v2/listings/{listing_id}",
        ...             operation="get_listing_info",
        ...         )
    """

    def __init__(
        self,
        *,
        base_url: str,
        provider_name: str,
        default_params: Mapping[str, str] | None = None,
        timeout: float = PROVIDER_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize base API client.

        Args:
            base_url: Upstream API base URL (e.g., "https://api.airbnb.com").
            provider_name: Provider identifier (e.g., "airbnb").
            default_params: Query parameters appended to every request.
            timeout: HTTP request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._provider_name = provider_name
        self._default_params = dict(default_params or {})
        self._timeout = timeout
        self._logger = structlog.get_logger(f"{provider_name}_api")

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[httpx.Response, ProviderError]:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: URL path relative to base_url.
            headers: Optional HTTP headers (authentication included).
            params: Optional query parameters, merged over the defaults.
            json_data: Optional JSON body for POST/PUT requests.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw HTTP response on success.
            Failure(ProviderUnavailableError): On timeout or connection error.
        """
        url = f"{self._base_url}{path}"
        query = {**self._default_params, **(params or {})}

        self._logger.debug(
            f"{self._provider_name}_api_request_started",
            operation=operation,
            method=method,
            path=path,
        )

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=dict(headers) if headers else None,
                    params=query,
                    json=json_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._provider_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"{self._provider_name.title()} API request timed out",
                    provider_name=self._provider_name,
                    is_transient=True,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._provider_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"Failed to connect to {self._provider_name.title()} API: {e}",
                    provider_name=self._provider_name,
                    is_transient=True,
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[ProviderError] | None:
        """Check HTTP response for errors and return appropriate ProviderError.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Returns:
            Failure(ProviderError) if error detected, None if response is 2xx.
        """
        status = response.status_code

        # Success - no error
        if 200 <= status < 300:
            return None

        payload = _error_payload(response)

        # Rate limiting (429)
        if status == 429:
            retry_after = response.headers.get("Retry-After")
            retry_seconds = int(retry_after) if retry_after and retry_after.isdigit() else None
            self._logger.warning(
                f"{self._provider_name}_api_rate_limited",
                operation=operation,
                retry_after=retry_seconds,
            )
            return Failure(
                error=ProviderRateLimitError(
                    code=ErrorCode.PROVIDER_RATE_LIMITED,
                    message=f"{self._provider_name.title()} API rate limit exceeded",
                    provider_name=self._provider_name,
                    status_code=status,
                    details=payload,
                    retry_after=retry_seconds,
                )
            )

        # Authentication errors (401)
        if status == 401:
            self._logger.warning(
                f"{self._provider_name}_api_auth_failed",
                operation=operation,
            )
            return Failure(
                error=ProviderAuthenticationError(
                    code=ErrorCode.PROVIDER_AUTHENTICATION_FAILED,
                    message=f"{self._provider_name.title()} access token is invalid or expired",
                    provider_name=self._provider_name,
                    status_code=status,
                    details=payload,
                    is_token_expired=True,
                )
            )

        # Forbidden (403)
        if status == 403:
            self._logger.warning(
                f"{self._provider_name}_api_forbidden",
                operation=operation,
            )
            return Failure(
                error=ProviderAuthenticationError(
                    code=ErrorCode.PROVIDER_AUTHENTICATION_FAILED,
                    message=f"Access denied to {self._provider_name.title()} resource",
                    provider_name=self._provider_name,
                    status_code=status,
                    details=payload,
                    is_token_expired=False,
                )
            )

        # Not found (404)
        if status == 404:
            self._logger.warning(
                f"{self._provider_name}_api_not_found",
                operation=operation,
            )
            return Failure(
                error=ProviderInvalidResponseError(
                    code=ErrorCode.PROVIDER_RESOURCE_NOT_FOUND,
                    message=f"{self._provider_name.title()} resource not found",
                    provider_name=self._provider_name,
                    status_code=status,
                    details=payload,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        # Server errors (5xx)
        if status >= 500:
            self._logger.warning(
                f"{self._provider_name}_api_server_error",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"{self._provider_name.title()} API server error: {status}",
                    provider_name=self._provider_name,
                    status_code=status,
                    details=payload,
                    is_transient=True,
                )
            )

        # Unexpected status (400 and friends)
        self._logger.warning(
            f"{self._provider_name}_api_unexpected_status",
            operation=operation,
            status_code=status,
        )
        return Failure(
            error=ProviderInvalidResponseError(
                code=ErrorCode.PROVIDER_INVALID_RESPONSE,
                message=f"Unexpected response from {self._provider_name.title()}: {status}",
                provider_name=self._provider_name,
                status_code=status,
                details=payload,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], ProviderError]:
        """Parse response as JSON object with error handling.

        Args:
            response: HTTP response to parse.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(ProviderError): On HTTP error or invalid JSON.
        """
        # Check for HTTP errors first
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        # Parse JSON
        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                f"{self._provider_name}_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ProviderInvalidResponseError(
                    code=ErrorCode.PROVIDER_INVALID_RESPONSE,
                    message=f"Invalid JSON response from {self._provider_name.title()}",
                    provider_name=self._provider_name,
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        # Validate type
        if not isinstance(data, dict):
            self._logger.warning(
                f"{self._provider_name}_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            return Failure(
                error=ProviderInvalidResponseError(
                    code=ErrorCode.PROVIDER_INVALID_RESPONSE,
                    message=f"Expected object response from {self._provider_name.title()}",
                    provider_name=self._provider_name,
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        self._logger.debug(
            f"{self._provider_name}_api_succeeded",
            operation=operation,
        )
        return Success(value=data)

    async def _execute_and_parse_object(
        self,
        *,
        method: str,
        path: str,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[dict[str, Any], ProviderError]:
        """Execute request and parse response as JSON object.

        Combines _execute_request and _parse_json_object for convenience.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: URL path relative to base_url.
            headers: Optional HTTP headers.
            params: Optional query parameters.
            json_data: Optional JSON body for POST/PUT requests.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(ProviderError): On any error.
        """
        result = await self._execute_request(
            method=method,
            path=path,
            headers=headers,
            params=params,
            json_data=json_data,
            operation=operation,
        )

        if isinstance(result, Failure):
            return result

        return self._parse_json_object(result.value, operation)


def _error_payload(response: httpx.Response) -> dict[str, Any] | None:
    """Return the JSON object body of an error response, if it has one."""
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
