"""Airbnb batch API client.

Endpoint:
    POST /v2/batch - Run several sub-operations in one request

Request body:
    {
        "operations": [{"method": "GET", "path": "/calendar_days", "query": {...}}, ...],
        "_transaction": false
    }

Response body:
    {"operations": [{"response": {...}}, ...]}

Sub-operation responses come back in request order.
"""

from collections.abc import Sequence
from typing import Any

from airbnbapi.core.constants import RESPONSE_BODY_MAX_LENGTH
from airbnbapi.core.enums import ErrorCode
from airbnbapi.core.result import Failure, Result, Success
from airbnbapi.domain.errors import ProviderError, ProviderInvalidResponseError
from airbnbapi.domain.value_objects import BatchOperation
from airbnbapi.infrastructure.providers.airbnb.api.base import AirbnbAPIClient
from airbnbapi.infrastructure.providers.airbnb.headers import make_auth_header


class AirbnbBatchAPI(AirbnbAPIClient):
    """HTTP client for the Airbnb batch endpoint."""

    async def execute(
        self,
        access_token: str,
        operations: Sequence[BatchOperation],
        *,
        transaction: bool | None = False,
    ) -> Result[list[dict[str, Any]], ProviderError]:
        """Send a batch of sub-operations.

        Args:
            access_token: Valid access token.
            operations: Sub-operations, in the order responses are wanted.
            transaction: Value of the ``_transaction`` flag; None leaves the
                flag out of the body.

        Returns:
            Success(list[dict]): One entry per sub-operation.
            Failure(ProviderError): On HTTP error or malformed response.
        """
        operation = "batch"
        body: dict[str, Any] = {"operations": [op.to_dict() for op in operations]}
        if transaction is not None:
            body["_transaction"] = transaction

        result = await self._execute_and_parse_object(
            method="POST",
            path="/v2/batch",
            headers=make_auth_header(access_token, user_agent=self._user_agent),
            json_data=body,
            operation=operation,
        )
        if isinstance(result, Failure):
            return result

        responses = result.value.get("operations")
        if not isinstance(responses, list):
            self._logger.warning(
                "airbnb_api_batch_missing_operations",
                operation=operation,
            )
            return Failure(
                error=ProviderInvalidResponseError(
                    code=ErrorCode.PROVIDER_INVALID_RESPONSE,
                    message="Airbnb batch response has no operations list",
                    provider_name=self._provider_name,
                    details=result.value,
                    response_body=str(result.value)[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        self._logger.debug(
            "airbnb_api_batch_succeeded",
            operation=operation,
            count=len(responses),
        )
        return Success(value=responses)
