"""
GraphQL client implementation.

This module provides the HTTP transport for the Watson Workspace GraphQL
endpoint: it posts rendered operations, maps transport failures onto the
wws_api exception hierarchy and retries the ones worth retrying.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any, Dict, Optional, Union

import aiohttp

from ..config.models import WWSConfig
from ..exceptions import (
    ContentError,
    ErrorHandler,
    GraphQLError,
    WWException,
)
from .models import GraphQLRequest, GraphQLResult
from .queries import BaseGraphQLQuery

logger = logging.getLogger(__name__)

Operation = Union[BaseGraphQLQuery, GraphQLRequest]


class GraphQLClient:
    """
    Async client for the Watson Workspace GraphQL endpoint.

    The access token is supplied by the caller and sent as a bearer token;
    obtaining and refreshing it is left to the application.

    Examples:
        ```python
        async with GraphQLClient(WWSConfig(), token=access_token) as client:
            query = SpacesGraphQLQuery.build_standard_get_spaces_query()
            result = await client.execute(query)
            spaces = result.get_data("spaces.items")
        ```
    """

    def __init__(self, config: Optional[WWSConfig] = None, token: Optional[str] = None):
        """
        Initialize GraphQL client.

        Args:
            config: Client configuration
            token: Access token sent as ``Authorization: Bearer <token>``
        """
        self.config = config or WWSConfig()
        self.token = token
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> GraphQLClient:
        """Async context manager entry."""
        await self._create_session()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    @property
    def endpoint(self) -> str:
        return str(self.config.endpoint)

    def set_token(self, token: Optional[str]) -> None:
        self.token = token

    async def _create_session(self) -> None:
        """Create the HTTP session if there is none."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    def _headers(self) -> Dict[str, str]:
        headers = self.config.headers.copy()
        headers["Content-Type"] = "application/json"
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _to_request(self, operation: Operation) -> GraphQLRequest:
        if isinstance(operation, GraphQLRequest):
            return operation
        return operation.to_request(pretty=self.config.pretty_queries)

    async def execute(self, operation: Operation) -> GraphQLResult:
        """
        Execute a GraphQL query or mutation.

        Args:
            operation: Pre-built query/mutation object or raw request

        Returns:
            GraphQLResult with the decoded response

        Raises:
            GraphQLError: If the response carries errors and no data
            HTTPError: For non-successful HTTP statuses
            NetworkError: For connection failures
            TimeoutError: When the request times out
        """
        request = self._to_request(operation)
        await self._create_session()

        logger.debug("Executing %s %s", request.operation_type.value, request.operation_name)
        result = await self._execute_with_retry(request)

        if result.has_errors:
            logger.warning(
                "GraphQL errors returned for %s: %s",
                request.operation_name,
                "; ".join(result.error_messages),
            )
            if result.data is None:
                raise GraphQLError(
                    f"GraphQL execution errors: {'; '.join(result.error_messages)}",
                    url=self.endpoint,
                    errors=result.errors,
                    operation_name=request.operation_name,
                )

        return result

    async def _execute_with_retry(self, request: GraphQLRequest) -> GraphQLResult:
        """Execute request, retrying retryable failures with backoff."""
        attempt = 0

        while True:
            try:
                return await self._execute_internal(request)
            except WWException as e:
                if attempt >= self.config.max_retries or not ErrorHandler.is_retryable_error(e):
                    raise

                delay = ErrorHandler.get_retry_delay(e, attempt, self.config.retry_delay)
                logger.warning(
                    "Request %s failed (%s), retrying in %.1fs (attempt %d of %d)",
                    request.operation_name,
                    e.message,
                    delay,
                    attempt + 1,
                    self.config.max_retries,
                )
                if delay > 0:
                    await asyncio.sleep(delay)
                attempt += 1

    async def _execute_internal(self, request: GraphQLRequest) -> GraphQLResult:
        """Post one request and decode the response."""
        if self._session is None:
            raise WWException("HTTP session is not initialized")

        start_time = time.time()
        try:
            async with self._session.post(
                self.endpoint, json=request.to_dict(), headers=self._headers()
            ) as response:
                response_text = await response.text()
                status = response.status
                headers = dict(response.headers)
                content_type = response.content_type
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ErrorHandler.handle_aiohttp_error(
                e, url=self.endpoint, timeout_value=self.config.timeout
            ) from e
        response_time = time.time() - start_time

        if status >= 400:
            raise ErrorHandler.handle_http_status_error(
                status,
                f"HTTP {status} from GraphQL endpoint",
                self.endpoint,
                headers,
                response_text,
            )

        try:
            response_data = json.loads(response_text)
        except json.JSONDecodeError as e:
            raise ContentError(
                f"Invalid JSON response: {response_text[:200]}",
                url=self.endpoint,
                content_type=content_type,
                response_text=response_text,
            ) from e

        if not isinstance(response_data, dict):
            raise ContentError(
                "Expected a JSON object response",
                url=self.endpoint,
                content_type=content_type,
                response_text=response_text,
            )

        logger.debug(
            "%s completed in %.3fs with status %d", request.operation_name, response_time, status
        )

        return GraphQLResult(
            success="errors" not in response_data,
            data=response_data.get("data"),
            errors=response_data.get("errors") or [],
            extensions=response_data.get("extensions"),
            response_time=response_time,
            status_code=status,
            headers=headers,
            raw_response=response_text,
        )

