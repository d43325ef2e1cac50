"""
Exception hierarchy for the Watson Workspace client.

This module provides the exceptions raised while building queries, talking to
the GraphQL endpoint and unwrapping responses, plus a small helper that maps
aiohttp failures and HTTP status codes onto them.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, Union

import aiohttp

NO_DATA_MESSAGE = (
    "No data returned from query. Please check the query you are passing and "
    "check for errors returned (result_container.errors instead of the data)"
)

# Statuses worth another attempt besides 5xx and 429
RETRYABLE_STATUSES = frozenset({408, 502, 503, 504})


class WWException(Exception):
    """
    Base exception for all Watson Workspace operations.

    Attributes:
        message: Human-readable error message
        url: Endpoint that caused the error (if applicable)
        details: Additional error details as keyword arguments
    """

    def __init__(self, message: str, url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.details = kwargs


class BuilderError(WWException):
    """Raised when a query builder is given a value it cannot render."""


class NoDataError(WWException):
    """
    Raised when a response does not contain the field being unwrapped.

    Attributes:
        field: The GraphQL field that was expected
        errors: GraphQL errors returned alongside the (missing) data
    """

    def __init__(
        self,
        field: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        message: str = NO_DATA_MESSAGE,
    ) -> None:
        super().__init__(message, field=field)
        self.field = field
        self.errors = errors or []

    def __str__(self) -> str:
        if not self.errors:
            return f"{self.message} [{self.field}]"
        messages = "; ".join(e.get("message", "Unknown error") for e in self.errors)
        return f"{self.message} [{self.field}]: {messages}"


class GraphQLError(WWException):
    """Raised when the endpoint answers with GraphQL errors and no data."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        operation_name: Optional[str] = None,
    ) -> None:
        super().__init__(message, url)
        self.errors = errors or []
        self.operation_name = operation_name


class NetworkError(WWException):
    """The endpoint could not be reached."""


class TimeoutError(WWException):
    """The endpoint did not answer within ``timeout_value`` seconds."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        timeout_value: Optional[float] = None,
    ) -> None:
        super().__init__(message, url)
        self.timeout_value = timeout_value


class ContentError(WWException):
    """The response body is not a GraphQL JSON document."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        content_type: Optional[str] = None,
        response_text: Optional[str] = None,
    ) -> None:
        super().__init__(message, url)
        self.content_type = content_type
        self.response_text = response_text


class HTTPError(WWException):
    """Raised for non-successful HTTP status codes."""

    def __init__(
        self,
        message: str,
        status_code: int,
        url: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        response_text: Optional[str] = None,
    ) -> None:
        super().__init__(message, url)
        self.status_code = status_code
        self.headers = dict(headers or {})
        self.response_text = response_text


class RateLimitError(HTTPError):
    """429 from the endpoint; ``retry_after`` comes from the Retry-After header."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        retry_after: Optional[Union[int, float]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(message, 429, url, headers)
        self.retry_after = retry_after


class AuthenticationError(HTTPError):
    """Missing, expired or insufficient access token (401, 403)."""


class NotFoundError(HTTPError):
    """Raised when the endpoint is not found (404)."""


class ServerError(HTTPError):
    """Raised for server errors (5xx)."""


_STATUS_ERRORS: Dict[int, Tuple[Type[HTTPError], str]] = {
    401: (AuthenticationError, "Authentication required"),
    403: (AuthenticationError, "Access forbidden"),
    404: (NotFoundError, "Endpoint not found"),
}


def _retry_after(headers: Optional[Mapping[str, str]]) -> Optional[float]:
    # Header names are case-insensitive
    value = next(
        (v for k, v in (headers or {}).items() if k.lower() == "retry-after"), None
    )
    try:
        return float(value) if value else None
    except ValueError:
        return None


class ErrorHandler:
    """
    Maps transport failures onto WWException subclasses.

    Also decides whether a failed request is retried and how long to wait.
    """

    @staticmethod
    def handle_aiohttp_error(
        error: Exception, url: Optional[str] = None, timeout_value: Optional[float] = None
    ) -> WWException:
        """
        Convert an aiohttp or asyncio exception.

        Args:
            error: The exception raised while posting
            url: The endpoint being called
            timeout_value: Configured timeout, reported on TimeoutError

        Returns:
            Matching WWException subclass
        """
        if isinstance(error, asyncio.TimeoutError):
            return TimeoutError(f"Request timed out: {error}", url=url, timeout_value=timeout_value)
        if isinstance(error, aiohttp.ClientPayloadError):
            return ContentError(f"Payload error: {error}", url=url)
        if isinstance(error, aiohttp.ClientResponseError):
            return ErrorHandler.handle_http_status_error(
                error.status, error.message, url, error.headers
            )
        if isinstance(error, aiohttp.ClientConnectionError):
            return NetworkError(f"Connection error: {error}", url=url)
        return NetworkError(f"Unexpected network error: {error}", url=url)

    @staticmethod
    def handle_http_status_error(
        status_code: int,
        message: str,
        url: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        response_text: Optional[str] = None,
    ) -> HTTPError:
        """
        Create the HTTPError subclass for a status code.

        Args:
            status_code: HTTP status code
            message: Error message
            url: The endpoint being called
            headers: Response headers
            response_text: Response body text

        Returns:
            Matching HTTPError subclass
        """
        if status_code in _STATUS_ERRORS:
            error_class, prefix = _STATUS_ERRORS[status_code]
            return error_class(f"{prefix}: {message}", status_code, url, headers, response_text)
        if status_code == 429:
            return RateLimitError(
                f"Rate limit exceeded: {message}", url, _retry_after(headers), headers
            )
        if 500 <= status_code < 600:
            return ServerError(f"Server error: {message}", status_code, url, headers, response_text)
        return HTTPError(message, status_code, url, headers, response_text)

    @staticmethod
    def is_retryable_error(error: Exception) -> bool:
        if isinstance(error, (NetworkError, TimeoutError, ServerError, RateLimitError)):
            return True
        return isinstance(error, HTTPError) and error.status_code in RETRYABLE_STATUSES

    @staticmethod
    def get_retry_delay(error: Exception, attempt: int, base_delay: float = 1.0) -> float:
        """
        Seconds to wait before the next attempt.

        Retry-After wins for rate limits; otherwise the delay doubles with
        each attempt (0-based). Non-retryable errors get 0.
        """
        if isinstance(error, RateLimitError) and error.retry_after:
            return float(error.retry_after)
        if ErrorHandler.is_retryable_error(error):
            return base_delay * (2**attempt)
        return 0.0
