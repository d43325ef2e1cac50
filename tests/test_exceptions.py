"""
Tests for the exception hierarchy and error mapping.
"""

import asyncio

import aiohttp
import pytest

from wws_api.exceptions import (
    AuthenticationError,
    BuilderError,
    ContentError,
    ErrorHandler,
    HTTPError,
    NetworkError,
    NoDataError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimeoutError,
    WWException,
)

URL = "https://api.example.com/graphql"


class TestExceptions:
    """Test exception attributes."""

    def test_hierarchy(self):
        """Test every error is a WWException."""
        for cls in (BuilderError, NoDataError, NetworkError, TimeoutError, ContentError, HTTPError):
            assert issubclass(cls, WWException)
        assert issubclass(RateLimitError, HTTPError)
        assert issubclass(AuthenticationError, HTTPError)

    def test_details(self):
        """Test keyword details are kept."""
        error = BuilderError("bad value", attribute="first")

        assert error.message == "bad value"
        assert error.details == {"attribute": "first"}

    def test_no_data_message(self):
        """Test NoDataError text."""
        error = NoDataError("spaces")

        assert str(error).startswith("No data returned from query.")
        assert str(error).endswith("[spaces]")

    def test_no_data_with_errors(self):
        """Test NoDataError includes the GraphQL error messages."""
        error = NoDataError("space", [{"message": "Not found"}, {"message": "Denied"}])

        assert str(error).endswith("[space]: Not found; Denied")


class TestErrorHandler:
    """Test error mapping and retry decisions."""

    @pytest.mark.parametrize(
        "status,expected",
        [
            (401, AuthenticationError),
            (403, AuthenticationError),
            (404, NotFoundError),
            (429, RateLimitError),
            (500, ServerError),
            (503, ServerError),
            (400, HTTPError),
        ],
    )
    def test_status_mapping(self, status, expected):
        """Test HTTP status codes map to error classes."""
        error = ErrorHandler.handle_http_status_error(status, "failed", URL)

        assert type(error) is expected
        assert error.status_code == status
        assert error.url == URL

    def test_retry_after(self):
        """Test Retry-After is parsed."""
        error = ErrorHandler.handle_http_status_error(429, "slow down", URL, {"Retry-After": "7"})

        assert error.retry_after == 7.0
        assert ErrorHandler.get_retry_delay(error, 0) == 7.0

    @pytest.mark.parametrize("name", ["retry-after", "RETRY-AFTER", "Retry-after"])
    def test_retry_after_any_case(self, name):
        """Test the Retry-After header name is matched case-insensitively."""
        error = ErrorHandler.handle_http_status_error(429, "slow down", URL, {name: "7"})

        assert error.retry_after == 7.0

    def test_retry_after_invalid(self):
        """Test an unparseable Retry-After falls back to backoff."""
        error = ErrorHandler.handle_http_status_error(429, "slow down", URL, {"Retry-After": "soon"})

        assert error.retry_after is None
        assert ErrorHandler.get_retry_delay(error, 1, 1.0) == 2.0

    def test_aiohttp_timeout(self):
        """Test timeout mapping."""
        error = ErrorHandler.handle_aiohttp_error(asyncio.TimeoutError(), URL, timeout_value=5.0)

        assert isinstance(error, TimeoutError)
        assert error.timeout_value == 5.0

    def test_aiohttp_connection(self):
        """Test connection failure mapping."""
        error = ErrorHandler.handle_aiohttp_error(aiohttp.ClientConnectionError("refused"), URL)

        assert isinstance(error, NetworkError)
        assert "refused" in error.message

    def test_aiohttp_payload(self):
        """Test payload error mapping."""
        error = ErrorHandler.handle_aiohttp_error(aiohttp.ClientPayloadError("truncated"), URL)

        assert isinstance(error, ContentError)

    def test_retryable(self):
        """Test which errors are retried."""
        assert ErrorHandler.is_retryable_error(NetworkError("down"))
        assert ErrorHandler.is_retryable_error(ServerError("oops", 500))
        assert ErrorHandler.is_retryable_error(HTTPError("timeout", 408))
        assert not ErrorHandler.is_retryable_error(AuthenticationError("no", 401))
        assert not ErrorHandler.is_retryable_error(HTTPError("bad", 400))
        assert not ErrorHandler.is_retryable_error(NoDataError("spaces"))

    def test_backoff(self):
        """Test exponential backoff."""
        error = NetworkError("down")

        assert ErrorHandler.get_retry_delay(error, 0, 1.0) == 1.0
        assert ErrorHandler.get_retry_delay(error, 2, 1.0) == 4.0
        assert ErrorHandler.get_retry_delay(HTTPError("bad", 400), 1) == 0.0
