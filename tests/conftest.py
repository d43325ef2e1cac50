"""
Shared test fixtures and configuration for the wws_api test suite.
"""

import pytest

from wws_api import GraphQLClient, WWGraphQLEndpoint, WWSConfig

ENDPOINT = "https://api.example.com/graphql"


@pytest.fixture
def test_config() -> WWSConfig:
    """Client configuration pointing at a mocked endpoint, no retry delay."""
    return WWSConfig(endpoint=ENDPOINT, max_retries=2, retry_delay=0.0, timeout=5.0)


@pytest.fixture
def client(test_config: WWSConfig) -> GraphQLClient:
    """Client with a test access token."""
    return GraphQLClient(test_config, token="test-access-token")


@pytest.fixture
def endpoint(client: GraphQLClient) -> WWGraphQLEndpoint:
    return WWGraphQLEndpoint(client)


@pytest.fixture
def person_payload() -> dict:
    return {
        "id": "person-1",
        "displayName": "Paul Withers",
        "email": "paul@example.com",
        "photoUrl": "https://example.com/photo.png",
        "created": "2016-09-01T12:00:00.000Z",
    }
