from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from akeneo_client import AkeneoConfig
from tests.helpers import TOKEN_PAYLOAD, create_response


@pytest.fixture
def config() -> AkeneoConfig:
    """Create the connection settings of a test PIM."""
    return AkeneoConfig(
        host="my-test-host",
        username="john.doe",
        password="abcd3fgh1jk",
        oauth_client_id="clientId1",
        oauth_client_secret="clientSecret1",
    )


@pytest.fixture
def token_response() -> httpx.Response:
    """Create a valid token endpoint response."""
    return create_response(
        "POST", "https://my-test-host/api/oauth/v1/token", status_code=200, json=TOKEN_PAYLOAD
    )


@pytest.fixture
def mock_client() -> httpx.Client:
    """Create a mock httpx.Client for testing."""
    return Mock(spec=httpx.Client)


@pytest.fixture
def mock_async_client() -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient for testing."""
    return Mock(
        spec=httpx.AsyncClient,
        get=AsyncMock(),
        post=AsyncMock(),
        patch=AsyncMock(),
        aclose=AsyncMock(),
    )
