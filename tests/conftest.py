"""Pytest configuration and fixtures for MCP server tests."""

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from bigcommerce_mcp.api_client import BigCommerceAPIClient
from bigcommerce_mcp.tools import BigCommerceTools


@pytest.fixture
def mock_api_client() -> MagicMock:
    """Create a mock BigCommerce API client."""
    client = MagicMock(spec=BigCommerceAPIClient)

    # Make all methods async
    client.get_v3 = AsyncMock(return_value={"data": []})
    client.get_v2 = AsyncMock(return_value=[])
    client.post_v3 = AsyncMock(return_value={"data": {"id": 1}})
    client.put_v3 = AsyncMock(return_value={"data": {"id": 1}})
    client.put_v2 = AsyncMock(return_value={})
    client.close = AsyncMock()

    return client


@pytest.fixture
def mcp_tools(mock_api_client: MagicMock) -> BigCommerceTools:
    """Create BigCommerceTools instance with a mocked client."""
    return BigCommerceTools(api_client=mock_api_client)


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def make_client(
    recorded_requests: list[httpx.Request],
) -> Callable[..., BigCommerceAPIClient]:
    """Build an API client whose transport answers with a fixed response."""

    def _make(
        status_code: int = 200,
        json: object | None = None,
        text: str | None = None,
    ) -> BigCommerceAPIClient:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if json is not None:
                return httpx.Response(status_code, json=json)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code)

        return BigCommerceAPIClient(
            access_token="test-token",
            store_hash="abc123",
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory so no local .env file is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
