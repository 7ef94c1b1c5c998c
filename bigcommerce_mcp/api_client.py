"""BigCommerce API Client.

Thin HTTP client for the BigCommerce v2 and v3 REST APIs of one store.
This module handles authentication headers, error classification and
response decoding. It never retries.
"""

from typing import Any

import httpx
import structlog

from bigcommerce_mcp.config import Settings
from bigcommerce_mcp.exceptions import BigCommerceAPIError, BigCommerceRequestError

logger = structlog.get_logger()

DEFAULT_API_HOST = "api.bigcommerce.com"


class BigCommerceAPIClient:
    """HTTP client for the BigCommerce REST API.

    Provides GET/POST/PUT helpers bound to the v3 and v2 base URLs of a
    single store. Non-2xx responses raise ``BigCommerceAPIError``.
    """

    def __init__(
        self,
        access_token: str,
        store_hash: str,
        api_host: str = DEFAULT_API_HOST,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            access_token: Store API account access token.
            store_hash: Store hash identifying the store.
            api_host: BigCommerce API host.
            timeout: Request timeout in seconds, or None for no timeout.
            transport: Optional httpx transport (used by tests).
        """
        self.access_token = access_token
        self.store_hash = store_hash
        self.base_url_v3 = f"https://{api_host}/stores/{store_hash}/v3"
        self.base_url_v2 = f"https://{api_host}/stores/{store_hash}/v2"
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "BigCommerceAPIClient":
        """Build a client from server settings."""
        return cls(
            access_token=settings.bigcommerce_access_token,
            store_hash=settings.bigcommerce_store_hash,
            api_host=settings.bigcommerce_api_host,
            timeout=settings.bigcommerce_request_timeout,
        )

    @property
    def default_headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            "X-Auth-Token": self.access_token,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.default_headers,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        url: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make an API request.

        Args:
            method: HTTP method.
            url: Absolute endpoint URL.
            json: Request body, serialized as JSON.
            params: Query parameters; None values are dropped.
            headers: Per-call headers overriding the defaults.

        Returns:
            Decoded JSON body, or ``{"success": True}`` for empty responses.

        Raises:
            BigCommerceAPIError: On a non-2xx response.
            BigCommerceRequestError: When no response was received.
        """
        client = await self._get_client()

        # Filter out None params
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        logger.debug(
            "Making BigCommerce request",
            method=method,
            url=url,
            params=params or None,
            has_body=json is not None,
        )

        try:
            response = await client.request(
                method=method,
                url=url,
                json=json,
                params=params or None,
                headers=headers,
            )
        except httpx.RequestError as e:
            logger.error("BigCommerce request failed", method=method, url=url, error=str(e))
            raise BigCommerceRequestError(method, url, str(e)) from e

        if not response.is_success:
            logger.warning(
                "BigCommerce API error",
                method=method,
                url=url,
                status_code=response.status_code,
            )
            raise BigCommerceAPIError(
                status_code=response.status_code,
                status_text=response.reason_phrase,
                body=response.text,
            )

        # Handle empty responses (204 No Content)
        if response.status_code == 204 or not response.content:
            return {"success": True}

        return response.json()

    # =========================================================================
    # v3 Endpoints
    # =========================================================================

    async def get_v3(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET a v3 endpoint."""
        return await self._request(
            method="GET",
            url=f"{self.base_url_v3}{path}",
            params=params,
            headers=headers,
        )

    async def post_v3(
        self,
        path: str,
        data: Any,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST a JSON body to a v3 endpoint."""
        return await self._request(
            method="POST",
            url=f"{self.base_url_v3}{path}",
            json=data,
            headers=headers,
        )

    async def put_v3(
        self,
        path: str,
        data: Any,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """PUT a JSON body to a v3 endpoint."""
        return await self._request(
            method="PUT",
            url=f"{self.base_url_v3}{path}",
            json=data,
            headers=headers,
        )

    # =========================================================================
    # v2 Endpoints
    # =========================================================================

    async def get_v2(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET a v2 endpoint."""
        return await self._request(
            method="GET",
            url=f"{self.base_url_v2}{path}",
            params=params,
            headers=headers,
        )

    async def put_v2(
        self,
        path: str,
        data: Any,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """PUT a JSON body to a v2 endpoint."""
        return await self._request(
            method="PUT",
            url=f"{self.base_url_v2}{path}",
            json=data,
            headers=headers,
        )
