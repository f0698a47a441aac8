"""Base HTTP client for calls to external services."""

import logging
from typing import Any, Dict, Optional
import httpx

from exceptions import InternalError

logger = logging.getLogger(__name__)


class ServiceClient:
    """Base client for communicating with an external HTTP service.

    Features:
    - Async HTTP client using httpx, shared across requests
    - Headers passed per request, never stored on the shared client
    - Single attempt per call; transport failures become InternalError
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 100.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize service client.

        Args:
            base_url: Base URL of the service (e.g., https://llm.example.com)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to stub the network)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "ServiceClient":
        """Async context manager entry."""
        _ = self.client
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            )
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send one HTTP request and return the response whatever its status.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API endpoint path (e.g., /v1/chat/completions)
            headers: Headers for this request only
            json: Optional JSON body

        Returns:
            HTTP response

        Raises:
            InternalError: If the request could not be sent or timed out
        """
        try:
            response = await self.client.request(
                method=method,
                url=path,
                headers=headers,
                json=json,
            )
        except httpx.TimeoutException as e:
            logger.error(f"Timeout calling {self.base_url}{path}: {str(e)}")
            raise InternalError(
                service_name=self._get_service_name(),
                details={"reason": "timeout"},
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Network error calling {self.base_url}{path}: {str(e)}")
            raise InternalError(
                service_name=self._get_service_name(),
                details={"reason": "network"},
            ) from e

        logger.debug(f"{method} {self.base_url}{path} - Status: {response.status_code}")
        return response

    def _get_service_name(self) -> str:
        """Extract service name from base URL."""
        # Extract host from URL like https://llm-api.example.com:443
        return self.base_url.split("//")[-1].split(":")[0].split("/")[0]

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
