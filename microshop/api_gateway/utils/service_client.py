"""
Backend Service HTTP Client
Forwards gateway requests to a resource service

Connection pooling follows the usual httpx pattern:
- Single shared AsyncClient initialized at app startup
- Limits to prevent connection exhaustion
- A whole-request deadline so a hung backend cannot block the gateway
"""

import asyncio
from typing import Any, Dict, Optional, Sequence, Tuple

import httpx
import structlog

from microshop.shared.utils.errors import UpstreamError
from microshop.api_gateway.config import settings

logger = structlog.get_logger(__name__)


class ServiceClient:
    """
    HTTP client for one backend service.

    Lifecycle:
        - Call start() during app startup (FastAPI lifespan)
        - Call stop() during app shutdown
        - If not started, falls back to a per-request client
    """

    def __init__(
        self,
        name: str,
        base_url: str,
        timeout: float = 10.0,
        connect_timeout: float = 5.0,
        max_connections: int = 100,
        max_keepalive_connections: int = 20,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.name = name
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.connect_timeout = connect_timeout
        self.max_connections = max_connections
        self.max_keepalive_connections = max_keepalive_connections
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _build_client(self) -> httpx.AsyncClient:
        limits = httpx.Limits(
            max_connections=self.max_connections,
            max_keepalive_connections=self.max_keepalive_connections
        )
        timeout = httpx.Timeout(self.timeout, connect=self.connect_timeout)
        return httpx.AsyncClient(
            base_url=self.base_url,
            limits=limits,
            timeout=timeout,
            transport=self.transport
        )

    async def start(self):
        """Initialize the shared HTTP client"""
        if self._client is not None:
            logger.warning("Service client already started", backend=self.name)
            return

        self._client = self._build_client()
        logger.info(
            "Service client started",
            backend=self.name,
            base_url=self.base_url,
            timeout=self.timeout
        )

    async def stop(self):
        """Close the HTTP client and release resources"""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Service client stopped", backend=self.name)

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        if self._client:
            return await self._client.request(method, path, **kwargs)

        logger.warning("Service client not started, using per-request client", backend=self.name)
        async with self._build_client() as client:
            return await client.request(method, path, **kwargs)

    async def forward(
        self,
        method: str,
        path: str,
        params: Sequence[Tuple[str, str]] = (),
        content: Optional[bytes] = None
    ) -> Tuple[int, Any]:
        """
        Send a request to the backend and return its status and JSON body

        Raises:
            UpstreamError: connection failure, timeout, non-JSON body or a
                status of 400 and above
        """
        headers: Dict[str, str] = {"Accept": "application/json"}
        if content:
            headers["Content-Type"] = "application/json"

        try:
            response = await asyncio.wait_for(
                self._send(method, path, params=list(params), content=content or None, headers=headers),
                timeout=self.timeout
            )
        except asyncio.TimeoutError:
            raise UpstreamError(f"{self.name} service did not respond within {self.timeout}s")
        except httpx.HTTPError as e:
            raise UpstreamError(str(e) or type(e).__name__) from e

        if response.status_code >= 400:
            raise UpstreamError(
                f"Request failed with status code {response.status_code}",
                upstream_status=response.status_code
            )

        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamError(f"Invalid JSON response from {self.name} service") from e

        return response.status_code, body


service_clients: Dict[str, ServiceClient] = {
    "users": ServiceClient(
        "users",
        settings.users_service_url,
        timeout=settings.proxy_timeout,
        connect_timeout=settings.connect_timeout,
        max_connections=settings.max_connections,
        max_keepalive_connections=settings.max_keepalive_connections
    ),
    "products": ServiceClient(
        "products",
        settings.products_service_url,
        timeout=settings.proxy_timeout,
        connect_timeout=settings.connect_timeout,
        max_connections=settings.max_connections,
        max_keepalive_connections=settings.max_keepalive_connections
    ),
}
