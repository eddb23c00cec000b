"""
HTTP Utilities

The platform API client used by the worker and the shared success check for
platform responses.
"""

import logging
import time
from typing import Dict, Optional

import httpx

from report_worker.core.config import Settings
from report_worker.core.constants import HTTP_ERROR_THRESHOLD
from report_worker.core.metrics import (
    platform_api_duration_seconds,
    platform_api_errors_total,
    platform_api_requests_total,
)

logger = logging.getLogger(__name__)


def is_success_status(status_code: int) -> bool:
    """Xray answers 200 for most calls, but any status below 400 counts as success."""
    return status_code == 200 or status_code < HTTP_ERROR_THRESHOLD


class PlatformClient:
    """
    Authenticated client for the JFrog Platform REST API.

    Wraps httpx.AsyncClient, resolves paths against the platform URL and
    records request metrics.

    Usage:
        async with PlatformClient("https://acme.jfrog.io", access_token=token) as client:
            response = await client.post("/xray/api/v1/reports/violations", json=payload)
    """

    def __init__(
        self,
        base_url: str,
        access_token: Optional[str] = None,
        timeout: float = 30.0,
        **kwargs,
    ):
        self.base_url = base_url.rstrip("/")
        self._access_token = access_token
        self._timeout = timeout
        self._kwargs = kwargs
        self._client: Optional[httpx.AsyncClient] = None
        self._NOT_STARTED_MSG = "Client not started. Use 'async with' or call start()."

    @classmethod
    def from_settings(cls, source: Settings, **kwargs) -> "PlatformClient":
        return cls(
            source.PLATFORM_URL,
            access_token=source.PLATFORM_ACCESS_TOKEN or None,
            timeout=source.PLATFORM_TIMEOUT_SECONDS,
            **kwargs,
        )

    def _default_headers(self) -> Dict[str, str]:
        if not self._access_token:
            return {}
        return {"Authorization": f"Bearer {self._access_token}"}

    async def start(self) -> None:
        """Start the underlying client (for long-lived usage)."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._default_headers(),
                timeout=self._timeout,
                **self._kwargs,
            )

    async def close(self) -> None:
        """Close the underlying client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "PlatformClient":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def post(self, path: str, **kwargs) -> httpx.Response:
        """Make a POST request with metrics."""
        return await self.request("POST", path, **kwargs)

    async def delete(self, path: str, **kwargs) -> httpx.Response:
        """Make a DELETE request with metrics."""
        return await self.request("DELETE", path, **kwargs)

    async def request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Make an arbitrary HTTP request with metrics."""
        if self._client is None:
            raise RuntimeError(self._NOT_STARTED_MSG)

        start_time = time.time()
        platform_api_requests_total.labels(method=method).inc()
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            platform_api_errors_total.labels(method=method).inc()
            logger.debug(f"{method} {path} failed: {e}")
            raise
        platform_api_duration_seconds.labels(method=method).observe(time.time() - start_time)
        return response
