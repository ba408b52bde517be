"""
HTTP transport for HLTV pages, built on httpx.

The client does no retries. Its only policy is an optional minimum delay
between consecutive requests, since HLTV sits behind Cloudflare and bans
clients that hammer it.
"""

from __future__ import annotations

import asyncio
import time
from typing import Optional

import httpx
import structlog

from ..config.config import ClientConfig
from ..exceptions import TransportError
from ..observability.metrics import METRICS

logger = structlog.get_logger(__name__)


class HltvHttpClient:
    """Async page fetcher implementing ``PageFetcher``."""

    def __init__(self, config: Optional[ClientConfig] = None, client: Optional[httpx.AsyncClient] = None) -> None:
        """
        Args:
            config: Transport settings; defaults to ``ClientConfig()``.
            client: An optional pre-built httpx.AsyncClient. A client passed in
                    here is not closed by ``close()``.
        """
        self.config = config or ClientConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers={"User-Agent": self.config.user_agent},
            timeout=self.config.timeout,
            follow_redirects=self.config.follow_redirects,
        )
        self._throttle_lock = asyncio.Lock()
        self._last_request_at: Optional[float] = None

    def url_for(self, path: str) -> str:
        return f"{self.config.base_url}{path}"

    async def _wait_turn(self) -> None:
        delay = self.config.request_delay
        if delay <= 0:
            return
        async with self._throttle_lock:
            now = time.monotonic()
            if self._last_request_at is not None:
                remaining = self._last_request_at + delay - now
                if remaining > 0:
                    logger.debug("Throttling request", sleep_seconds=round(remaining, 3))
                    await asyncio.sleep(remaining)
            self._last_request_at = time.monotonic()

    async def fetch(self, path: str) -> str:
        """Fetch ``path`` relative to the configured base URL and return its text."""
        url = self.url_for(path)
        await self._wait_turn()

        start_time = time.monotonic()
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Request failed", url=url, error=str(e), error_type=type(e).__name__)
            raise TransportError(url, message=str(e) or type(e).__name__) from e
        finally:
            METRICS["fetch_duration_seconds"].observe(time.monotonic() - start_time)

        if not response.is_success:
            logger.warning("Unexpected status", url=url, status_code=response.status_code)
            raise TransportError(url, response.status_code)

        logger.debug("Fetched page", url=url, status_code=response.status_code, size=len(response.content))
        return response.text

    async def close(self) -> None:
        """Close the underlying httpx client if it was created here."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> HltvHttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
