# ABOUTME: Async HTTP client abstraction for metadata provider API calls.
# ABOUTME: Maps transport and HTTP outcomes onto provider errors; injectable transport for testing.

import asyncio
import logging
import time
from typing import Any, Protocol, runtime_checkable
from urllib.parse import urlparse

import httpx

from bookrecon.metadata.errors import (
    MalformedResponseError,
    NotFoundError,
    RateLimitedError,
    UnreachableError,
)

logger = logging.getLogger(__name__)

USER_AGENT = "bookrecon/0.1.0"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against metadata APIs and pages."""

    async def get_json(self, url: str, params: dict[str, str] | None = None) -> Any: ...

    async def get_text(self, url: str, params: dict[str, str] | None = None) -> str: ...


class ReconHttpClient:
    """HTTP client with per-host request spacing for metadata API calls.

    Wraps httpx.AsyncClient. Requests to the same host are spaced at least
    ``min_request_interval`` apart; requests to different hosts are never
    serialized. Failures are raised as ProviderError subclasses and are
    never retried here.
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        min_request_interval: float = 0.1,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": USER_AGENT},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)
        self._min_interval = min_request_interval
        self._host_locks: dict[str, asyncio.Lock] = {}
        self._last_request_time: dict[str, float] = {}

    async def __aenter__(self) -> "ReconHttpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_json(self, url: str, params: dict[str, str] | None = None) -> Any:
        """Send a GET request and decode the JSON body.

        Raises:
            NotFoundError: On HTTP 404.
            RateLimitedError: On HTTP 429.
            UnreachableError: On transport errors, timeouts, or any other non-200 status.
            MalformedResponseError: If the body is not valid JSON.
        """
        response = await self._get(url, params)
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"Invalid JSON from {url}: {exc}") from exc

    async def get_text(self, url: str, params: dict[str, str] | None = None) -> str:
        """Send a GET request and return the decoded text body."""
        response = await self._get(url, params)
        return response.text

    async def _get(self, url: str, params: dict[str, str] | None) -> httpx.Response:
        await self._rate_limit(url)
        logger.debug("GET %s params=%s", url, params)
        try:
            response = await self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise UnreachableError(f"Request failed: {url}: {exc}") from exc

        status = response.status_code
        if status == 200:
            return response
        if status == 404:
            raise NotFoundError(f"HTTP 404 from {url}")
        if status == 429:
            raise RateLimitedError(f"HTTP 429 from {url}")
        raise UnreachableError(f"HTTP {status} from {url}")

    async def _rate_limit(self, url: str) -> None:
        """Sleep if needed to keep the minimum interval between requests to one host."""
        if self._min_interval <= 0:
            return
        host = urlparse(url).netloc
        lock = self._host_locks.setdefault(host, asyncio.Lock())
        async with lock:
            last = self._last_request_time.get(host, 0.0)
            elapsed = time.monotonic() - last
            if last > 0 and elapsed < self._min_interval:
                await asyncio.sleep(self._min_interval - elapsed)
            self._last_request_time[host] = time.monotonic()
