"""Async HTTP client with rate-limit handling."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from typing import Any

import aiohttp

from ...core.config import DEFAULT_RETRY_SECONDS, DEFAULT_TIMEOUT, RATE_LIMIT_RESET_HEADER
from ...core.exceptions import ProviderError, RateLimitError
from ...telemetry import log_rate_limited

QueryParams = Mapping[str, Any] | Sequence[tuple[str, str]]


class HTTPClient:
    """Async HTTP client wrapper.

    Rate-limited responses (429) are retried after the number of seconds the
    API asks for, but only when the caller passed a ``deadline`` (event-loop
    time) and the retry would start before it. Otherwise ``RateLimitError``
    is raised immediately.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(
        self,
        url: str,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        deadline: float | None = None,
    ) -> Any:
        """GET request returning the decoded JSON body."""
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"
        request_headers = {**self.headers, **(headers or {})}

        while True:
            try:
                async with self.session.get(
                    url, params=params, headers=request_headers
                ) as response:
                    if response.status == 429:
                        wait = retry_after(response)
                        will_retry = _can_retry(wait, deadline)
                        log_rate_limited(url=url, retry_after=wait, will_retry=will_retry)
                        if not will_retry:
                            raise RateLimitError(retry_after=wait)
                    else:
                        return await _read_json(response)
            except aiohttp.ClientError as e:
                raise ProviderError(f"request to {url} failed: {e}") from e

            await asyncio.sleep(wait)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def retry_after(response: Any) -> int:
    """Seconds to wait before retrying a rate-limited response.

    Falls back to ``DEFAULT_RETRY_SECONDS`` when the reset header is missing
    or not an integer.
    """
    header = None
    if response is not None:
        header = response.headers.get(RATE_LIMIT_RESET_HEADER)
    try:
        seconds = int(header)
    except (TypeError, ValueError):
        return DEFAULT_RETRY_SECONDS
    return max(seconds, 0)


def _can_retry(wait: int, deadline: float | None) -> bool:
    if deadline is None:
        return False
    return asyncio.get_running_loop().time() + wait < deadline


async def _read_json(response: Any) -> Any:
    if response.status != 200:
        raise ProviderError(f"non-ok status code: {response.status}", status_code=response.status)
    try:
        data = await response.json(content_type=None)
    except ValueError as e:
        raise ProviderError("could not decode response body", status_code=response.status) from e
    if data is None:
        raise ProviderError("empty response body", status_code=response.status)
    return data
