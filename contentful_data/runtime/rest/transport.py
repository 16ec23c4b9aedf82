"""REST transport bound to one API base URL."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...core.config import DEFAULT_TIMEOUT
from .http_client import HTTPClient, QueryParams


class RESTTransport:
    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, headers=headers)

    async def get(
        self,
        path: str,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        deadline: float | None = None,
    ) -> Any:
        return await self._http.get(path, params=params, headers=headers, deadline=deadline)

    async def close(self) -> None:
        await self._http.close()
