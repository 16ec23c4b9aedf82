"""High-level Content Delivery API client.

Architecture:
    ``ContentfulClient`` is the facade callers use. It runs the entries
    endpoint through the REST runtime, checks the result count, flattens the
    response and loads it into the caller's type:

        search -> count check -> self-injection + flattening -> materialize

Design Decisions:
    - Per-call deadline: ``timeout`` bounds the request and decides whether a
      rate-limited request may be retried
    - Errors propagate: every failure reaches the caller after being logged
    - Typed results: ``target`` accepts anything pydantic can validate

Example:
    >>> class Page(Information):
    ...     title: str
    ...     banner: Asset | None = None
    ...     sub_pages: list[Page] = Field(default_factory=list, alias="subPages")
    >>> async with ContentfulClient(token, space_id) as cms:
    ...     pages = await cms.get_many(
    ...         SearchParameters().by_content_type("page"), list[Page], timeout=10
    ...     )
"""

from __future__ import annotations

import asyncio
import time
from typing import Any

from ..connectors.contentful import entries
from ..core.config import DEFAULT_TIMEOUT, ContentfulConfig, get_base_url
from ..core.exceptions import ContentfulError, MoreThanOneEntryError, NoEntriesError
from ..flatten import flatten_search_results, materialize
from ..models import SearchResults
from ..runtime.rest import RestRunner, RESTTransport
from ..telemetry import (
    log_flatten_completed,
    log_request_error,
    log_search_completed,
    log_search_started,
)
from .parameters import SearchParameters


class ContentfulClient:
    """Client for fetching flattened entries from one space."""

    def __init__(
        self,
        token: str,
        space_id: str,
        preview: bool = False,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_depth: int | None = None,
        base_url: str | None = None,
    ) -> None:
        """Initialize client.

        Args:
            token: Delivery or preview API access token
            space_id: Space ID
            preview: Use the preview API, which also returns draft content
            timeout: Total HTTP timeout for a single request in seconds
            max_depth: Optional limit on nested reference resolution
            base_url: Override the API base URL
        """
        self.token = token
        self.space_id = space_id
        self.preview = preview
        self.max_depth = max_depth
        self.base_url = base_url or get_base_url(preview)
        self._transport = RESTTransport(base_url=self.base_url, timeout=timeout)
        self._runner = RestRunner(self._transport)
        self._adapter = entries.Adapter()

    @classmethod
    def from_config(cls, config: ContentfulConfig, **kwargs: Any) -> ContentfulClient:
        return cls(
            config.token,
            config.space_id,
            config.preview,
            timeout=config.timeout,
            **kwargs,
        )

    async def search(
        self,
        parameters: SearchParameters | None = None,
        *,
        timeout: float | None = None,
    ) -> SearchResults:
        """Run an entries search and return the raw, unflattened response.

        Args:
            parameters: Query parameters, ``include`` is added if missing
            timeout: Deadline for the call in seconds. Without it, a
                rate-limited request fails with RateLimitError instead of
                being retried.

        Raises:
            ProviderError: Non-200 response or undecodable body
            RateLimitError: Rate limited and no retry possible before deadline
            TimeoutError: Deadline passed
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout
        params = {
            "space_id": self.space_id,
            "token": self.token,
            "parameters": parameters or SearchParameters(),
        }
        log_search_started(
            endpoint_id=entries.SPEC.id,
            path=entries.SPEC.build_path(params),
            query=dict(entries.build_query(params)),
        )

        start = time.perf_counter()
        try:
            async with asyncio.timeout_at(deadline):
                results: SearchResults = await self._runner.run(
                    spec=entries.SPEC,
                    adapter=self._adapter,
                    params=params,
                    deadline=deadline,
                )
        except (ContentfulError, TimeoutError) as e:
            log_request_error(operation="search", error=e)
            raise

        log_search_completed(
            endpoint_id=entries.SPEC.id,
            total=results.total,
            items=len(results.items),
            latency_ms=(time.perf_counter() - start) * 1000,
        )
        return results

    async def get_many(
        self,
        parameters: SearchParameters | None = None,
        target: Any = list[dict[str, Any]],
        *,
        timeout: float | None = None,
    ) -> Any:
        """Fetch entries, flatten them and load them into ``target``.

        ``target`` must be list-shaped, e.g. ``list[Page]``.

        Raises:
            NoEntriesError: Search returned zero entries
            FlattenError: A reference could not be resolved
            StructuralMismatchError: Flattened entries do not fit ``target``
        """
        results = await self.search(parameters, timeout=timeout)
        try:
            if results.total == 0 or not results.items:
                raise NoEntriesError(results.total, len(results.items))
            flattened = self._flatten(results)
            return materialize(flattened, target)
        except ContentfulError as e:
            log_request_error(operation="get_many", error=e)
            raise

    async def get_one(
        self,
        parameters: SearchParameters | None = None,
        target: Any = dict[str, Any],
        *,
        timeout: float | None = None,
    ) -> Any:
        """Fetch exactly one entry, flatten it and load it into ``target``.

        Raises:
            NoEntriesError: Search returned zero entries
            MoreThanOneEntryError: Search returned more than one entry
            FlattenError: A reference could not be resolved
            StructuralMismatchError: Flattened entry does not fit ``target``
        """
        results = await self.search(parameters, timeout=timeout)
        try:
            if results.total == 0 or not results.items:
                raise NoEntriesError(results.total, len(results.items))
            if results.total != 1 or len(results.items) != 1:
                raise MoreThanOneEntryError(results.total, len(results.items))
            flattened = self._flatten(results)
            return materialize(flattened[0], target)
        except ContentfulError as e:
            log_request_error(operation="get_one", error=e)
            raise

    def _flatten(self, results: SearchResults) -> list[dict[str, Any]]:
        start = time.perf_counter()
        flattened = flatten_search_results(results, max_depth=self.max_depth)
        log_flatten_completed(
            items=len(flattened), latency_ms=(time.perf_counter() - start) * 1000
        )
        return flattened

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> ContentfulClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
