"""Entries search endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ...core.exceptions import ProviderError
from ...models import SearchResults
from ...runtime.rest import ResponseAdapter, RestEndpointSpec


def _entries_path(params: dict[str, Any]) -> str:
    return f"/spaces/{params['space_id']}/entries"


def build_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    """Build query parameters from the request's SearchParameters."""
    return params["parameters"].to_query()


def build_headers(params: dict[str, Any]) -> dict[str, str]:
    return {"Authorization": f"Bearer {params['token']}"}


# Endpoint specification
SPEC = RestEndpointSpec(
    id="entries",
    build_path=_entries_path,
    build_query=build_query,
    build_headers=build_headers,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing an entries search response."""

    def parse(self, response: Any, params: dict[str, Any]) -> SearchResults:
        try:
            return SearchResults.model_validate(response)
        except ValidationError as e:
            raise ProviderError(f"unexpected search response: {e.error_count()} error(s)") from e
