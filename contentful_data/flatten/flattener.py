"""Reference flattening for search responses.

Architecture:
    The Content Delivery API returns referenced entries and assets once, in
    the ``includes`` side table, and leaves ``{"sys": {"type": "Link", ...}}``
    placeholders in the fields that reference them. This module inlines every
    placeholder with the flattened fields of its target, recursively, so each
    top-level item becomes a self-contained mapping.

    - Field flattening: dispatch on the classified node shape
    - Item flattening: flatten all fields, then inject system metadata
    - Batch flattening: self-inject top-level entries, then flatten each item

Design Decisions:
    - First error wins: any failure aborts the whole item or batch
    - Cycle guard: the chain of items being flattened is tracked, and
      re-entering one of them raises instead of recursing forever
    - Optional depth limit: ``max_depth`` bounds nested reference resolution
    - Metadata wins: injected keys overwrite content fields of the same name

Example:
    A field holding ``{"sys": {"type": "Link", "linkType": "Entry", "id": "e1"}}``
    with ``includes.Entry`` containing ``e1`` whose fields are ``{"key": "value"}``
    flattens to ``{"key": "value", "contentful_id": "e1", ...}``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..core.enums import LinkType
from ..core.exceptions import CyclicReferenceError, ReferenceDepthError
from ..models import (
    CONTENT_TYPE_KEY,
    CREATED_AT_KEY,
    ID_KEY,
    LOCALE_KEY,
    REVISION_KEY,
    UPDATED_AT_KEY,
    Includes,
    Item,
    ItemInfo,
    SearchResults,
)
from .nodes import Link, LinkNode, ListNode, Node, ObjectNode, classify, classify_fields
from .resolver import IncludeTable

logger = logging.getLogger(__name__)


class Flattener:
    """Flattens items against one include table.

    A Flattener holds per-call resolution state and must not be shared
    between concurrent flatten calls.
    """

    def __init__(self, includes: Includes | IncludeTable, *, max_depth: int | None = None) -> None:
        if max_depth is not None and max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        self._table = includes if isinstance(includes, IncludeTable) else IncludeTable(includes)
        self._max_depth = max_depth
        self._chain: list[tuple[str, str]] = []
        self._depth = 0

    @property
    def table(self) -> IncludeTable:
        return self._table

    def flatten_item(self, item: Item) -> dict[str, Any]:
        """Flatten all fields of an item and merge in its system metadata."""
        self._chain.append((item.sys.type, item.sys.id))
        try:
            flattened = self._flatten_fields(classify_fields(item.fields))
        finally:
            self._chain.pop()
        return inject_metadata(flattened, item.sys)

    def flatten_field(self, value: Any) -> Any:
        """Flatten a single decoded field value."""
        return self._flatten_node(classify(value))

    def _flatten_node(self, node: Node) -> Any:
        if isinstance(node, LinkNode):
            return self._resolve(node.link)
        if isinstance(node, ListNode):
            return [self._flatten_node(element) for element in node.items]
        if isinstance(node, ObjectNode):
            # Inline object: flattened like a fields map, without metadata
            return self._flatten_fields(node.fields)
        return node.value

    def _flatten_fields(self, fields: Mapping[str, Node]) -> dict[str, Any]:
        return {key: self._flatten_node(node) for key, node in fields.items()}

    def _resolve(self, link: Link) -> dict[str, Any]:
        if link.key in self._chain:
            raise CyclicReferenceError([*self._chain, link.key])
        if self._max_depth is not None and self._depth >= self._max_depth:
            raise ReferenceDepthError(self._max_depth)

        item = self._table.find(link)
        self._depth += 1
        try:
            return self.flatten_item(item)
        finally:
            self._depth -= 1


def inject_metadata(flattened: dict[str, Any], info: ItemInfo) -> dict[str, Any]:
    """Add the prefixed system metadata keys to a flattened fields map."""
    metadata = {
        ID_KEY: info.id,
        CONTENT_TYPE_KEY: info.content_type_id,
        REVISION_KEY: info.revision,
        CREATED_AT_KEY: info.created_at,
        UPDATED_AT_KEY: info.updated_at,
        LOCALE_KEY: info.locale,
    }
    collisions = sorted(metadata.keys() & flattened.keys())
    if collisions:
        logger.warning(
            "metadata_key_collision",
            extra={"item_id": info.id, "keys": collisions},
        )
    flattened.update(metadata)
    return flattened


def flatten_field(includes: Includes, value: Any, *, max_depth: int | None = None) -> Any:
    """Replace every link in a field value with its flattened target."""
    return Flattener(includes, max_depth=max_depth).flatten_field(value)


def flatten_item(includes: Includes, item: Item, *, max_depth: int | None = None) -> dict[str, Any]:
    """Flatten one item against the given includes."""
    return Flattener(includes, max_depth=max_depth).flatten_item(item)


def flatten_items(
    includes: Includes, items: list[Item], *, max_depth: int | None = None
) -> list[dict[str, Any]]:
    """Flatten a sequence of items, preserving order."""
    flattener = Flattener(includes, max_depth=max_depth)
    return [flattener.flatten_item(item) for item in items]


def append_includes(results: SearchResults) -> None:
    """Append top-level entries to ``includes.entries``.

    The API does not duplicate search results into ``includes``, but results
    may reference each other. Entries whose ID is already included are
    skipped. Assets are never appended.
    """
    entries = results.includes.entries
    included = {entry.sys.id for entry in entries}
    for item in results.items:
        if item.sys.type != LinkType.ENTRY or item.sys.id in included:
            continue
        entries.append(item)
        included.add(item.sys.id)


def flatten_search_results(
    results: SearchResults | Mapping[str, Any], *, max_depth: int | None = None
) -> list[dict[str, Any]]:
    """Self-inject top-level entries and flatten every result item.

    ``results`` may be a decoded response body; it is validated into
    ``SearchResults`` first. An empty ``items`` list yields an empty list.
    """
    if not isinstance(results, SearchResults):
        results = SearchResults.model_validate(results)
    append_includes(results)
    return flatten_items(results.includes, results.items, max_depth=max_depth)
