"""Reference flattening engine.

Turns a search response with a side table of included items into
self-contained mappings, then loads them into caller types.
"""

from .flattener import (
    Flattener,
    append_includes,
    flatten_field,
    flatten_item,
    flatten_items,
    flatten_search_results,
    inject_metadata,
)
from .materialize import materialize
from .nodes import (
    Link,
    LinkNode,
    ListNode,
    Node,
    ObjectNode,
    ScalarNode,
    classify,
    classify_fields,
    parse_link,
    parse_link_sys,
)
from .resolver import IncludeTable

__all__ = [
    # Nodes
    "Link",
    "LinkNode",
    "ListNode",
    "Node",
    "ObjectNode",
    "ScalarNode",
    "classify",
    "classify_fields",
    "parse_link",
    "parse_link_sys",
    # Resolution and flattening
    "IncludeTable",
    "Flattener",
    "append_includes",
    "flatten_field",
    "flatten_item",
    "flatten_items",
    "flatten_search_results",
    "inject_metadata",
    # Materialization
    "materialize",
]
