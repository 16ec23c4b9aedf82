"""Tagged representation of decoded field values.

A decoded JSON field value is classified exactly once into one of four node
shapes. The flattener then dispatches on the node type instead of re-testing
the raw value at every recursion level.

The link test runs before generic object handling: the API uses the same
object shape for a cross-reference and for an authored nested object, and
only the ``{"sys": {"type": "Link", "linkType": ..., "id": ...}}`` signature
tells them apart. Any missing, empty or mismatched part means "plain object".
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from ..core.enums import LINK_MARKER, LinkType


@dataclass(frozen=True)
class Link:
    """Reference to an included entry or asset."""

    id: str
    link_type: str

    @property
    def key(self) -> tuple[str, str]:
        return (self.link_type, self.id)


@dataclass(frozen=True)
class ScalarNode:
    value: Any


@dataclass(frozen=True)
class ListNode:
    items: tuple[Node, ...]


@dataclass(frozen=True)
class ObjectNode:
    fields: Mapping[str, Node]


@dataclass(frozen=True)
class LinkNode:
    link: Link


Node = Union[ScalarNode, ListNode, ObjectNode, LinkNode]


def parse_link_sys(sys: Any) -> Link | None:
    """Parse the inner ``sys`` mapping of a link descriptor.

    Returns None unless ``id`` is a non-empty string, ``linkType`` is Entry
    or Asset and ``type`` is exactly ``"Link"``.
    """
    if not isinstance(sys, Mapping):
        return None
    link_id = sys.get("id")
    if not isinstance(link_id, str) or not link_id:
        return None
    link_type = LinkType.parse(sys.get("linkType"))
    if link_type is None:
        return None
    if sys.get("type") != LINK_MARKER:
        return None
    return Link(id=link_id, link_type=link_type.value)


def parse_link(value: Any) -> Link | None:
    """Parse a ``{"sys": {...}}`` link descriptor, or return None."""
    if not isinstance(value, Mapping):
        return None
    return parse_link_sys(value.get("sys"))


def classify(value: Any) -> Node:
    """Classify a decoded JSON value into a node tree."""
    if isinstance(value, list):
        return ListNode(tuple(classify(element) for element in value))
    if isinstance(value, Mapping):
        link = parse_link(value)
        if link is not None:
            return LinkNode(link)
        return ObjectNode(classify_fields(value))
    return ScalarNode(value)


def classify_fields(fields: Mapping[str, Any]) -> dict[str, Node]:
    """Classify every value of a ``fields`` map, keeping key order."""
    return {key: classify(value) for key, value in fields.items()}
