"""Lookup of link targets in the ``includes`` side table."""

from __future__ import annotations

from ..core.enums import LinkType
from ..core.exceptions import DanglingReferenceError, InvalidLinkKindError
from ..models import Includes, Item
from .nodes import Link


class IncludeTable:
    """Read-only view of included entries and assets.

    Items are looked up by ID within the sequence selected by the link kind.
    Duplicate IDs are allowed; the first one in sequence order wins.
    """

    def __init__(self, includes: Includes) -> None:
        self._includes = includes

    @property
    def entries(self) -> list[Item]:
        return self._includes.entries

    @property
    def assets(self) -> list[Item]:
        return self._includes.assets

    def sequence_for(self, link: Link) -> list[Item]:
        if link.link_type == LinkType.ENTRY:
            return self.entries
        if link.link_type == LinkType.ASSET:
            return self.assets
        raise InvalidLinkKindError(link.link_type, link.id)

    def find(self, link: Link) -> Item:
        """Return the first included item the link points to.

        Raises:
            InvalidLinkKindError: Link kind is neither Entry nor Asset
            DanglingReferenceError: No included item has the link's ID
        """
        sequence = self.sequence_for(link)
        for item in sequence:
            if item.sys.id == link.id:
                return item
        raise DanglingReferenceError(link.link_type, link.id, list(sequence))
