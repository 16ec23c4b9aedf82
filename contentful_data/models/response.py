"""Content Delivery API raw response schemas.

This module defines Pydantic models for the raw search response returned by
the entries endpoint, before any reference flattening takes place.

All models use the exact field names returned by the API as aliases.
``fields`` maps are kept as decoded JSON; the flattening engine classifies
them itself.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LinkSys(BaseModel):
    """Raw ``sys`` block of a link, e.g. the content type of an entry."""

    type: str = Field("", description="Always 'Link' for link descriptors")
    link_type: str = Field("", alias="linkType", description="Kind of linked item")
    id: str = Field("", description="ID of the linked item")

    model_config = ConfigDict(populate_by_name=True)


class ContentTypeLink(BaseModel):
    """Raw ``sys.contentType`` wrapper of an entry."""

    sys: LinkSys = Field(default_factory=LinkSys)


class ItemInfo(BaseModel):
    """Raw ``sys`` block of an entry or asset."""

    type: str = Field("", description="'Entry' or 'Asset'")
    id: str = Field("", description="Item ID")
    content_type: ContentTypeLink | None = Field(
        None,
        alias="contentType",
        description="Content type link (entries only)",
    )
    revision: int = Field(0, description="Published revision")
    created_at: datetime | None = Field(None, alias="createdAt", description="Creation time")
    updated_at: datetime | None = Field(None, alias="updatedAt", description="Last update time")
    locale: str = Field("", description="Locale of the returned fields")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def content_type_id(self) -> str:
        """Content type ID, or an empty string for assets."""
        if self.content_type is None:
            return ""
        return self.content_type.sys.id


class Item(BaseModel):
    """Raw entry or asset."""

    sys: ItemInfo = Field(default_factory=ItemInfo)
    fields: dict[str, Any] = Field(default_factory=dict)


class Includes(BaseModel):
    """Raw ``includes`` side table of referenced items."""

    entries: list[Item] = Field(default_factory=list, alias="Entry")
    assets: list[Item] = Field(default_factory=list, alias="Asset")

    model_config = ConfigDict(populate_by_name=True)


class SearchResults(BaseModel):
    """Raw entries search response."""

    total: int = Field(0, description="Total number of matching entries")
    skip: int = Field(0, description="Number of skipped entries")
    limit: int = Field(0, description="Page size")
    items: list[Item] = Field(default_factory=list)
    includes: Includes = Field(default_factory=Includes)


__all__ = [
    "ContentTypeLink",
    "Includes",
    "Item",
    "ItemInfo",
    "LinkSys",
    "SearchResults",
]
