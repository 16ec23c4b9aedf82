"""Data models for search responses and flattened items.

Architecture:
    Raw response schemas (``SearchResults`` and friends) mirror the JSON
    contract of the entries endpoint. ``Information`` and ``Asset`` describe
    the flattened output and are meant to be used in caller content models.

Design Decisions:
    - Pydantic v2: Validation and alias handling for the camelCase contract
    - Mutable raw models: The batch flattener appends top-level entries to
      ``includes`` of the response it was handed
"""

from .information import (
    CONTENT_TYPE_KEY,
    CREATED_AT_KEY,
    ID_KEY,
    LOCALE_KEY,
    METADATA_KEYS,
    REVISION_KEY,
    UPDATED_AT_KEY,
    Asset,
    AssetFile,
    Information,
)
from .response import ContentTypeLink, Includes, Item, ItemInfo, LinkSys, SearchResults

__all__ = [
    "Asset",
    "AssetFile",
    "ContentTypeLink",
    "Includes",
    "Information",
    "Item",
    "ItemInfo",
    "LinkSys",
    "SearchResults",
    "METADATA_KEYS",
    "ID_KEY",
    "CONTENT_TYPE_KEY",
    "REVISION_KEY",
    "CREATED_AT_KEY",
    "UPDATED_AT_KEY",
    "LOCALE_KEY",
]
